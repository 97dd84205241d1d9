"""Aggregation of entries into totals, category sums and period buckets.

Every function here is a pure transformation of the entry collection it is
given. Nothing is cached between calls and the input is never mutated.
"""

from datetime import date, timedelta
from decimal import Decimal
from typing import Iterable, Sequence

from weekledger.domain.entities import (
    ZERO,
    CategoryTotals,
    CurrentWeekTotals,
    Entry,
    EntryType,
    MonthBucket,
    Totals,
    WeekBucket,
)
from weekledger.domain.periods import (
    WORK_WEEK_LENGTH,
    format_week_period,
    months_of_year,
    week_window,
    weeks_spanning,
)
from weekledger.utils.logging_config import get_logger

logger = get_logger(__name__)

HUNDRED = Decimal("100")


def _in_range(entry: Entry, start: date, end: date) -> bool:
    return start <= entry.date <= end


def totals(entries: Iterable[Entry]) -> Totals:
    """Sum amounts per entry type.

    Args:
        entries: Entries to sum

    Returns:
        Totals with balance = income - investment
    """
    sums = {entry_type: ZERO for entry_type in EntryType}
    for entry in entries:
        sums[entry.type] += entry.amount

    return Totals(
        expense=sums[EntryType.EXPENSE],
        income=sums[EntryType.INCOME],
        investment=sums[EntryType.INVESTMENT],
    )


def current_week_totals(entries: Iterable[Entry], now: date) -> CurrentWeekTotals:
    """Totals over the entries inside the work week containing ``now``."""
    start, end = week_window(now)
    week_totals = totals(entry for entry in entries if _in_range(entry, start, end))
    return CurrentWeekTotals(
        expense=week_totals.expense,
        income=week_totals.income,
        investment=week_totals.investment,
        start=start,
        end=end,
        period=format_week_period(start, end),
    )


def category_totals(entries: Iterable[Entry]) -> CategoryTotals:
    """Sum amounts per category, separately for each entry type.

    Keys keep the order in which each category was first seen.
    """
    result = CategoryTotals()
    for entry in entries:
        mapping = result.for_type(entry.type)
        mapping[entry.category] = mapping.get(entry.category, ZERO) + entry.amount
    return result


def category_shares(
    category_map: dict[str, Decimal], total: Decimal
) -> dict[str, Decimal]:
    """Percentage of ``total`` carried by each category.

    Returns zero for every category when the total is zero.
    """
    if total == 0:
        return {name: ZERO for name in category_map}
    return {name: amount / total * HUNDRED for name, amount in category_map.items()}


def weekly_buckets(entries: Sequence[Entry]) -> list[WeekBucket]:
    """Partition entries into Thursday-to-Sunday work weeks.

    Weeks without entries are dropped. Entries dated Monday through
    Wednesday fall outside every window and appear in no bucket, although
    they still count in ``totals``.

    Args:
        entries: Entry snapshot

    Returns:
        Buckets sorted by week start, most recent first; entries inside each
        bucket are sorted by date, most recent first
    """
    if not entries:
        return []

    min_date = min(entry.date for entry in entries)
    max_date = max(entry.date for entry in entries)
    range_start, _ = week_window(min_date)
    _, range_end = week_window(max_date)

    buckets: list[WeekBucket] = []
    bucketed = 0
    for week_start in weeks_spanning(range_start, range_end):
        week_end = week_start + timedelta(days=WORK_WEEK_LENGTH - 1)
        week_entries = [
            entry for entry in entries if _in_range(entry, week_start, week_end)
        ]
        if not week_entries:
            continue

        bucketed += len(week_entries)
        week_totals = totals(week_entries)
        buckets.append(
            WeekBucket(
                week_start=week_start,
                week_end=week_end,
                entries=tuple(
                    sorted(week_entries, key=lambda entry: entry.date, reverse=True)
                ),
                expense=week_totals.expense,
                income=week_totals.income,
                investment=week_totals.investment,
            )
        )

    excluded = len(entries) - bucketed
    if excluded:
        logger.debug(
            "%d of %d entries fall on Monday-Wednesday and belong to no work week",
            excluded,
            len(entries),
        )

    buckets.sort(key=lambda bucket: bucket.week_start, reverse=True)
    return buckets


def monthly_buckets(entries: Sequence[Entry], year: int) -> list[MonthBucket]:
    """Build twelve month buckets for ``year``, keeping empty months."""
    buckets = []
    for month_start, month_end in months_of_year(year):
        month_totals = totals(
            entry for entry in entries if _in_range(entry, month_start, month_end)
        )
        buckets.append(
            MonthBucket(
                month=month_start,
                expense=month_totals.expense,
                income=month_totals.income,
                investment=month_totals.investment,
            )
        )
    return buckets
