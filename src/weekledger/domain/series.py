"""Reshape aggregates into labelled series for charts and tables."""

from decimal import Decimal
from typing import Sequence

from weekledger.domain.entities import (
    EntryType,
    MonthBucket,
    SeriesPoint,
    WeekBucket,
    WeeklySeriesPoint,
)
from weekledger.domain.periods import format_week_label

DEFAULT_WEEK_LIMIT = 8


def category_series(category_map: dict[str, Decimal]) -> list[SeriesPoint]:
    """One point per category, in the mapping's own order."""
    return [SeriesPoint(label=name, value=value) for name, value in category_map.items()]


def weekly_series(
    week_buckets: Sequence[WeekBucket], limit: int = DEFAULT_WEEK_LIMIT
) -> list[WeeklySeriesPoint]:
    """Most recent ``limit`` weeks in ascending chronological order.

    Args:
        week_buckets: Buckets sorted most recent first, as produced by
            ``weekly_buckets``
        limit: Number of weeks to keep

    Returns:
        Points labelled by week start ('dd/mm'), oldest first
    """
    recent = list(week_buckets[:limit])
    recent.reverse()
    return [
        WeeklySeriesPoint(
            label=format_week_label(bucket.week_start),
            income=bucket.income,
            expense=bucket.expense,
            investment=bucket.investment,
        )
        for bucket in recent
    ]


def monthly_series(
    month_buckets: Sequence[MonthBucket], field: "EntryType | str"
) -> list[SeriesPoint]:
    """Project one type's monthly sums into (month name, value) points."""
    entry_type = EntryType.parse(field)
    return [
        SeriesPoint(label=bucket.label, value=getattr(bucket, entry_type.value))
        for bucket in month_buckets
    ]
