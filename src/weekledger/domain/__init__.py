"""Domain layer for weekledger.

Services live in ``weekledger.domain.entry`` and ``weekledger.domain.summary``
and are imported from there, since they depend on the store layer.
"""

from weekledger.domain.entities import (
    CategoryTotals,
    CurrentWeekTotals,
    Entry,
    EntryType,
    MonthBucket,
    SeriesPoint,
    SummaryReport,
    Totals,
    WeekBucket,
    WeeklySeriesPoint,
)
from weekledger.domain.aggregation import (
    category_shares,
    category_totals,
    current_week_totals,
    monthly_buckets,
    totals,
    weekly_buckets,
)
from weekledger.domain.periods import months_of_year, week_window, weeks_spanning
from weekledger.domain.series import category_series, monthly_series, weekly_series

__all__ = [
    "CategoryTotals",
    "CurrentWeekTotals",
    "Entry",
    "EntryType",
    "MonthBucket",
    "SeriesPoint",
    "SummaryReport",
    "Totals",
    "WeekBucket",
    "WeeklySeriesPoint",
    "category_shares",
    "category_totals",
    "current_week_totals",
    "monthly_buckets",
    "totals",
    "weekly_buckets",
    "months_of_year",
    "week_window",
    "weeks_spanning",
    "category_series",
    "monthly_series",
    "weekly_series",
]
