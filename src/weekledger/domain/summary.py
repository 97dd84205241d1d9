"""Summary domain service."""

from datetime import date
from typing import Optional

from weekledger.database.base import EntryStore
from weekledger.domain import aggregation
from weekledger.domain.entities import (
    CategoryTotals,
    MonthBucket,
    SummaryReport,
    WeekBucket,
)
from weekledger.utils.logging_config import get_logger

logger = get_logger(__name__)


class SummaryService:
    """Service for building summaries from an entry store snapshot."""

    def __init__(self, store: EntryStore):
        """Initialize summary service.

        Args:
            store: Entry store instance
        """
        self.store = store

    def build_summary_report(
        self,
        now: Optional[date] = None,
        year: Optional[int] = None,
    ) -> SummaryReport:
        """Build every aggregate from a single snapshot.

        Args:
            now: Reference date for the current work week (defaults to today)
            year: Year for the monthly buckets (defaults to the year of ``now``)

        Returns:
            SummaryReport holding totals, current week, categories, weeks and
            months
        """
        if now is None:
            now = date.today()
        if year is None:
            year = now.year

        entries = self.store.snapshot()
        logger.debug("Building summary over %d entries", len(entries))

        return SummaryReport(
            year=year,
            totals=aggregation.totals(entries),
            current_week=aggregation.current_week_totals(entries, now),
            category_totals=aggregation.category_totals(entries),
            weeks=tuple(aggregation.weekly_buckets(entries)),
            months=tuple(aggregation.monthly_buckets(entries, year)),
        )

    def get_weekly_buckets(self) -> list[WeekBucket]:
        """Get work week buckets, most recent first."""
        return aggregation.weekly_buckets(self.store.snapshot())

    def get_monthly_buckets(self, year: int) -> list[MonthBucket]:
        """Get the twelve month buckets of a year."""
        return aggregation.monthly_buckets(self.store.snapshot(), year)

    def get_category_totals(self) -> CategoryTotals:
        """Get per-type category totals."""
        return aggregation.category_totals(self.store.snapshot())
