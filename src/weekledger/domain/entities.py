"""Domain model entities for weekledger.

These are pure data classes describing entries and the aggregates derived
from them. Aggregates are never persisted; they are rebuilt from an entry
snapshot every time they are needed.
"""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Optional

from weekledger.domain.errors import ValidationError, unknown_entry_type
from weekledger.domain.periods import month_label

ZERO = Decimal("0")


class EntryType(str, Enum):
    """Closed set of money movement types."""

    EXPENSE = "expense"
    INCOME = "income"
    INVESTMENT = "investment"

    @classmethod
    def parse(cls, value: "str | EntryType") -> "EntryType":
        """Resolve a raw string (case-insensitive) to an entry type.

        Raises:
            ValidationError: If the value is not one of the three types
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(value.strip().lower())
        except ValueError:
            raise ValidationError(unknown_entry_type(value)) from None


@dataclass(frozen=True)
class Entry:
    """A single dated, typed, categorized money movement."""

    id: str
    type: EntryType
    category: str
    amount: Decimal
    date: date
    description: Optional[str] = None


@dataclass(frozen=True)
class Totals:
    """Per-type sums. Balance is income minus investment; expense is left out."""

    expense: Decimal = ZERO
    income: Decimal = ZERO
    investment: Decimal = ZERO

    @property
    def balance(self) -> Decimal:
        return self.income - self.investment

    def for_type(self, entry_type: EntryType) -> Decimal:
        return getattr(self, entry_type.value)


@dataclass(frozen=True)
class CurrentWeekTotals(Totals):
    """Totals restricted to the work week containing a reference date."""

    start: Optional[date] = None
    end: Optional[date] = None
    period: str = ""


@dataclass(frozen=True)
class CategoryTotals:
    """Category sums, one insertion-ordered mapping per entry type."""

    expense: dict[str, Decimal] = field(default_factory=dict)
    income: dict[str, Decimal] = field(default_factory=dict)
    investment: dict[str, Decimal] = field(default_factory=dict)

    def for_type(self, entry_type: EntryType) -> dict[str, Decimal]:
        return getattr(self, entry_type.value)


@dataclass(frozen=True)
class WeekBucket:
    """Aggregate for one Thursday-to-Sunday work week."""

    week_start: date
    week_end: date
    entries: tuple[Entry, ...]
    expense: Decimal
    income: Decimal
    investment: Decimal

    @property
    def balance(self) -> Decimal:
        return self.income - self.investment


@dataclass(frozen=True)
class MonthBucket:
    """Aggregate for one calendar month; month is the first day of it."""

    month: date
    expense: Decimal
    income: Decimal
    investment: Decimal

    @property
    def label(self) -> str:
        return month_label(self.month)


@dataclass(frozen=True)
class SeriesPoint:
    """Generic (label, value) pair for presentation consumers."""

    label: str
    value: Decimal


@dataclass(frozen=True)
class WeeklySeriesPoint:
    """One weekly chart point carrying the three type sums."""

    label: str
    income: Decimal
    expense: Decimal
    investment: Decimal


@dataclass(frozen=True)
class SummaryReport:
    """Every aggregate computed from a single entry snapshot."""

    year: int
    totals: Totals
    current_week: CurrentWeekTotals
    category_totals: CategoryTotals
    weeks: tuple[WeekBucket, ...] = ()
    months: tuple[MonthBucket, ...] = ()
