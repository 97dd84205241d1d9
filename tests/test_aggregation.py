"""Tests for entry aggregation."""

import logging
from datetime import date, timedelta
from decimal import Decimal

import pytest

from weekledger.domain.aggregation import (
    category_shares,
    category_totals,
    current_week_totals,
    monthly_buckets,
    totals,
    weekly_buckets,
)
from weekledger.domain.entities import EntryType, Totals

EXPENSE = EntryType.EXPENSE
INCOME = EntryType.INCOME
INVESTMENT = EntryType.INVESTMENT


@pytest.fixture
def mixed_entries(make_entry):
    """Entries spread over two work weeks, a gap day and two months."""
    return [
        make_entry(INCOME, "100", date(2024, 5, 2), "Ventas"),
        make_entry(EXPENSE, "40", date(2024, 5, 6), "Gas"),  # Monday
        make_entry(INVESTMENT, "25", date(2024, 5, 5), "Bonos"),
        make_entry(EXPENSE, "12.50", date(2024, 5, 4), "Agua"),
        make_entry(INCOME, "80", date(2024, 5, 16), "Efectivo"),
        make_entry(EXPENSE, "7", date(2024, 6, 1), "Gas"),  # Saturday
    ]


class TestTotals:
    def test_totals_sum_per_type(self, mixed_entries):
        result = totals(mixed_entries)

        assert result.income == Decimal("180")
        assert result.expense == Decimal("59.50")
        assert result.investment == Decimal("25")

    def test_balance_excludes_expense(self, mixed_entries):
        result = totals(mixed_entries)

        assert result.balance == result.income - result.investment
        assert result.balance == Decimal("155")

    def test_balance_can_be_negative(self, make_entry):
        result = totals(
            [
                make_entry(INCOME, "10", date(2024, 5, 2)),
                make_entry(INVESTMENT, "30", date(2024, 5, 2)),
            ]
        )
        assert result.balance == Decimal("-20")

    def test_empty_input_gives_zero_totals(self):
        result = totals([])

        assert result == Totals()
        assert result.expense == 0
        assert result.income == 0
        assert result.investment == 0
        assert result.balance == 0

    def test_for_type(self, mixed_entries):
        result = totals(mixed_entries)
        assert result.for_type(INCOME) == result.income
        assert result.for_type(EXPENSE) == result.expense


class TestCurrentWeekTotals:
    def test_only_entries_in_window_are_counted(self, mixed_entries, make_entry):
        entries = mixed_entries + [make_entry(INCOME, "999", date(2024, 4, 28))]

        result = current_week_totals(entries, date(2024, 5, 4))

        assert result.start == date(2024, 5, 2)
        assert result.end == date(2024, 5, 5)
        assert result.income == Decimal("100")
        assert result.expense == Decimal("12.50")
        assert result.investment == Decimal("25")
        assert result.balance == Decimal("75")
        assert result.period == "2 May - 5 May"

    def test_monday_reference_uses_previous_window(self, mixed_entries):
        """On a Monday the current window is the Thursday-Sunday just ended."""
        result = current_week_totals(mixed_entries, date(2024, 5, 6))

        assert result.start == date(2024, 5, 2)
        # The Monday expense itself is outside that window
        assert result.expense == Decimal("12.50")

    def test_no_entries_in_window(self, mixed_entries):
        result = current_week_totals(mixed_entries, date(2024, 7, 4))

        assert result.income == 0
        assert result.balance == 0
        assert result.period == "4 Jul - 7 Jul"


class TestCategoryTotals:
    def test_sums_per_category(self, make_entry):
        entries = [
            make_entry(EXPENSE, "30", date(2024, 5, 2), "Gas"),
            make_entry(EXPENSE, "20", date(2024, 5, 3), "Gas"),
            make_entry(EXPENSE, "10", date(2024, 5, 4), "Agua"),
        ]

        result = category_totals(entries)

        assert result.expense == {"Gas": Decimal("50"), "Agua": Decimal("10")}
        assert result.income == {}
        assert result.investment == {}

    def test_keys_keep_first_occurrence_order(self, make_entry):
        entries = [
            make_entry(EXPENSE, "1", date(2024, 5, 2), "Transporte"),
            make_entry(EXPENSE, "1", date(2024, 5, 2), "Agua"),
            make_entry(EXPENSE, "1", date(2024, 5, 2), "Transporte"),
            make_entry(EXPENSE, "1", date(2024, 5, 2), "Carne"),
        ]

        assert list(category_totals(entries).expense) == ["Transporte", "Agua", "Carne"]

    def test_same_label_is_separate_per_type(self, make_entry):
        entries = [
            make_entry(EXPENSE, "5", date(2024, 5, 2), "Servicios"),
            make_entry(INCOME, "8", date(2024, 5, 2), "Servicios"),
        ]

        result = category_totals(entries)

        assert result.expense == {"Servicios": Decimal("5")}
        assert result.income == {"Servicios": Decimal("8")}

    def test_category_sums_match_type_totals(self, mixed_entries):
        by_category = category_totals(mixed_entries)
        overall = totals(mixed_entries)

        for entry_type in EntryType:
            assert sum(by_category.for_type(entry_type).values()) == overall.for_type(
                entry_type
            )


class TestCategoryShares:
    def test_percentages(self):
        shares = category_shares(
            {"Gas": Decimal("75"), "Agua": Decimal("25")}, Decimal("100")
        )
        assert shares == {"Gas": Decimal("75"), "Agua": Decimal("25")}

    def test_zero_total(self):
        shares = category_shares({"Gas": Decimal("0")}, Decimal("0"))
        assert shares == {"Gas": Decimal("0")}


class TestWeeklyBuckets:
    def test_monday_entry_excluded_from_weeks(self, make_entry):
        """Regression: Monday-Wednesday entries belong to no work week."""
        entries = [
            make_entry(INCOME, "100", date(2024, 5, 2)),
            make_entry(EXPENSE, "40", date(2024, 5, 6)),
        ]

        overall = totals(entries)
        assert overall.income == Decimal("100")
        assert overall.expense == Decimal("40")
        assert overall.investment == 0
        assert overall.balance == Decimal("100")

        buckets = weekly_buckets(entries)
        assert len(buckets) == 1
        bucket = buckets[0]
        assert bucket.week_start == date(2024, 5, 2)
        assert bucket.week_end == date(2024, 5, 5)
        assert bucket.income == Decimal("100")
        assert bucket.expense == 0
        assert [entry.date for entry in bucket.entries] == [date(2024, 5, 2)]

    def test_gap_exclusion_is_logged(self, make_entry, caplog):
        entries = [
            make_entry(INCOME, "100", date(2024, 5, 2)),
            make_entry(EXPENSE, "40", date(2024, 5, 7)),
        ]

        with caplog.at_level(logging.DEBUG, logger="weekledger"):
            weekly_buckets(entries)

        assert "1 of 2 entries" in caplog.text

    def test_empty_weeks_dropped_and_sorted_descending(self, mixed_entries):
        buckets = weekly_buckets(mixed_entries)

        assert [bucket.week_start for bucket in buckets] == [
            date(2024, 5, 30),
            date(2024, 5, 16),
            date(2024, 5, 2),
        ]
        assert all(bucket.entries for bucket in buckets)

    def test_entries_sorted_by_date_descending(self, mixed_entries):
        first_week = weekly_buckets(mixed_entries)[-1]

        assert [entry.date for entry in first_week.entries] == [
            date(2024, 5, 5),
            date(2024, 5, 4),
            date(2024, 5, 2),
        ]
        assert first_week.income == Decimal("100")
        assert first_week.expense == Decimal("12.50")
        assert first_week.investment == Decimal("25")
        assert first_week.balance == Decimal("75")

    def test_only_gap_days_gives_no_buckets(self, make_entry):
        entries = [
            make_entry(EXPENSE, "1", date(2024, 5, 6)),
            make_entry(EXPENSE, "1", date(2024, 5, 8)),
        ]
        assert weekly_buckets(entries) == []

    def test_empty_input(self):
        assert weekly_buckets([]) == []

    def test_no_bucket_is_empty_over_long_range(self, make_entry):
        start = date(2024, 1, 1)
        entries = [
            make_entry(EXPENSE, "1", start + timedelta(days=offset))
            for offset in range(0, 120, 5)
        ]

        buckets = weekly_buckets(entries)

        assert buckets
        assert all(len(bucket.entries) > 0 for bucket in buckets)
        for bucket in buckets:
            for entry in bucket.entries:
                assert bucket.week_start <= entry.date <= bucket.week_end


class TestMonthlyBuckets:
    def test_always_twelve_months(self, mixed_entries):
        buckets = monthly_buckets(mixed_entries, 2024)

        assert len(buckets) == 12
        assert [bucket.month for bucket in buckets] == [
            date(2024, month, 1) for month in range(1, 13)
        ]

    def test_month_sums_and_empty_months(self, mixed_entries):
        buckets = monthly_buckets(mixed_entries, 2024)

        may = buckets[4]
        assert may.income == Decimal("180")
        assert may.expense == Decimal("52.50")
        assert may.investment == Decimal("25")

        june = buckets[5]
        assert june.expense == Decimal("7")

        january = buckets[0]
        assert (january.income, january.expense, january.investment) == (0, 0, 0)
        assert january.label == "Jan"

    def test_month_boundaries_inclusive_and_other_years_ignored(self, make_entry):
        entries = [
            make_entry(INCOME, "1", date(2024, 1, 31)),
            make_entry(INCOME, "2", date(2024, 2, 1)),
            make_entry(INCOME, "4", date(2024, 12, 31)),
            make_entry(INCOME, "8", date(2023, 12, 31)),
        ]

        buckets = monthly_buckets(entries, 2024)

        assert buckets[0].income == Decimal("1")
        assert buckets[1].income == Decimal("2")
        assert buckets[11].income == Decimal("4")
        assert sum(bucket.income for bucket in buckets) == Decimal("7")

    def test_empty_input(self):
        buckets = monthly_buckets([], 2024)

        assert len(buckets) == 12
        assert all(
            bucket.income == bucket.expense == bucket.investment == 0
            for bucket in buckets
        )


def test_recomputation_is_deterministic_and_input_untouched(mixed_entries):
    snapshot = tuple(mixed_entries)

    assert totals(snapshot) == totals(snapshot)
    assert category_totals(snapshot) == category_totals(snapshot)
    assert weekly_buckets(snapshot) == weekly_buckets(snapshot)
    assert monthly_buckets(snapshot, 2024) == monthly_buckets(snapshot, 2024)
    assert current_week_totals(snapshot, date(2024, 5, 3)) == current_week_totals(
        snapshot, date(2024, 5, 3)
    )
    assert snapshot == tuple(mixed_entries)
