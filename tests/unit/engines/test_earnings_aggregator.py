"""
Earnings Aggregator Unit Tests

Tests for totals, days worked and monthly income across shifts.
"""

from datetime import datetime
from decimal import Decimal

from earnings_engine.services.earnings_aggregator import (
    aggregate_earnings,
    aggregate_monthly_income,
    month_key,
)
from tests.factories import make_interval, make_profile


def _profiles(*profiles):
    return {p.profile_id: p for p in profiles}


class TestAggregateEarnings:
    """Test totals and distinct days worked."""

    def test_sums_resolvable_shifts(self, profile):
        intervals = [
            make_interval(datetime(2025, 1, 6, 9, 0), datetime(2025, 1, 6, 13, 0)),
            make_interval(datetime(2025, 1, 7, 9, 0), datetime(2025, 1, 7, 11, 0)),
        ]

        summary = aggregate_earnings(intervals, _profiles(profile))

        # 4h + 2h at 40/hr
        assert summary.total_earnings == Decimal("240")
        assert summary.distinct_days_worked == 2
        assert summary.intervals_counted == 2
        assert summary.intervals_skipped == 0
        assert summary.calculation_notes == []

    def test_unknown_profile_excluded(self, profile):
        """3 shifts over 2 dates, one referencing an unknown profile."""
        intervals = [
            make_interval(datetime(2025, 1, 6, 9, 0), datetime(2025, 1, 6, 13, 0)),
            make_interval(datetime(2025, 1, 6, 18, 0), datetime(2025, 1, 6, 20, 0)),
            make_interval(
                datetime(2025, 1, 7, 9, 0),
                datetime(2025, 1, 7, 17, 0),
                compensation_profile_id="deleted-job",
            ),
        ]

        summary = aggregate_earnings(intervals, _profiles(profile))

        # Only 2025-01-06 is backed by a resolvable shift
        assert summary.distinct_days_worked == 1
        # 4h + 2h at 40/hr; the unknown 8h shift adds nothing
        assert summary.total_earnings == Decimal("240")
        assert summary.intervals_skipped == 1
        assert "unresolved_profile" in summary.calculation_notes[0]

    def test_unknown_profile_on_worked_date(self, profile):
        intervals = [
            make_interval(datetime(2025, 1, 6, 9, 0), datetime(2025, 1, 6, 10, 0)),
            make_interval(datetime(2025, 1, 7, 9, 0), datetime(2025, 1, 7, 10, 0)),
            make_interval(
                datetime(2025, 1, 7, 12, 0),
                datetime(2025, 1, 7, 14, 0),
                compensation_profile_id="missing",
            ),
        ]

        summary = aggregate_earnings(intervals, _profiles(profile))

        assert summary.distinct_days_worked == 2
        assert summary.total_earnings == Decimal("80")

    def test_multiple_jobs(self, profile, bonus_profile):
        intervals = [
            make_interval(datetime(2025, 1, 6, 9, 0), datetime(2025, 1, 6, 10, 0)),
            make_interval(
                datetime(2025, 1, 6, 12, 0),
                datetime(2025, 1, 6, 13, 0),
                compensation_profile_id="shop",
                sales_amount=Decimal("500"),
            ),
        ]

        summary = aggregate_earnings(intervals, _profiles(profile, bonus_profile))

        # 40 + (35 + 50 bonus + 25 travel)
        assert summary.total_earnings == Decimal("150")
        assert summary.distinct_days_worked == 1

    def test_overnight_shift_counts_start_date(self, profile):
        intervals = [
            make_interval(datetime(2025, 1, 6, 22, 0), datetime(2025, 1, 7, 2, 0)),
        ]

        summary = aggregate_earnings(intervals, _profiles(profile))

        assert summary.distinct_days_worked == 1

    def test_inverted_shift_still_counts_its_day(self, profile):
        intervals = [
            make_interval(datetime(2025, 1, 6, 17, 0), datetime(2025, 1, 6, 9, 0)),
        ]

        summary = aggregate_earnings(intervals, _profiles(profile))

        assert summary.total_earnings == Decimal("0")
        assert summary.distinct_days_worked == 1

    def test_empty_collection(self, profile):
        summary = aggregate_earnings([], _profiles(profile))

        assert summary.total_earnings == Decimal("0")
        assert summary.distinct_days_worked == 0

    def test_empty_profile_lookup(self, profile):
        intervals = [make_interval(datetime(2025, 1, 6, 9, 0), datetime(2025, 1, 6, 10, 0))]

        summary = aggregate_earnings(intervals, {})

        assert summary.total_earnings == Decimal("0")
        assert summary.distinct_days_worked == 0
        assert summary.intervals_skipped == 1


class TestMonthlyIncome:
    """Test income per calendar month."""

    def test_month_key(self):
        assert month_key(datetime(2025, 3, 9).date()) == "2025-03"

    def test_months_with_shifts_sorted(self, profile):
        intervals = [
            make_interval(datetime(2025, 2, 3, 9, 0), datetime(2025, 2, 3, 10, 0)),
            make_interval(datetime(2025, 1, 6, 9, 0), datetime(2025, 1, 6, 11, 0)),
            make_interval(datetime(2025, 1, 20, 9, 0), datetime(2025, 1, 20, 10, 0)),
        ]

        income = aggregate_monthly_income(intervals, _profiles(profile))

        assert [(m.month, m.income) for m in income] == [
            ("2025-01", Decimal("120")),
            ("2025-02", Decimal("40")),
        ]

    def test_requested_months_zero_filled(self, profile):
        intervals = [
            make_interval(datetime(2024, 12, 2, 9, 0), datetime(2024, 12, 2, 10, 0)),
            make_interval(datetime(2025, 2, 3, 9, 0), datetime(2025, 2, 3, 10, 0)),
        ]

        income = aggregate_monthly_income(
            intervals, _profiles(profile), months=["2025-01", "2025-02"]
        )

        # December falls outside the requested months
        assert [(m.month, m.income) for m in income] == [
            ("2025-01", Decimal("0")),
            ("2025-02", Decimal("40")),
        ]

    def test_repeated_month_listed_once(self, profile):
        intervals = [
            make_interval(datetime(2025, 1, 6, 9, 0), datetime(2025, 1, 6, 10, 0)),
        ]

        income = aggregate_monthly_income(
            intervals, _profiles(profile), months=["2025-01", "2025-02", "2025-01"]
        )

        assert [(m.month, m.income) for m in income] == [
            ("2025-01", Decimal("40")),
            ("2025-02", Decimal("0")),
        ]
        assert sum(m.income for m in income) == Decimal("40")

    def test_unknown_profile_contributes_nothing(self, profile):
        intervals = [
            make_interval(
                datetime(2025, 1, 6, 9, 0),
                datetime(2025, 1, 6, 10, 0),
                compensation_profile_id="missing",
            ),
        ]

        assert aggregate_monthly_income(intervals, _profiles(profile)) == []

    def test_custom_profile_rates(self):
        profile = make_profile(profile_id="night", hourly_rate=Decimal("50"))
        intervals = [
            make_interval(
                datetime(2025, 1, 6, 9, 0),
                datetime(2025, 1, 6, 10, 0),
                compensation_profile_id="night",
            ),
        ]

        income = aggregate_monthly_income(intervals, _profiles(profile))

        assert income[0].income == Decimal("50")
