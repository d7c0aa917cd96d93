"""
Earnings Aggregator

Sums shift earnings over a collection of shifts for reporting.
"""

import logging
from collections.abc import Iterable, Mapping, Sequence
from datetime import date
from decimal import Decimal

from earnings_engine.schemas.earnings import (
    CompensationProfile,
    DegradedCondition,
    EarningsSummary,
    MonthlyIncome,
    WorkInterval,
)
from earnings_engine.services.shift_calculator import calculate_shift_earnings

logger = logging.getLogger(__name__)


def month_key(day: date) -> str:
    """Format a date's calendar month as YYYY-MM."""
    return f"{day.year:04d}-{day.month:02d}"


def aggregate_earnings(
    intervals: Iterable[WorkInterval],
    profiles_by_id: Mapping[str, CompensationProfile],
) -> EarningsSummary:
    """
    Total the earnings of a collection of shifts.

    Each shift's profile is looked up in the caller-owned mapping. A shift
    whose profile is missing contributes nothing and its date is not
    counted as worked. Days worked are distinct calendar dates of the
    shifts' local start times.
    """
    notes: list[str] = []
    total_earnings = Decimal("0")
    worked_days: set[date] = set()
    counted = 0
    skipped = 0

    for interval in intervals:
        profile = profiles_by_id.get(interval.compensation_profile_id)
        if profile is None:
            logger.debug(
                "No compensation profile %r for interval %s; skipping",
                interval.compensation_profile_id,
                interval.interval_id,
            )
            skipped += 1
            continue

        breakdown = calculate_shift_earnings(interval, profile)
        total_earnings += breakdown.total_earnings
        worked_days.add(interval.start.date())
        counted += 1

    if skipped:
        notes.append(
            f"{DegradedCondition.UNRESOLVED_PROFILE.value}: "
            f"{skipped} interval(s) reference an unknown compensation profile"
        )

    return EarningsSummary(
        total_earnings=total_earnings,
        distinct_days_worked=len(worked_days),
        intervals_counted=counted,
        intervals_skipped=skipped,
        calculation_notes=notes,
    )


def aggregate_monthly_income(
    intervals: Iterable[WorkInterval],
    profiles_by_id: Mapping[str, CompensationProfile],
    months: Sequence[str] | None = None,
) -> list[MonthlyIncome]:
    """
    Total shift earnings per calendar month of the shift start.

    When months is given (YYYY-MM keys), exactly those months are returned
    in that order, once each and zero-filled, and shifts outside them are
    ignored.
    Otherwise every month with a resolvable shift is returned, oldest first.
    """
    income: dict[str, Decimal] = {}
    if months is not None:
        months = list(dict.fromkeys(months))
        income = {key: Decimal("0") for key in months}

    for interval in intervals:
        profile = profiles_by_id.get(interval.compensation_profile_id)
        if profile is None:
            continue

        key = month_key(interval.start.date())
        if months is not None and key not in income:
            continue

        breakdown = calculate_shift_earnings(interval, profile)
        income[key] = income.get(key, Decimal("0")) + breakdown.total_earnings

    ordered = list(months) if months is not None else sorted(income)
    return [MonthlyIncome(month=key, income=income[key]) for key in ordered]
