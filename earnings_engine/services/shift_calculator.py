"""
Shift Earnings Calculator

Pure calculation logic for the earnings of a single worked shift.

A shift is priced one elapsed hour at a time:
1. Slices starting inside the Sabbath window are paid at 150%
2. Other slices are paid by overtime tier (100% / 125% / 150%),
   chosen from the non-Sabbath hours already worked in the shift
3. A sales bonus and a flat travel amount are added per shift
"""

import logging
from collections.abc import Iterator
from datetime import datetime, timedelta, timezone, tzinfo
from decimal import Decimal

from earnings_engine.schemas.earnings import (
    CompensationProfile,
    DegradedCondition,
    EarningsBreakdown,
    HourSlice,
    PayBucket,
    WorkInterval,
)
from earnings_engine.services.rate_resolver import resolve_tier
from earnings_engine.services.sabbath_window import is_premium_window

logger = logging.getLogger(__name__)

SLICE_LENGTH = timedelta(hours=1)
SABBATH_MULTIPLIER = Decimal("1.5")

_MICROSECONDS_PER_HOUR = Decimal(3_600_000_000)


def _hours_between(delta: timedelta) -> Decimal:
    """Convert a timedelta to fractional hours without float rounding."""
    return Decimal(delta // timedelta(microseconds=1)) / _MICROSECONDS_PER_HOUR


def iter_hour_slices(interval: WorkInterval) -> Iterator[HourSlice]:
    """
    Walk a shift in slices of at most one elapsed hour.

    Slices start at interval.start and every one but the last is exactly
    one elapsed hour long. Yields nothing for an inverted or empty interval.

    Aware intervals are walked in UTC so a DST change neither adds nor
    drops an hour; slice bounds are reported in the interval's own zone.
    """
    local_tz = interval.start.tzinfo
    pointer = interval.start
    end = interval.end
    if local_tz is not None:
        pointer = pointer.astimezone(timezone.utc)
        if end.tzinfo is not None:
            end = end.astimezone(timezone.utc)

    while pointer < end:
        slice_end = min(pointer + SLICE_LENGTH, end)
        yield HourSlice(
            start=_to_zone(pointer, local_tz),
            end=_to_zone(slice_end, local_tz),
            hours=_hours_between(slice_end - pointer),
        )
        pointer = slice_end


def _to_zone(instant: datetime, tz: tzinfo | None) -> datetime:
    return instant if tz is None else instant.astimezone(tz)


def calculate_shift_earnings(
    interval: WorkInterval, profile: CompensationProfile | None
) -> EarningsBreakdown:
    """
    Calculate the earnings breakdown for one shift.

    Algorithm:
    1. Missing profile or start >= end: all-zero breakdown
    2. For each hour slice:
       - Sabbath window: hours and 1.5x pay go to the sabbath bucket;
         the overtime counter is not advanced
       - Otherwise: the whole slice goes to the tier selected by the
         counter before the slice, then the counter advances
    3. Bonus = sales * bonus_percentage / 100, if eligible and sales given
    4. Travel = flat per-shift amount, if positive
    5. Total = bucket pays + bonus + travel

    No rounding is applied; callers format for display.
    """
    if profile is None:
        return EarningsBreakdown(calculation_notes=[DegradedCondition.UNRESOLVED_PROFILE.value])

    if interval.start >= interval.end:
        logger.debug(
            "Interval %s has start %s >= end %s; pricing as empty",
            interval.interval_id,
            interval.start,
            interval.end,
        )
        return EarningsBreakdown(
            calculation_notes=[DegradedCondition.INVERTED_OR_EMPTY_INTERVAL.value]
        )

    rate = profile.hourly_rate
    hours: dict[PayBucket, Decimal] = {bucket: Decimal("0") for bucket in PayBucket}
    pay: dict[PayBucket, Decimal] = {bucket: Decimal("0") for bucket in PayBucket}
    cumulative_hours = Decimal("0")

    for hour_slice in iter_hour_slices(interval):
        if is_premium_window(hour_slice.start):
            hours[PayBucket.SABBATH] += hour_slice.hours
            pay[PayBucket.SABBATH] += hour_slice.hours * rate * SABBATH_MULTIPLIER
            continue

        tier = resolve_tier(cumulative_hours, profile)
        hours[tier.bucket] += hour_slice.hours
        pay[tier.bucket] += hour_slice.hours * rate * tier.multiplier
        cumulative_hours += hour_slice.hours

    bonus_pay = Decimal("0")
    if profile.is_eligible_for_bonus and interval.sales_amount is not None:
        bonus_pay = interval.sales_amount * profile.bonus_percentage / Decimal("100")

    travel_pay = Decimal("0")
    if profile.travel_rate_per_shift > 0:
        travel_pay = profile.travel_rate_per_shift

    total_earnings = sum(pay.values(), Decimal("0")) + bonus_pay + travel_pay

    return EarningsBreakdown(
        regular_hours=hours[PayBucket.REGULAR],
        regular_pay=pay[PayBucket.REGULAR],
        overtime1_hours=hours[PayBucket.OVERTIME_TIER1],
        overtime1_pay=pay[PayBucket.OVERTIME_TIER1],
        overtime2_hours=hours[PayBucket.OVERTIME_TIER2],
        overtime2_pay=pay[PayBucket.OVERTIME_TIER2],
        sabbath_hours=hours[PayBucket.SABBATH],
        sabbath_pay=pay[PayBucket.SABBATH],
        bonus_pay=bonus_pay,
        travel_pay=travel_pay,
        total_earnings=total_earnings,
    )
