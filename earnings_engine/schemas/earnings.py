"""
Shift Earnings Schemas

Input/output models for shift earnings and reporting aggregates.
"""

from datetime import datetime
from decimal import Decimal
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, computed_field


class PayBucket(str, Enum):
    """Buckets that worked time is priced into."""

    REGULAR = "regular"
    OVERTIME_TIER1 = "overtime_tier1"
    OVERTIME_TIER2 = "overtime_tier2"
    SABBATH = "sabbath"


class DegradedCondition(str, Enum):
    """Non-fatal conditions under which a result degrades toward zero."""

    UNRESOLVED_PROFILE = "unresolved_profile"
    INVERTED_OR_EMPTY_INTERVAL = "inverted_or_empty_interval"


class CompensationProfile(BaseModel):
    """
    Pay settings for a job, supplied by the caller per computation.

    Snapshots are frozen; the engine never mutates or persists them.
    """

    model_config = ConfigDict(frozen=True)

    profile_id: str | None = Field(default=None, description="Caller's identifier for the job")
    name: str | None = Field(default=None, description="Display name of the job")

    hourly_rate: Decimal = Field(..., ge=0, description="Base hourly rate")
    overtime_threshold_hours: Decimal = Field(
        default=Decimal("8"),
        ge=0,
        description="Non-premium hours per shift paid at the regular rate",
    )
    is_eligible_for_bonus: bool = Field(
        default=False,
        description="Whether a sales bonus is paid for this job",
    )
    bonus_percentage: Decimal = Field(
        default=Decimal("0"),
        ge=0,
        le=100,
        description="Percentage of shift sales paid as bonus",
    )
    travel_rate_per_shift: Decimal = Field(
        default=Decimal("0"),
        ge=0,
        description="Flat travel reimbursement per shift",
    )


class WorkInterval(BaseModel):
    """
    A single worked shift.

    Intervals with start >= end are accepted and priced as empty.
    """

    model_config = ConfigDict(frozen=True)

    interval_id: str | None = Field(default=None, description="Caller's identifier for the shift")
    start: datetime = Field(..., description="Shift start (local wall-clock)")
    end: datetime = Field(..., description="Shift end (local wall-clock)")
    compensation_profile_id: str = Field(..., description="Key into the profile lookup")
    sales_amount: Decimal | None = Field(
        default=None,
        ge=0,
        description="Sales made during the shift, used for bonus pay",
    )


class TierSelection(BaseModel):
    """Bucket and rate multiplier chosen for a slice of worked time."""

    model_config = ConfigDict(frozen=True)

    bucket: PayBucket
    multiplier: Decimal


class HourSlice(BaseModel):
    """Sub-interval of a shift no longer than one wall-clock hour."""

    model_config = ConfigDict(frozen=True)

    start: datetime
    end: datetime
    hours: Decimal


class EarningsBreakdown(BaseModel):
    """
    Earnings for one shift, split per pay bucket.

    total_earnings is always the exact sum of the bucket pays plus
    bonus_pay and travel_pay.
    """

    regular_hours: Decimal = Decimal("0")
    regular_pay: Decimal = Decimal("0")
    overtime1_hours: Decimal = Decimal("0")
    overtime1_pay: Decimal = Decimal("0")
    overtime2_hours: Decimal = Decimal("0")
    overtime2_pay: Decimal = Decimal("0")
    sabbath_hours: Decimal = Decimal("0")
    sabbath_pay: Decimal = Decimal("0")

    bonus_pay: Decimal = Decimal("0")
    travel_pay: Decimal = Decimal("0")
    total_earnings: Decimal = Decimal("0")

    calculation_notes: list[str] = Field(
        default_factory=list,
        description="Degraded conditions met during the calculation",
    )

    @computed_field
    @property
    def total_hours(self) -> Decimal:
        """Hours across all buckets."""
        return self.regular_hours + self.overtime1_hours + self.overtime2_hours + self.sabbath_hours


class EarningsSummary(BaseModel):
    """Totals across a collection of shifts."""

    total_earnings: Decimal = Decimal("0")
    distinct_days_worked: int = 0

    intervals_counted: int = 0
    intervals_skipped: int = Field(
        default=0,
        description="Shifts whose profile could not be resolved",
    )
    calculation_notes: list[str] = Field(default_factory=list)


class MonthlyIncome(BaseModel):
    """Income earned in one calendar month."""

    month: str = Field(..., description="Calendar month (YYYY-MM)")
    income: Decimal = Decimal("0")
