"""
Earnings MCP Tools

Shift earnings and reporting aggregates exposed as MCP tools.
"""

from datetime import datetime
from decimal import Decimal
from typing import Any
from zoneinfo import ZoneInfo

from fastmcp import FastMCP

from earnings_engine.config import get_settings
from earnings_engine.schemas.earnings import (
    CompensationProfile,
    EarningsBreakdown,
    EarningsSummary,
    WorkInterval,
)
from earnings_engine.services.earnings_aggregator import (
    aggregate_earnings,
    aggregate_monthly_income,
)
from earnings_engine.services.shift_calculator import calculate_shift_earnings

# Initialize MCP server (will be started from server.py)
mcp = FastMCP(get_settings().app_name)

_PROFILE_DECIMAL_FIELDS = (
    "hourly_rate",
    "overtime_threshold_hours",
    "bonus_percentage",
    "travel_rate_per_shift",
)


def to_local(instant: datetime) -> datetime:
    """
    Convert an aware timestamp to the configured local wall-clock zone.

    Naive timestamps, and all timestamps when no local_timezone is
    configured, are returned unchanged.
    """
    tz_name = get_settings().local_timezone
    if not tz_name or instant.tzinfo is None:
        return instant
    return instant.astimezone(ZoneInfo(tz_name))


def build_profile(data: dict[str, Any]) -> CompensationProfile:
    """Build a profile from a JSON payload, applying configured defaults."""
    payload = dict(data)
    if payload.get("overtime_threshold_hours") is None:
        payload["overtime_threshold_hours"] = get_settings().default_overtime_threshold_hours
    for field in _PROFILE_DECIMAL_FIELDS:
        if payload.get(field) is not None:
            payload[field] = Decimal(str(payload[field]))
    return CompensationProfile(**payload)


def build_interval(data: dict[str, Any]) -> WorkInterval:
    """Build a shift from a JSON payload with ISO-8601 start/end strings."""
    payload = dict(data)
    payload["start"] = to_local(datetime.fromisoformat(str(payload["start"])))
    payload["end"] = to_local(datetime.fromisoformat(str(payload["end"])))
    if payload.get("sales_amount") is not None:
        payload["sales_amount"] = Decimal(str(payload["sales_amount"]))
    return WorkInterval(**payload)


def build_profile_lookup(profiles: list[dict[str, Any]]) -> dict[str, CompensationProfile]:
    """Key profile payloads by their profile_id; entries without one are dropped."""
    lookup: dict[str, CompensationProfile] = {}
    for data in profiles:
        profile = build_profile(data)
        if profile.profile_id is not None:
            lookup[profile.profile_id] = profile
    return lookup


def breakdown_to_dict(result: EarningsBreakdown) -> dict:
    """Convert a breakdown to a dict with float values for JSON serialization."""
    return {
        "regular_hours": float(result.regular_hours),
        "regular_pay": float(result.regular_pay),
        "overtime1_hours": float(result.overtime1_hours),
        "overtime1_pay": float(result.overtime1_pay),
        "overtime2_hours": float(result.overtime2_hours),
        "overtime2_pay": float(result.overtime2_pay),
        "sabbath_hours": float(result.sabbath_hours),
        "sabbath_pay": float(result.sabbath_pay),
        "bonus_pay": float(result.bonus_pay),
        "travel_pay": float(result.travel_pay),
        "total_hours": float(result.total_hours),
        "total_earnings": float(result.total_earnings),
        "calculation_notes": result.calculation_notes,
    }


def summary_to_dict(result: EarningsSummary) -> dict:
    """Convert a summary to a dict with float values for JSON serialization."""
    return {
        "total_earnings": float(result.total_earnings),
        "distinct_days_worked": result.distinct_days_worked,
        "intervals_counted": result.intervals_counted,
        "intervals_skipped": result.intervals_skipped,
        "calculation_notes": result.calculation_notes,
    }


@mcp.tool()
async def calculate_shift_pay(
    start: str,
    end: str,
    hourly_rate: float,
    overtime_threshold_hours: float | None = None,
    is_eligible_for_bonus: bool = False,
    bonus_percentage: float = 0.0,
    travel_rate_per_shift: float = 0.0,
    sales_amount: float | None = None,
) -> dict:
    """
    Calculate gross earnings for a single shift.

    Time is priced one elapsed hour at a time. Hours between Friday
    17:00 and Saturday 19:00 are paid at 150%. Other hours are paid at
    100% up to the overtime threshold, 125% for the next two hours and
    150% after that. A sales bonus and a flat travel amount are added.

    Args:
        start: Shift start (ISO-8601)
        end: Shift end (ISO-8601)
        hourly_rate: Base hourly rate
        overtime_threshold_hours: Hours before overtime starts (default 8)
        is_eligible_for_bonus: Whether the job pays a sales bonus
        bonus_percentage: Percentage of sales paid as bonus (0-100)
        travel_rate_per_shift: Flat travel reimbursement per shift
        sales_amount: Sales made during the shift

    Returns:
        Dictionary with hours and pay per bucket, bonus, travel and total

    Example:
        10-hour Sunday shift at 40/hr, threshold 8:
        - 8 regular hours = 320
        - 2 overtime hours at 125% = 100
        - Total: 420
    """
    profile = build_profile(
        {
            "hourly_rate": hourly_rate,
            "overtime_threshold_hours": overtime_threshold_hours,
            "is_eligible_for_bonus": is_eligible_for_bonus,
            "bonus_percentage": bonus_percentage,
            "travel_rate_per_shift": travel_rate_per_shift,
        }
    )
    interval = build_interval(
        {
            "start": start,
            "end": end,
            "compensation_profile_id": "",
            "sales_amount": sales_amount,
        }
    )

    result = calculate_shift_earnings(interval, profile)
    return breakdown_to_dict(result)


@mcp.tool()
async def calculate_earnings_summary(
    shifts: list[dict[str, Any]],
    profiles: list[dict[str, Any]],
) -> dict:
    """
    Total earnings and distinct days worked across many shifts.

    Shifts referencing an unknown profile contribute nothing and their
    dates are not counted.

    Args:
        shifts: Shift payloads (start, end, compensation_profile_id,
            optional sales_amount and interval_id)
        profiles: Profile payloads (profile_id, hourly_rate and optional
            overtime/bonus/travel settings)

    Returns:
        Dictionary with total earnings, days worked and skip counts
    """
    lookup = build_profile_lookup(profiles)
    intervals = [build_interval(data) for data in shifts]

    result = aggregate_earnings(intervals, lookup)
    return summary_to_dict(result)


@mcp.tool()
async def calculate_monthly_income(
    shifts: list[dict[str, Any]],
    profiles: list[dict[str, Any]],
    months: list[str] | None = None,
) -> list[dict]:
    """
    Income per calendar month (YYYY-MM) of shift start.

    Args:
        shifts: Shift payloads, as for calculate_earnings_summary
        profiles: Profile payloads, as for calculate_earnings_summary
        months: Months to report, in order; defaults to every month worked

    Returns:
        List of {"month", "income"} entries
    """
    lookup = build_profile_lookup(profiles)
    intervals = [build_interval(data) for data in shifts]

    result = aggregate_monthly_income(intervals, lookup, months)
    return [{"month": entry.month, "income": float(entry.income)} for entry in result]
