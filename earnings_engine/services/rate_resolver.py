"""
Overtime Rate Resolver

Selects the overtime tier for a slice of non-premium worked time.
"""

from decimal import Decimal

from earnings_engine.schemas.earnings import CompensationProfile, PayBucket, TierSelection

# Tier 2 starts this many hours after the threshold, whatever the threshold is
TIER2_OFFSET_HOURS = Decimal("2")

REGULAR_MULTIPLIER = Decimal("1.0")
TIER1_MULTIPLIER = Decimal("1.25")
TIER2_MULTIPLIER = Decimal("1.5")


def resolve_tier(
    cumulative_hours: Decimal, profile: CompensationProfile
) -> TierSelection:
    """
    Pick the pay bucket for a slice from the hours already worked.

    cumulative_hours is the non-premium time accumulated in the shift
    before the slice starts. With T the profile's overtime threshold:

    - cumulative < T: regular (1.0x)
    - T <= cumulative < T + 2: overtime tier 1 (1.25x)
    - cumulative >= T + 2: overtime tier 2 (1.5x)

    Example (T=8, whole-hour slices): hours 1-8 are regular, hours 9-10
    are tier 1 and hour 11 onwards is tier 2.
    """
    threshold = profile.overtime_threshold_hours

    if cumulative_hours < threshold:
        return TierSelection(bucket=PayBucket.REGULAR, multiplier=REGULAR_MULTIPLIER)
    if cumulative_hours < threshold + TIER2_OFFSET_HOURS:
        return TierSelection(bucket=PayBucket.OVERTIME_TIER1, multiplier=TIER1_MULTIPLIER)
    return TierSelection(bucket=PayBucket.OVERTIME_TIER2, multiplier=TIER2_MULTIPLIER)
