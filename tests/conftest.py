"""
Test Configuration and Fixtures

Provides compensation profiles and settings isolation for engine tests.
"""

from decimal import Decimal

import pytest

from earnings_engine.config import get_settings
from earnings_engine.schemas.earnings import CompensationProfile
from tests.factories import make_profile


@pytest.fixture(autouse=True)
def fresh_settings():
    """Re-read settings from the environment for each test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def profile() -> CompensationProfile:
    """Plain hourly job: 40/hr, 8-hour threshold, no bonus or travel."""
    return make_profile()


@pytest.fixture
def bonus_profile() -> CompensationProfile:
    """Sales job paying a 10% bonus and 25 travel per shift."""
    return make_profile(
        profile_id="shop",
        name="Shop",
        hourly_rate=Decimal("35.00"),
        is_eligible_for_bonus=True,
        bonus_percentage=Decimal("10"),
        travel_rate_per_shift=Decimal("25.00"),
    )
