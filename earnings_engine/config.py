"""
Shift Earnings Engine Configuration

Environment-based settings for the earnings calculation server.
"""

from decimal import Decimal
from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="EARNINGS_",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "Shift Earnings Engine"
    app_version: str = "0.1.0"
    environment: Literal["development", "staging", "production"] = "development"
    log_level: str = "INFO"

    # Wall-clock zone that tool inputs are converted to before calculation.
    # Empty means timestamps are used exactly as received.
    local_timezone: str = Field(
        default="",
        description="IANA timezone name used as 'local' time (e.g. Asia/Jerusalem)",
    )

    # Profile defaults applied by the tools when a caller omits a value
    default_overtime_threshold_hours: Decimal = Field(
        default=Decimal("8"),
        ge=0,
        description="Overtime threshold used when a profile does not set one",
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
