"""
Shift Earnings Engine - MCP Server

FastMCP server exposing earnings calculation tools:
- calculate_shift_pay: Per-shift earnings with overtime and Sabbath pay
- calculate_earnings_summary: Totals and days worked across shifts
- calculate_monthly_income: Income per calendar month
"""

import logging

from earnings_engine.config import get_settings

settings = get_settings()

# Configure logging
logging.basicConfig(level=settings.log_level)
logger = logging.getLogger(__name__)

# Importing the tool module registers its tools with the MCP server
from earnings_engine.tools.earnings_tools import mcp  # noqa: E402


def main():
    """Run the MCP server."""
    logger.info(
        "Starting %s v%s (%s, local timezone: %s)",
        settings.app_name,
        settings.app_version,
        settings.environment,
        settings.local_timezone or "as received",
    )
    mcp.run()


if __name__ == "__main__":
    main()
