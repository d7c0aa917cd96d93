"""
Sabbath Window Classifier

Decides whether an instant falls inside the premium-pay window.

The window is a fixed wall-clock approximation of the weekly rest
period: Friday 17:00 through Saturday 18:59. It does not track sunset
or season.
"""

from datetime import datetime

FRIDAY = 4
SATURDAY = 5

WINDOW_START_HOUR = 17  # Friday
WINDOW_END_HOUR = 19  # Saturday, exclusive


def is_premium_window(instant: datetime) -> bool:
    """
    Return True if the instant's local weekday and hour are inside the window.

    Only the datetime's own wall-clock fields are read; aware datetimes
    are not converted to any other zone.
    """
    weekday = instant.weekday()
    hour = instant.hour

    if weekday == FRIDAY and hour >= WINDOW_START_HOUR:
        return True
    if weekday == SATURDAY and hour < WINDOW_END_HOUR:
        return True
    return False
