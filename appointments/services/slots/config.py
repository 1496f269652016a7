"""
Scheduling defaults and time-of-day helpers for slots calculation.

All times of day are "HH:MM" (24h) and are compared as integer
minutes since midnight of a fixed civil date. "24:00" is accepted and
means the end of the day (1440), so a window can close at midnight.
"""

import logging
import re

import pytz

logger = logging.getLogger(__name__)

DEFAULT_SLOT_CADENCE_MINUTES = 30
DEFAULT_MIN_ADVANCE_HOURS = 1
DEFAULT_MAX_ADVANCE_DAYS = 30
DEFAULT_BOOKING_MINUTES = 30  # booking without explicit end

DEFAULT_OPEN_TIME = "09:00"
DEFAULT_CLOSE_TIME = "17:00"

# Index = date.weekday() (0 = Monday)
WEEKDAYS = (
    "monday",
    "tuesday",
    "wednesday",
    "thursday",
    "friday",
    "saturday",
    "sunday",
)

_TIME_RE = re.compile(r"^(?:([01]\d|2[0-3]):([0-5]\d)|(24):(00))$")


def time_str_to_minutes(value: str) -> int:
    """Convert "HH:MM" to minutes since midnight."""
    match = _TIME_RE.match(value.strip()) if value else None
    if not match:
        raise ValueError(f"Invalid time of day {value!r}, expected HH:MM")
    if match.group(3):
        return 24 * 60
    return int(match.group(1)) * 60 + int(match.group(2))


def weekday_name(weekday: int) -> str:
    return WEEKDAYS[weekday]


def business_tz(name: str):
    """pytz timezone for name, UTC when the name is unknown."""
    try:
        return pytz.timezone(name)
    except pytz.UnknownTimeZoneError:
        logger.error(f"Invalid business timezone '{name}', using UTC")
        return pytz.UTC
