"""
Existing bookings → blocked minute ranges.

Each range is inflated by the *requested* service's buffers so that a new
appointment keeps its own padding clear of neighbours.
"""

from datetime import datetime, timedelta

from .config import DEFAULT_BOOKING_MINUTES
from .records import BookingInfo, MinuteRange

CANCELLED_STATUSES = frozenset({"cancelled"})


def build_blocked_ranges(
    bookings: list[BookingInfo],
    buffer_before: int = 0,
    buffer_after: int = 0,
) -> list[MinuteRange]:
    """Unordered list of ranges blocked by same-day, non-cancelled bookings."""
    ranges: list[MinuteRange] = []

    for booking in bookings:
        if booking.status in CANCELLED_STATUSES:
            continue

        start = booking.start
        end = booking.end or start + timedelta(minutes=DEFAULT_BOOKING_MINUTES)

        start_min = _minute_of_day(start)
        end_min = start_min + int((end - start).total_seconds() // 60)

        ranges.append(MinuteRange(
            start=start_min - buffer_before,
            end=end_min + buffer_after,
        ))

    return ranges


def _minute_of_day(dt: datetime) -> int:
    return dt.hour * 60 + dt.minute
