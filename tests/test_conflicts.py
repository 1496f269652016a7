from datetime import datetime

from appointments.services.slots.conflicts import build_blocked_ranges
from appointments.services.slots.records import BookingInfo, MinuteRange


def _at(hour, minute=0):
    return datetime(2026, 10, 20, hour, minute)


def test_booking_range_in_minutes():
    ranges = build_blocked_ranges([BookingInfo(start=_at(10), end=_at(11, 15))])
    assert ranges == [MinuteRange(600, 675)]


def test_missing_end_defaults_to_30_minutes():
    ranges = build_blocked_ranges([BookingInfo(start=_at(10))])
    assert ranges == [MinuteRange(600, 630)]


def test_buffers_inflate_range():
    ranges = build_blocked_ranges(
        [BookingInfo(start=_at(10), end=_at(10, 30))],
        buffer_before=10,
        buffer_after=15,
    )
    assert ranges == [MinuteRange(590, 645)]


def test_cancelled_bookings_are_ignored():
    bookings = [
        BookingInfo(start=_at(10), end=_at(10, 30), status="cancelled"),
        BookingInfo(start=_at(11), end=_at(11, 30), status="confirmed"),
    ]
    assert build_blocked_ranges(bookings) == [MinuteRange(660, 690)]


def test_booking_running_past_midnight_is_not_wrapped():
    booking = BookingInfo(start=_at(23, 30), end=datetime(2026, 10, 21, 0, 30))
    assert build_blocked_ranges([booking]) == [MinuteRange(1410, 1470)]
