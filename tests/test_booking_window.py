from datetime import date, datetime

import pytest

from appointments.services.slots.booking_window import (
    resolve_advance_limits,
    validate_booking_window,
)
from appointments.services.slots.errors import PolicyError

from tests.factories import NOW, build_schedule, build_service


def test_tomorrow_is_bookable():
    validate_booking_window(date(2026, 10, 20), NOW, 1, 30)


def test_today_is_bookable_with_short_notice():
    validate_booking_window(date(2026, 10, 19), NOW, 1, 30)


def test_last_day_of_window_is_bookable():
    validate_booking_window(date(2026, 11, 18), NOW, 1, 30)


def test_too_late():
    with pytest.raises(PolicyError) as exc_info:
        validate_booking_window(date(2026, 11, 19), NOW, 1, 30)
    assert exc_info.value.code == "too_late"
    assert "30 days" in exc_info.value.message


def test_too_soon_when_notice_crosses_midnight():
    late_evening = datetime(2026, 10, 19, 23, 30)
    with pytest.raises(PolicyError) as exc_info:
        validate_booking_window(date(2026, 10, 19), late_evening, 1, 30)
    assert exc_info.value.code == "too_soon"


def test_past_date_is_too_soon():
    with pytest.raises(PolicyError) as exc_info:
        validate_booking_window(date(2026, 10, 18), NOW, 0, 30)
    assert exc_info.value.code == "too_soon"


def test_business_defaults():
    schedule = build_schedule(min_advance_hours=2, max_advance_days=14)
    assert resolve_advance_limits(build_service(), schedule) == (2, 14)


def test_service_overrides_take_precedence():
    schedule = build_schedule(min_advance_hours=2, max_advance_days=14)
    service = build_service(min_advance_hours=48, max_advance_days=90)
    assert resolve_advance_limits(service, schedule) == (48, 90)


def test_zero_override_is_respected():
    schedule = build_schedule(min_advance_hours=2)
    service = build_service(min_advance_hours=0)
    assert resolve_advance_limits(service, schedule)[0] == 0
