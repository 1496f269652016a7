import pytest

from appointments.services.slots.errors import PolicyError
from appointments.services.slots.records import BusinessDay, MinuteRange
from appointments.services.slots.staff_schedule import (
    STAFF_UNAVAILABLE,
    check_staff_eligibility,
    merge_breaks,
    resolve_staff_day,
)

from tests.factories import build_staff

MONDAY = 0
BUSINESS = BusinessDay(is_open=True, open_minutes=540, close_minutes=1020)


class TestResolveStaffDay:

    def test_window_is_intersection(self):
        staff = build_staff({"monday": {"start_time": "10:00", "end_time": "18:00"}})
        window = resolve_staff_day(MONDAY, staff.availability, BUSINESS)

        assert window.open_minutes == 600
        assert window.close_minutes == 1020

    def test_staff_inside_business_hours(self):
        staff = build_staff({"monday": {"start_time": "11:00", "end_time": "15:30"}})
        window = resolve_staff_day(MONDAY, staff.availability, BUSINESS)

        assert (window.open_minutes, window.close_minutes) == (660, 930)

    def test_unavailable_day(self):
        staff = build_staff({"monday": {"is_available": False}})
        assert resolve_staff_day(MONDAY, staff.availability, BUSINESS) is STAFF_UNAVAILABLE

    def test_no_entry_uses_business_window(self):
        business = BusinessDay(
            is_open=True,
            open_minutes=540,
            close_minutes=1020,
            break_interval=MinuteRange(720, 750),
        )
        window = resolve_staff_day(MONDAY, (), business)

        assert (window.open_minutes, window.close_minutes) == (540, 1020)
        assert window.break_interval == MinuteRange(720, 750)

    def test_staff_break_applies_without_business_break(self):
        staff = build_staff({"monday": {"break_start": "12:30", "break_end": "13:00"}})
        window = resolve_staff_day(MONDAY, staff.availability, BUSINESS)

        assert window.break_interval == MinuteRange(750, 780)


class TestMergeBreaks:

    def test_enclosing_interval(self):
        merged = merge_breaks(MinuteRange(720, 780), MinuteRange(750, 810))
        assert merged == MinuteRange(720, 810)

    def test_nested_staff_break_keeps_business_break(self):
        merged = merge_breaks(MinuteRange(720, 780), MinuteRange(730, 740))
        assert merged == MinuteRange(720, 780)

    def test_one_side_only(self):
        assert merge_breaks(None, MinuteRange(1, 2)) == MinuteRange(1, 2)
        assert merge_breaks(MinuteRange(1, 2), None) == MinuteRange(1, 2)
        assert merge_breaks(None, None) is None


class TestEligibility:

    def test_not_taking_appointments(self):
        with pytest.raises(PolicyError) as exc_info:
            check_staff_eligibility(build_staff(taking_appointments=False), 1)
        assert exc_info.value.code == "staff_not_taking_appointments"

    def test_does_not_offer_service(self):
        staff = build_staff(service_ids=frozenset({2, 3}))
        with pytest.raises(PolicyError) as exc_info:
            check_staff_eligibility(staff, 1)
        assert exc_info.value.code == "staff_does_not_offer_service"

    def test_offers_service(self):
        check_staff_eligibility(build_staff(service_ids=frozenset({1})), 1)

    def test_empty_service_set_means_all(self):
        check_staff_eligibility(build_staff(service_ids=frozenset()), 42)
