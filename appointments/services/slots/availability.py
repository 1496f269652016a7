"""
Service availability for one day.

Pure orchestration over already-fetched records; checks run in this
order and the first failure wins:

1. service exists / is active
2. advance-booking window
3. staff exists / takes appointments / offers the service
4. business weekday schedule (closed → empty result)
5. staff weekday schedule (day off → empty result)
6. blocked ranges from bookings + slot grid
"""

import logging
from datetime import date, datetime, timedelta

from .booking_window import resolve_advance_limits, validate_booking_window
from .business_schedule import resolve_business_day
from .calculator import generate_slots
from .config import business_tz
from .conflicts import build_blocked_ranges
from .errors import NotFoundError, PolicyError
from .records import (
    BookingInfo,
    BusinessSchedule,
    DayAvailability,
    EffectiveWindow,
    ServiceInfo,
    Slot,
    StaffInfo,
)
from .staff_schedule import STAFF_UNAVAILABLE, check_staff_eligibility, resolve_staff_day

logger = logging.getLogger(__name__)

REASON_CLOSED = "closed"
REASON_STAFF_UNAVAILABLE = "staff-unavailable"
REASON_WINDOW_TOO_SHORT = "window-too-short"


def calculate_service_availability(
    target_date: date,
    service_id: int,
    service: ServiceInfo | None,
    schedule: BusinessSchedule,
    bookings: list[BookingInfo],
    now: datetime,
    staff_id: int | None = None,
    staff: StaffInfo | None = None,
) -> DayAvailability:
    """
    Calculate the slot grid for a service on target_date.

    Args:
        now: current instant; naive values are taken as business local time.
        bookings: same-day bookings, already narrowed to staff_id if given.

    Raises:
        NotFoundError, PolicyError, ConfigError
    """
    tz = business_tz(schedule.timezone)
    now_local = _to_local(now, tz)

    if service is None:
        raise NotFoundError("service_not_found", "Service not found")
    if not service.is_active:
        raise PolicyError("service_inactive", "Service is not available for booking")

    min_hours, max_days = resolve_advance_limits(service, schedule)
    validate_booking_window(target_date, now_local, min_hours, max_days)

    if staff_id is not None:
        if staff is None:
            raise NotFoundError("staff_not_found", "Team member not found")
        check_staff_eligibility(staff, service_id)

    weekday = target_date.weekday()
    business = resolve_business_day(weekday, schedule)
    if not business.is_open:
        return DayAvailability(slots=[], reason=REASON_CLOSED)

    if staff is not None:
        window = resolve_staff_day(weekday, staff.availability, business)
        if window is STAFF_UNAVAILABLE:
            return DayAvailability(slots=[], reason=REASON_STAFF_UNAVAILABLE)
    else:
        window = EffectiveWindow(
            open_minutes=business.open_minutes,
            close_minutes=business.close_minutes,
            break_interval=business.break_interval,
        )

    blocked = build_blocked_ranges(bookings, service.buffer_before, service.buffer_after)

    now_cutoff = None
    if target_date == now_local.date():
        now_cutoff = now_local.hour * 60 + now_local.minute

    grid = generate_slots(
        open_minutes=window.open_minutes,
        close_minutes=window.close_minutes,
        break_interval=window.break_interval,
        blocked_ranges=blocked,
        cadence=schedule.slot_cadence,
        total_slot_time=service.total_slot_time,
        now_cutoff_minutes=now_cutoff,
    )

    if not grid:
        return DayAvailability(slots=[], reason=REASON_WINDOW_TOO_SHORT)

    slots = [
        Slot(
            start=_local_datetime(target_date, s.start, tz),
            end=_local_datetime(target_date, s.end, tz),
            available=s.available,
        )
        for s in grid
    ]

    logger.debug(
        f"Service {service_id} on {target_date}: "
        f"{sum(s.available for s in slots)}/{len(slots)} slots available"
    )
    return DayAvailability(slots=slots)


def _to_local(now: datetime, tz) -> datetime:
    if now.tzinfo is None:
        return now
    return now.astimezone(tz).replace(tzinfo=None)


def _local_datetime(target_date: date, minutes: int, tz) -> datetime:
    naive = datetime.combine(target_date, datetime.min.time()) + timedelta(minutes=minutes)
    return tz.localize(naive)
