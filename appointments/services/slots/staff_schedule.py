"""
Staff working window for a weekday, intersected with business hours.

Break merge: when both sides define a break the result is the enclosing
interval (earliest start, latest end), not the intersection.
"""

import logging

from .business_schedule import parse_break
from .config import time_str_to_minutes, weekday_name
from .errors import ConfigError, PolicyError
from .records import BusinessDay, EffectiveWindow, MinuteRange, StaffDaySchedule, StaffInfo

logger = logging.getLogger(__name__)

# Returned instead of a window when staff is off that weekday
STAFF_UNAVAILABLE = object()


def check_staff_eligibility(staff: StaffInfo, service_id: int) -> None:
    """
    Raises:
        PolicyError: staff does not take appointments or lacks the service.
    """
    if not staff.taking_appointments:
        raise PolicyError(
            "staff_not_taking_appointments",
            "Team member is not taking appointments",
        )

    if staff.service_ids and service_id not in staff.service_ids:
        raise PolicyError(
            "staff_does_not_offer_service",
            "Team member does not provide this service",
        )


def resolve_staff_day(
    weekday: int,
    availability: tuple[StaffDaySchedule, ...],
    business: BusinessDay,
):
    """
    Effective window for weekday (0 = Monday).

    Returns:
        EffectiveWindow, or STAFF_UNAVAILABLE when the staff weekday
        entry is marked unavailable. Without a staff entry for the
        weekday the business window applies unchanged.
    """
    day_name = weekday_name(weekday)
    entry = next((a for a in availability if a.day == day_name), None)

    if entry is None:
        logger.debug(f"No staff availability for {day_name}, using business hours")
        return EffectiveWindow(
            open_minutes=business.open_minutes,
            close_minutes=business.close_minutes,
            break_interval=business.break_interval,
        )

    if not entry.is_available:
        return STAFF_UNAVAILABLE

    try:
        staff_open = time_str_to_minutes(entry.start_time)
        staff_close = time_str_to_minutes(entry.end_time)
        staff_break = parse_break(entry.break_start, entry.break_end)
    except ValueError as e:
        raise ConfigError("staff_schedule_invalid", f"{day_name}: {e}") from e

    return EffectiveWindow(
        open_minutes=max(business.open_minutes, staff_open),
        close_minutes=min(business.close_minutes, staff_close),
        break_interval=merge_breaks(business.break_interval, staff_break),
    )


def merge_breaks(
    business_break: MinuteRange | None,
    staff_break: MinuteRange | None,
) -> MinuteRange | None:
    if business_break is None:
        return staff_break
    if staff_break is None:
        return business_break
    return MinuteRange(
        start=min(business_break.start, staff_break.start),
        end=max(business_break.end, staff_break.end),
    )
