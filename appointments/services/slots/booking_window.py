"""
Advance-booking window.

A date is bookable when it falls between the date of
now + min_advance_hours and the date of now + max_advance_days
(both inclusive). Service-level limits override business defaults.
"""

from datetime import date, datetime, timedelta

from .errors import PolicyError
from .records import BusinessSchedule, ServiceInfo


def resolve_advance_limits(
    service: ServiceInfo,
    schedule: BusinessSchedule,
) -> tuple[int, int]:
    """Return (min_advance_hours, max_advance_days)."""
    min_hours = (
        service.min_advance_hours
        if service.min_advance_hours is not None
        else schedule.min_advance_hours
    )
    max_days = (
        service.max_advance_days
        if service.max_advance_days is not None
        else schedule.max_advance_days
    )
    return min_hours, max_days


def validate_booking_window(
    target_date: date,
    now: datetime,
    min_advance_hours: int,
    max_advance_days: int,
) -> None:
    """
    Raises:
        PolicyError: too_soon / too_late.
    """
    min_bookable = now + timedelta(hours=min_advance_hours)
    max_bookable = now + timedelta(days=max_advance_days)

    if target_date < min_bookable.date():
        raise PolicyError(
            "too_soon",
            f"Must book at least {min_advance_hours} hours in advance",
        )

    if target_date > max_bookable.date():
        raise PolicyError(
            "too_late",
            f"Cannot book more than {max_advance_days} days in advance",
        )
