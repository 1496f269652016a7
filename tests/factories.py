from datetime import datetime

from appointments.services.slots.config import WEEKDAYS
from appointments.services.slots.records import (
    BusinessDaySchedule,
    BusinessSchedule,
    ServiceInfo,
    StaffDaySchedule,
    StaffInfo,
)

# Monday, business-local (America/New_York)
NOW = datetime(2026, 10, 19, 8, 0)


def build_schedule(
    closed=("saturday", "sunday"),
    open_time="09:00",
    close_time="17:00",
    break_start=None,
    break_end=None,
    skip=(),
    **kwargs,
) -> BusinessSchedule:
    kwargs.setdefault("timezone", "America/New_York")
    days = tuple(
        BusinessDaySchedule(
            day=day,
            is_open=day not in closed,
            open_time=open_time,
            close_time=close_time,
            break_start=break_start,
            break_end=break_end,
        )
        for day in WEEKDAYS
        if day not in skip
    )
    return BusinessSchedule(days=days, **kwargs)


def build_service(**kwargs) -> ServiceInfo:
    kwargs.setdefault("id", 1)
    kwargs.setdefault("duration", 60)
    return ServiceInfo(**kwargs)


def build_staff(day_overrides=None, **kwargs) -> StaffInfo:
    day_overrides = day_overrides or {}
    kwargs.setdefault("id", 7)
    kwargs.setdefault(
        "availability",
        tuple(
            StaffDaySchedule(day=day, **day_overrides.get(day, {}))
            for day in WEEKDAYS
        ),
    )
    return StaffInfo(**kwargs)
