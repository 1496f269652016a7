"""
Business opening window for a weekday.

A break is only taken into account when both break_start and break_end
are set; a half-configured break is ignored.
"""

from .config import time_str_to_minutes, weekday_name
from .errors import ConfigError
from .records import BusinessDay, BusinessSchedule, MinuteRange


def resolve_business_day(weekday: int, schedule: BusinessSchedule) -> BusinessDay:
    """
    Resolve opening window and break for weekday (0 = Monday).

    Raises:
        ConfigError: schedule has no entry (or several) for the weekday,
            or the slot cadence is not positive.
    """
    if schedule.slot_cadence <= 0:
        raise ConfigError(
            "schedule_invalid",
            f"Slot cadence must be positive, got {schedule.slot_cadence}",
        )

    day_name = weekday_name(weekday)
    entries = [d for d in schedule.days if d.day == day_name]

    if not entries:
        raise ConfigError(
            "schedule_incomplete",
            f"Business schedule has no entry for {day_name}",
        )
    if len(entries) > 1:
        raise ConfigError(
            "schedule_incomplete",
            f"Business schedule has duplicate entries for {day_name}",
        )

    entry = entries[0]
    if not entry.is_open:
        return BusinessDay(is_open=False)

    try:
        open_minutes = time_str_to_minutes(entry.open_time)
        close_minutes = time_str_to_minutes(entry.close_time)
        break_interval = parse_break(entry.break_start, entry.break_end)
    except ValueError as e:
        raise ConfigError("schedule_invalid", f"{day_name}: {e}") from e

    return BusinessDay(
        is_open=True,
        open_minutes=open_minutes,
        close_minutes=close_minutes,
        break_interval=break_interval,
    )


def parse_break(break_start: str | None, break_end: str | None) -> MinuteRange | None:
    if not break_start or not break_end:
        return None
    return MinuteRange(time_str_to_minutes(break_start), time_str_to_minutes(break_end))
