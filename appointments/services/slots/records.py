"""
Resolved, read-only records the engine works on.

The persistence layer always hands over these concrete records (never
raw ORM rows or bare ids), so the engine itself does no I/O.
"""

from dataclasses import dataclass, field
from datetime import datetime

from .config import (
    DEFAULT_CLOSE_TIME,
    DEFAULT_MAX_ADVANCE_DAYS,
    DEFAULT_MIN_ADVANCE_HOURS,
    DEFAULT_OPEN_TIME,
    DEFAULT_SLOT_CADENCE_MINUTES,
)


@dataclass(frozen=True)
class MinuteRange:
    """Half-open interval [start, end) in minutes since midnight."""
    start: int
    end: int

    def overlaps(self, start: int, end: int) -> bool:
        return start < self.end and end > self.start


@dataclass(frozen=True)
class ServiceInfo:
    id: int
    duration: int
    buffer_before: int = 0
    buffer_after: int = 0
    is_active: bool = True
    min_advance_hours: int | None = None
    max_advance_days: int | None = None

    @property
    def total_slot_time(self) -> int:
        return self.duration + self.buffer_before + self.buffer_after


@dataclass(frozen=True)
class BusinessDaySchedule:
    day: str
    is_open: bool = True
    open_time: str = DEFAULT_OPEN_TIME
    close_time: str = DEFAULT_CLOSE_TIME
    break_start: str | None = None
    break_end: str | None = None


@dataclass(frozen=True)
class BusinessSchedule:
    days: tuple[BusinessDaySchedule, ...]
    slot_cadence: int = DEFAULT_SLOT_CADENCE_MINUTES
    min_advance_hours: int = DEFAULT_MIN_ADVANCE_HOURS
    max_advance_days: int = DEFAULT_MAX_ADVANCE_DAYS
    timezone: str = "America/New_York"


@dataclass(frozen=True)
class StaffDaySchedule:
    day: str
    is_available: bool = True
    start_time: str = DEFAULT_OPEN_TIME
    end_time: str = DEFAULT_CLOSE_TIME
    break_start: str | None = None
    break_end: str | None = None


@dataclass(frozen=True)
class StaffInfo:
    id: int
    taking_appointments: bool = True
    service_ids: frozenset[int] = frozenset()  # empty = all services
    availability: tuple[StaffDaySchedule, ...] = ()


@dataclass(frozen=True)
class BookingInfo:
    start: datetime
    end: datetime | None = None
    status: str = "scheduled"
    staff_id: int | None = None


@dataclass(frozen=True)
class BusinessDay:
    is_open: bool
    open_minutes: int = 0
    close_minutes: int = 0
    break_interval: MinuteRange | None = None


@dataclass(frozen=True)
class EffectiveWindow:
    open_minutes: int
    close_minutes: int
    break_interval: MinuteRange | None = None


@dataclass(frozen=True)
class GridSlot:
    start: int
    end: int
    available: bool


@dataclass(frozen=True)
class Slot:
    start: datetime
    end: datetime
    available: bool


@dataclass(frozen=True)
class DayAvailability:
    slots: list[Slot] = field(default_factory=list)
    reason: str | None = None
