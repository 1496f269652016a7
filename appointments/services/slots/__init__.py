"""
Slots calculation module.

Pure engine (no I/O): business/staff schedule resolution, advance-booking
window, booking conflicts, slot grid.
Around it: repository reads (SQLAlchemy) and a Redis cache for the
business schedule.
"""

from .availability import calculate_service_availability
from .calculator import generate_slots
from .errors import ConfigError, NotFoundError, PolicyError, SlotsError, ValidationError
from .redis_store import ScheduleRedisStore, invalidate_schedule_cache

__all__ = [
    "calculate_service_availability",
    "generate_slots",
    "SlotsError",
    "ValidationError",
    "NotFoundError",
    "PolicyError",
    "ConfigError",
    "ScheduleRedisStore",
    "invalidate_schedule_cache",
]
