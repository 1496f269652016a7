"""
Default opening times.

Guarantees that a complete 7-day business schedule exists before the
availability endpoint is served. Runs once in the backend lifespan;
an existing, non-empty schedule is never touched.
"""

import logging

from redis import Redis
from sqlalchemy.orm import Session

from ..models.generated import OpeningTimes, OpeningTimesSchedule
from .slots.config import (
    DEFAULT_CLOSE_TIME,
    DEFAULT_MAX_ADVANCE_DAYS,
    DEFAULT_MIN_ADVANCE_HOURS,
    DEFAULT_OPEN_TIME,
    DEFAULT_SLOT_CADENCE_MINUTES,
    WEEKDAYS,
)
from .slots.redis_store import invalidate_schedule_cache

logger = logging.getLogger(__name__)

CLOSED_BY_DEFAULT = ("saturday", "sunday")


def seed_default_opening_times(
    db: Session,
    timezone: str,
    redis: Redis | None = None,
) -> bool:
    """
    Create default opening times if none are configured.

    Returns:
        True if defaults were written.
    """
    opening = db.query(OpeningTimes).order_by(OpeningTimes.id).first()
    if opening and opening.schedule:
        return False

    if not opening:
        opening = OpeningTimes(
            timezone=timezone,
            slot_cadence_min=DEFAULT_SLOT_CADENCE_MINUTES,
            max_advance_days=DEFAULT_MAX_ADVANCE_DAYS,
            min_advance_hours=DEFAULT_MIN_ADVANCE_HOURS,
        )
        db.add(opening)
        db.flush()

    for day in WEEKDAYS:
        db.add(OpeningTimesSchedule(
            opening_times_id=opening.id,
            day=day,
            is_open=0 if day in CLOSED_BY_DEFAULT else 1,
            open_time=DEFAULT_OPEN_TIME,
            close_time=DEFAULT_CLOSE_TIME,
        ))

    db.commit()
    invalidate_schedule_cache(redis)

    logger.info("Initialized default opening times")
    return True
