"""
Redis cache for the business schedule.

Key: slots:schedule
Value: JSON of BusinessSchedule, expires after ttl_seconds.

Only configuration is cached; slot grids are recomputed on every request.
"""

import json
import logging
from dataclasses import asdict

from redis import Redis

from .records import BusinessDaySchedule, BusinessSchedule

logger = logging.getLogger(__name__)

DEFAULT_TTL_SECONDS = 86400


class ScheduleRedisStore:
    """Redis wrapper for the serialized business schedule."""

    KEY = "slots:schedule"

    def __init__(self, redis: Redis, ttl_seconds: int = DEFAULT_TTL_SECONDS):
        self.redis = redis
        self.ttl_seconds = ttl_seconds

    # ── Read ─────────────────────────────────────────────────────────────

    def get_schedule(self) -> BusinessSchedule | None:
        """Cached schedule, or None on cache miss."""
        raw = self.redis.get(self.KEY)
        if raw is None:
            return None
        if isinstance(raw, bytes):
            raw = raw.decode()

        try:
            data = json.loads(raw)
            return BusinessSchedule(
                days=tuple(BusinessDaySchedule(**d) for d in data.pop("days")),
                **data,
            )
        except (ValueError, TypeError, KeyError):
            logger.warning("Corrupt schedule cache entry, ignoring")
            return None

    # ── Write ────────────────────────────────────────────────────────────

    def store_schedule(self, schedule: BusinessSchedule) -> None:
        self.redis.set(self.KEY, json.dumps(asdict(schedule)), ex=self.ttl_seconds)

    # ── Delete ───────────────────────────────────────────────────────────

    def delete_schedule(self) -> int:
        """Returns number of deleted keys (0 or 1)."""
        return self.redis.delete(self.KEY)


def invalidate_schedule_cache(redis: Redis | None) -> int:
    """Drop the cached schedule. No-op without Redis."""
    if redis is None:
        return 0
    deleted = ScheduleRedisStore(redis).delete_schedule()
    logger.info(f"Schedule cache invalidated (deleted_keys={deleted})")
    return deleted
