"""
Database reads for the availability engine.

Every helper returns fully-resolved records from .records, so the engine
never sees ORM rows or bare relation ids.
"""

from datetime import date, datetime, timedelta

from redis import Redis
from sqlalchemy.orm import Session

from ...models.generated import (
    Appointments,
    OpeningTimes,
    Services,
    TeamMembers,
    t_team_member_services,
)
from .config import business_tz
from .conflicts import CANCELLED_STATUSES
from .errors import ConfigError
from .records import (
    BookingInfo,
    BusinessDaySchedule,
    BusinessSchedule,
    ServiceInfo,
    StaffDaySchedule,
    StaffInfo,
)
from .redis_store import DEFAULT_TTL_SECONDS, ScheduleRedisStore


def get_service(db: Session, service_id: int) -> ServiceInfo | None:
    service = db.get(Services, service_id)
    if not service:
        return None

    return ServiceInfo(
        id=service.id,
        duration=service.duration_min,
        buffer_before=service.buffer_before_min or 0,
        buffer_after=service.buffer_after_min or 0,
        is_active=bool(service.is_active),
        min_advance_hours=service.min_advance_hours,
        max_advance_days=service.max_advance_days,
    )


def get_staff(db: Session, staff_id: int) -> StaffInfo | None:
    member = db.get(TeamMembers, staff_id)
    if not member:
        return None

    service_rows = (
        db.query(t_team_member_services.c.service_id)
        .filter(t_team_member_services.c.team_member_id == staff_id)
        .all()
    )

    availability = tuple(
        StaffDaySchedule(
            day=a.day,
            is_available=bool(a.is_available),
            start_time=a.start_time,
            end_time=a.end_time,
            break_start=a.break_start,
            break_end=a.break_end,
        )
        for a in member.availability
    )

    return StaffInfo(
        id=member.id,
        taking_appointments=bool(member.taking_appointments),
        service_ids=frozenset(row.service_id for row in service_rows),
        availability=availability,
    )


def get_business_schedule(
    db: Session,
    redis: Redis | None = None,
    ttl_seconds: int = DEFAULT_TTL_SECONDS,
) -> BusinessSchedule:
    """
    Load the business schedule, reading through the Redis cache when
    a client is given.

    Raises:
        ConfigError: opening times were never seeded.
    """
    store = ScheduleRedisStore(redis, ttl_seconds) if redis is not None else None
    if store is not None:
        cached = store.get_schedule()
        if cached is not None:
            return cached

    opening = db.query(OpeningTimes).order_by(OpeningTimes.id).first()
    if not opening:
        raise ConfigError("schedule_missing", "Opening times are not configured")

    schedule = BusinessSchedule(
        days=tuple(
            BusinessDaySchedule(
                day=d.day,
                is_open=bool(d.is_open),
                open_time=d.open_time,
                close_time=d.close_time,
                break_start=d.break_start,
                break_end=d.break_end,
            )
            for d in opening.schedule
        ),
        slot_cadence=opening.slot_cadence_min,
        min_advance_hours=opening.min_advance_hours,
        max_advance_days=opening.max_advance_days,
        timezone=opening.timezone,
    )

    if store is not None:
        store.store_schedule(schedule)
    return schedule


def list_bookings(
    db: Session,
    target_date: date,
    staff_id: int | None = None,
    timezone: str = "UTC",
) -> list[BookingInfo]:
    """
    Same-day appointments and blockouts that are not cancelled.

    Stored values with a UTC offset can land on a neighbouring calendar
    day as text, so rows are pre-selected over a three-day text range and
    matched on their business-local date.
    """
    query = db.query(Appointments).filter(
        Appointments.date_start >= (target_date - timedelta(days=1)).isoformat(),
        Appointments.date_start < (target_date + timedelta(days=2)).isoformat(),
        Appointments.status.notin_(sorted(CANCELLED_STATUSES)),
    )
    if staff_id is not None:
        query = query.filter(Appointments.team_member_id == staff_id)

    tz = business_tz(timezone)
    bookings = []
    for a in query.order_by(Appointments.date_start).all():
        start = _parse_local(a.date_start, tz)
        if start.date() != target_date:
            continue
        bookings.append(BookingInfo(
            start=start,
            end=_parse_local(a.date_end, tz) if a.date_end else None,
            status=a.status,
            staff_id=a.team_member_id,
        ))
    return sorted(bookings, key=lambda b: b.start)


def _parse_local(value: str, tz) -> datetime:
    """ISO string → naive business-local datetime."""
    dt = datetime.fromisoformat(value)
    if dt.tzinfo is not None:
        dt = dt.astimezone(tz).replace(tzinfo=None)
    return dt
