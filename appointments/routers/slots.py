"""
Slots API endpoints.

GET  /appointments/available-slots            - slot grid for a service/day
POST /appointments/available-slots/invalidate - drop cached business schedule
"""

from datetime import datetime

import pytz
from fastapi import APIRouter, Depends, Query
from redis import Redis
from sqlalchemy.orm import Session

from ..config import settings
from ..database import get_db
from ..redis_client import redis_client
from ..schemas.slots import (
    SlotInfo,
    SlotsDayResponse,
    SlotsErrorResponse,
    SlotsInvalidateResponse,
)
from ..services.slots import calculate_service_availability, invalidate_schedule_cache
from ..services.slots.repository import (
    get_business_schedule,
    get_service,
    get_staff,
    list_bookings,
)
from ..services.slots.validators import validate_date_param, validate_id_param


router = APIRouter(prefix="/appointments", tags=["slots"])


def get_redis() -> Redis | None:
    return redis_client


def get_now() -> datetime:
    return datetime.now(pytz.UTC)


@router.get(
    "/available-slots",
    response_model=SlotsDayResponse,
    response_model_exclude_none=True,
    responses={
        400: {"model": SlotsErrorResponse},
        404: {"model": SlotsErrorResponse},
        500: {"model": SlotsErrorResponse},
    },
)
def get_available_slots(
    date_param: str | None = Query(None, alias="date"),
    service_id_param: str | None = Query(None, alias="serviceId"),
    staff_id_param: str | None = Query(None, alias="staffId"),
    db: Session = Depends(get_db),
    redis: Redis | None = Depends(get_redis),
    now: datetime = Depends(get_now),
):
    """Get the slot grid (available and taken) for a service on a day."""
    target_date = validate_date_param(date_param)
    service_id = validate_id_param(service_id_param, "serviceId", "service_id")
    staff_id = validate_id_param(staff_id_param, "staffId", "staff_id", required=False)

    service = get_service(db, service_id)
    schedule = get_business_schedule(db, redis, settings.schedule_cache_ttl_seconds)
    staff = get_staff(db, staff_id) if staff_id is not None else None
    bookings = list_bookings(db, target_date, staff_id, schedule.timezone)

    result = calculate_service_availability(
        target_date=target_date,
        service_id=service_id,
        service=service,
        schedule=schedule,
        bookings=bookings,
        now=now,
        staff_id=staff_id,
        staff=staff,
    )

    return SlotsDayResponse(
        date=target_date.isoformat(),
        service_id=service_id,
        staff_id=staff_id,
        slots=[
            SlotInfo(start=s.start, end=s.end, available=s.available)
            for s in result.slots
        ],
        reason=result.reason,
    )


@router.post("/available-slots/invalidate", response_model=SlotsInvalidateResponse)
def invalidate_slots_schedule_cache(redis: Redis | None = Depends(get_redis)):
    """Manually invalidate the cached business schedule (admin endpoint)."""
    return SlotsInvalidateResponse(deleted_keys=invalidate_schedule_cache(redis))
