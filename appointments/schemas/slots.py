"""
Pydantic schemas for slots API.
"""

from datetime import datetime
from pydantic import BaseModel, Field


class SlotInfo(BaseModel):
    """A single candidate slot."""
    start: datetime  # ISO-8601 with business tz offset
    end: datetime
    available: bool

    model_config = {"from_attributes": True}


class SlotsDayResponse(BaseModel):
    """Slot grid for a service on a specific day."""
    date: str  # "YYYY-MM-DD", echoed from the request
    service_id: int = Field(serialization_alias="serviceId")
    staff_id: int | None = Field(default=None, serialization_alias="staffId")
    slots: list[SlotInfo]
    reason: str | None = Field(
        default=None,
        description="Why the list is empty: closed / staff-unavailable / window-too-short",
    )

    model_config = {"from_attributes": True}


class SlotsErrorResponse(BaseModel):
    detail: str
    code: str | None = None


class SlotsInvalidateResponse(BaseModel):
    deleted_keys: int
