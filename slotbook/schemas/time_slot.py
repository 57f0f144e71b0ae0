"""Time slot schemas."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict

from slotbook.models.time_slot import SlotStatus


class TimeSlotCreate(BaseModel):
    """Schema for creating a slot. Range rules are enforced by the service."""

    start_time: datetime
    end_time: datetime


class TimeSlotUpdate(BaseModel):
    """Schema for updating a slot. Omitted fields are left unchanged."""

    start_time: datetime | None = None
    end_time: datetime | None = None
    status: SlotStatus | None = None


class TimeSlotRead(BaseModel):
    """Schema for reading a slot."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    calendar_id: UUID
    start_time: datetime
    end_time: datetime
    status: SlotStatus
    created_at: datetime
    updated_at: datetime
