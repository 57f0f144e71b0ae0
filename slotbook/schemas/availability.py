"""Availability schemas."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict

from slotbook.models.time_slot import SlotStatus


class SlotWindowRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    start_time: datetime
    end_time: datetime
    status: SlotStatus


class AvailabilityRead(BaseModel):
    """A user's slots in a window, without slot ids or meeting details."""

    model_config = ConfigDict(from_attributes=True)

    user_id: UUID
    start_time: datetime
    end_time: datetime
    windows: list[SlotWindowRead]
