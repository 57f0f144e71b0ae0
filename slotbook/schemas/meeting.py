"""Meeting schemas."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class MeetingCreate(BaseModel):
    """Schema for booking a slot."""

    slot_id: UUID
    title: str = Field(..., max_length=255)
    description: str | None = None
    participant_ids: set[UUID] = Field(default_factory=set)


class MeetingUpdate(BaseModel):
    """Schema for updating a meeting. ``participant_ids`` replaces the set."""

    title: str | None = Field(None, max_length=255)
    description: str | None = None
    participant_ids: set[UUID] | None = None


class MeetingRead(BaseModel):
    """Schema for reading a meeting."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    slot_id: UUID
    organizer_id: UUID
    title: str
    description: str | None = None
    created_at: datetime
    participant_ids: list[UUID]
