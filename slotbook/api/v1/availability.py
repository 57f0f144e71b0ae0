"""Availability endpoint. Any authenticated user may query any calendar."""

from datetime import datetime
from uuid import UUID

from fastapi import APIRouter, Query

from slotbook.deps import CurrentUserId, DbSession
from slotbook.schemas.availability import AvailabilityRead
from slotbook.services.availability import AvailabilityService

router = APIRouter()


@router.get("", response_model=AvailabilityRead)
async def get_availability(
    _caller: CurrentUserId,
    db: DbSession,
    user_id: UUID = Query(..., alias="userId"),
    start: datetime = Query(..., alias="from"),
    end: datetime = Query(..., alias="to"),
) -> AvailabilityRead:
    availability = await AvailabilityService(db).get_availability(user_id, start, end)
    return AvailabilityRead.model_validate(availability, from_attributes=True)
