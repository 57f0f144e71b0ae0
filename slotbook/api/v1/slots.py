"""Time slot endpoints."""

from datetime import datetime
from uuid import UUID

from fastapi import APIRouter, Query, status

from slotbook.deps import CurrentUserId, DbSession, Pagination
from slotbook.models.time_slot import TimeSlot
from slotbook.schemas.pagination import PageRead
from slotbook.schemas.time_slot import TimeSlotCreate, TimeSlotRead, TimeSlotUpdate
from slotbook.services.time_slot import TimeSlotService

router = APIRouter()


@router.post("", response_model=TimeSlotRead, status_code=status.HTTP_201_CREATED)
async def create_slot(
    data: TimeSlotCreate,
    user_id: CurrentUserId,
    db: DbSession,
) -> TimeSlot:
    """Create a FREE time slot in the caller's calendar."""
    return await TimeSlotService(db).create_slot(user_id, data.start_time, data.end_time)


@router.get("", response_model=PageRead[TimeSlotRead])
async def list_slots(
    user_id: CurrentUserId,
    db: DbSession,
    page_request: Pagination,
    start: datetime = Query(..., alias="from"),
    end: datetime = Query(..., alias="to"),
) -> PageRead[TimeSlotRead]:
    """List the caller's slots overlapping [from, to)."""
    page = await TimeSlotService(db).list_slots(user_id, start, end, page_request)
    return PageRead[TimeSlotRead].model_validate(page, from_attributes=True)


@router.get("/{slot_id}", response_model=TimeSlotRead)
async def get_slot(slot_id: UUID, user_id: CurrentUserId, db: DbSession) -> TimeSlot:
    return await TimeSlotService(db).get_slot(user_id, slot_id)


@router.patch("/{slot_id}", response_model=TimeSlotRead)
async def update_slot(
    slot_id: UUID,
    data: TimeSlotUpdate,
    user_id: CurrentUserId,
    db: DbSession,
) -> TimeSlot:
    """Move a slot or override its status."""
    return await TimeSlotService(db).update_slot(
        user_id,
        slot_id,
        start=data.start_time,
        end=data.end_time,
        status=data.status,
    )


@router.delete("/{slot_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_slot(slot_id: UUID, user_id: CurrentUserId, db: DbSession) -> None:
    """Delete a FREE slot."""
    await TimeSlotService(db).delete_slot(user_id, slot_id)
