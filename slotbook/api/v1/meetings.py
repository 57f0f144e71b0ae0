"""Meeting endpoints."""

from datetime import datetime
from uuid import UUID

from fastapi import APIRouter, Query, status

from slotbook.deps import CurrentUserId, DbSession, Pagination
from slotbook.models.meeting import Meeting
from slotbook.schemas.meeting import MeetingCreate, MeetingRead, MeetingUpdate
from slotbook.schemas.pagination import PageRead
from slotbook.services.booking import BookingService
from slotbook.services.meeting import MeetingService

router = APIRouter()


@router.post("", response_model=MeetingRead, status_code=status.HTTP_201_CREATED)
async def schedule_meeting(
    data: MeetingCreate,
    user_id: CurrentUserId,
    db: DbSession,
) -> Meeting:
    """Book one of the caller's FREE slots as a meeting."""
    return await BookingService(db).schedule_meeting(
        user_id,
        data.slot_id,
        title=data.title,
        description=data.description,
        participant_ids=data.participant_ids,
    )


@router.get("", response_model=PageRead[MeetingRead])
async def list_meetings(
    user_id: CurrentUserId,
    db: DbSession,
    page_request: Pagination,
    start: datetime = Query(..., alias="from"),
    end: datetime = Query(..., alias="to"),
) -> PageRead[MeetingRead]:
    """List meetings the caller organizes or attends in [from, to)."""
    page = await MeetingService(db).list_meetings(user_id, start, end, page_request)
    return PageRead[MeetingRead].model_validate(page, from_attributes=True)


@router.get("/{meeting_id}", response_model=MeetingRead)
async def get_meeting(meeting_id: UUID, user_id: CurrentUserId, db: DbSession) -> Meeting:
    return await MeetingService(db).get_meeting(user_id, meeting_id)


@router.patch("/{meeting_id}", response_model=MeetingRead)
async def update_meeting(
    meeting_id: UUID,
    data: MeetingUpdate,
    user_id: CurrentUserId,
    db: DbSession,
) -> Meeting:
    """Organizer-only update."""
    return await MeetingService(db).update_meeting(
        user_id,
        meeting_id,
        title=data.title,
        description=data.description,
        participant_ids=data.participant_ids,
    )


@router.delete("/{meeting_id}", status_code=status.HTTP_204_NO_CONTENT)
async def cancel_meeting(meeting_id: UUID, user_id: CurrentUserId, db: DbSession) -> None:
    """Cancel a meeting; its slot becomes FREE again."""
    await MeetingService(db).cancel_meeting(user_id, meeting_id)
