"""Meeting lifecycle: read, update, cancel and list meetings."""

import logging
from collections.abc import Iterable
from datetime import datetime
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from slotbook.core.access import require_meeting_organizer, require_meeting_visible
from slotbook.core.clock import ensure_utc
from slotbook.core.errors import InvalidInputError, NotFoundError
from slotbook.core.pagination import Page, PageRequest
from slotbook.database import run_in_transaction
from slotbook.models.meeting import Meeting
from slotbook.models.time_slot import SlotStatus
from slotbook.models.user import User
from slotbook.repositories import MeetingRepository, TimeSlotRepository, UserRepository

logger = logging.getLogger(__name__)


def normalize_title(title: str | None) -> str:
    title = (title or "").strip()
    if not title:
        raise InvalidInputError("title must not be blank")
    return title


async def resolve_participants(db: AsyncSession, participant_ids: Iterable[UUID] | None) -> list[User]:
    """Load every participant, failing with the ids that do not exist."""
    unique_ids = set(participant_ids or ())
    if not unique_ids:
        return []

    users = await UserRepository(db).find_by_ids(unique_ids)
    missing = unique_ids - {user.id for user in users}
    if missing:
        listed = ", ".join(sorted(str(user_id) for user_id in missing))
        raise NotFoundError(f"Participants not found: [{listed}]")
    return users


class MeetingService:
    """Service for meetings the caller organizes or attends."""

    def __init__(self, db: AsyncSession):
        self.db = db
        self.meetings = MeetingRepository(db)
        self.slots = TimeSlotRepository(db)

    async def get_meeting(self, caller_id: UUID, meeting_id: UUID) -> Meeting:
        meeting = await self.meetings.find_by_id(meeting_id)
        return require_meeting_visible(meeting, caller_id)

    async def list_meetings(
        self,
        caller_id: UUID,
        start: datetime,
        end: datetime,
        page_request: PageRequest | None = None,
    ) -> Page[Meeting]:
        """Meetings the caller organizes or attends whose slot overlaps ``[start, end)``."""
        page_request = page_request or PageRequest()
        start, end = ensure_utc(start), ensure_utc(end)
        if not end > start:
            raise InvalidInputError("to must be after from")

        items = await self.meetings.find_for_user_in_range(
            caller_id,
            start,
            end,
            limit=page_request.size,
            offset=page_request.offset,
        )
        total = await self.meetings.count_for_user_in_range(caller_id, start, end)
        return Page(
            items=items,
            page=page_request.page,
            size=page_request.size,
            total_elements=total,
        )

    async def update_meeting(
        self,
        caller_id: UUID,
        meeting_id: UUID,
        title: str | None = None,
        description: str | None = None,
        participant_ids: Iterable[UUID] | None = None,
    ) -> Meeting:
        """Organizer-only edit. ``participant_ids`` replaces the whole set."""
        async with run_in_transaction(self.db):
            meeting = require_meeting_organizer(
                await self.meetings.find_by_id(meeting_id), caller_id
            )

            if title is not None:
                meeting.title = normalize_title(title)
            if description is not None:
                meeting.description = description
            if participant_ids is not None:
                meeting.participants = await resolve_participants(self.db, participant_ids)

            await self.db.flush()

        logger.info(f"Updated meeting {meeting.id}")
        return meeting

    async def cancel_meeting(self, caller_id: UUID, meeting_id: UUID) -> None:
        """Delete the meeting and give its slot back as FREE, atomically."""
        async with run_in_transaction(self.db):
            meeting = require_meeting_organizer(
                await self.meetings.find_by_id(meeting_id), caller_id
            )
            slot = await self.slots.find_by_id(meeting.slot_id)
            if slot is None:
                raise NotFoundError("Slot for meeting not found")

            slot.status = SlotStatus.FREE
            await self.slots.save(slot)
            await self.meetings.delete(meeting)

        logger.info(f"Cancelled meeting {meeting_id}, slot {slot.id} is FREE again")
