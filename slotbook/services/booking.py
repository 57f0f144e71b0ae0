"""Booking: turn one FREE slot into a meeting.

Many callers may race for the same slot. Inside a single transaction the
coordinator re-reads the slot status, checks that no meeting references the
slot, flips the slot to BUSY with a version-conditional UPDATE and only then
inserts the meeting. Whoever loses the version race gets a ConflictError and
leaves nothing behind.
"""

import logging
from collections.abc import Iterable
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from slotbook.core.errors import ConflictError, NotFoundError
from slotbook.database import run_in_transaction
from slotbook.models.meeting import Meeting
from slotbook.models.time_slot import SlotStatus, TimeSlot
from slotbook.repositories import MeetingRepository, TimeSlotRepository
from slotbook.services.meeting import normalize_title, resolve_participants
from slotbook.services.time_slot import get_calendar_for_user

logger = logging.getLogger(__name__)


class BookingService:
    """Converts a caller's FREE slot into a meeting."""

    def __init__(self, db: AsyncSession):
        self.db = db
        self.slots = TimeSlotRepository(db)
        self.meetings = MeetingRepository(db)

    async def schedule_meeting(
        self,
        caller_id: UUID,
        slot_id: UUID,
        title: str,
        description: str | None = None,
        participant_ids: Iterable[UUID] | None = None,
    ) -> Meeting:
        """Book ``slot_id`` for the caller.

        Raises:
            NotFoundError: no calendar, no such slot, slot owned by someone
                else, or unknown participants
            ConflictError: slot not FREE, already converted, or lost race
            InvalidInputError: blank title
        """
        clean_title = normalize_title(title)

        async with run_in_transaction(self.db):
            slot = await self._get_own_slot(caller_id, slot_id)

            if slot.status != SlotStatus.FREE:
                raise ConflictError("Slot is already busy")
            if await self.meetings.exists_for_slot(slot.id):
                raise ConflictError("Slot already converted to a meeting")

            participants = await resolve_participants(self.db, participant_ids)

            # UPDATE ... WHERE version = :loaded; raises StaleDataError on a lost race
            slot.status = SlotStatus.BUSY
            await self.slots.save(slot)

            meeting = Meeting(
                slot_id=slot.id,
                organizer_id=caller_id,
                title=clean_title,
                description=description,
                participants=participants,
            )
            await self.meetings.add(meeting)

        logger.info(
            f"Scheduled meeting {meeting.id} on slot {slot.id} "
            f"for organizer {caller_id} with {len(participants)} participant(s)"
        )
        return meeting

    async def _get_own_slot(self, caller_id: UUID, slot_id: UUID) -> TimeSlot:
        calendar = await get_calendar_for_user(self.db, caller_id)
        slot = await self.slots.find_by_id(slot_id)
        # A foreign slot is reported exactly like a missing one
        if slot is None or slot.calendar_id != calendar.id:
            raise NotFoundError("Time slot not found")
        return slot
