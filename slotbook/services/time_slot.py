"""Slot lifecycle: create, read, update and delete time slots.

Keeps every calendar's slots pairwise non-overlapping and owns the
FREE/BUSY state of a slot outside the booking flow.
"""

import logging
from datetime import datetime, timedelta
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from slotbook.config import get_settings
from slotbook.core.access import require_slot_owner
from slotbook.core.clock import ensure_utc
from slotbook.core.errors import ConflictError, InvalidInputError, NotFoundError
from slotbook.core.pagination import Page, PageRequest
from slotbook.database import run_in_transaction
from slotbook.models.calendar import Calendar
from slotbook.models.time_slot import SlotStatus, TimeSlot
from slotbook.repositories import CalendarRepository, MeetingRepository, TimeSlotRepository

logger = logging.getLogger(__name__)


def overlaps(s1: datetime, e1: datetime, s2: datetime, e2: datetime) -> bool:
    """Half-open interval overlap; touching edges do not overlap."""
    return s1 < e2 and e1 > s2


def validate_window(start: datetime | None, end: datetime | None) -> None:
    if start is None or end is None or not end > start:
        raise InvalidInputError("endTime must be after startTime")


def validate_slot_range(start: datetime | None, end: datetime | None) -> None:
    validate_window(start, end)
    min_minutes = get_settings().min_slot_minutes
    if end - start < timedelta(minutes=min_minutes):
        raise InvalidInputError(f"Slot must be at least {min_minutes} minutes")


async def get_calendar_for_user(db: AsyncSession, user_id: UUID) -> Calendar:
    calendar = await CalendarRepository(db).find_by_user(user_id)
    if calendar is None:
        raise NotFoundError("Calendar not found for user")
    return calendar


class TimeSlotService:
    """Service for a user's own time slots."""

    def __init__(self, db: AsyncSession):
        self.db = db
        self.slots = TimeSlotRepository(db)
        self.meetings = MeetingRepository(db)

    async def create_slot(self, owner_id: UUID, start: datetime, end: datetime) -> TimeSlot:
        """Create a FREE slot in the owner's calendar."""
        async with run_in_transaction(self.db):
            calendar = await get_calendar_for_user(self.db, owner_id)
            start, end = ensure_utc(start), ensure_utc(end)
            validate_slot_range(start, end)
            await self._validate_no_overlap(calendar.id, start, end)

            slot = TimeSlot(
                calendar_id=calendar.id,
                start_time=start,
                end_time=end,
                status=SlotStatus.FREE,
            )
            await self.slots.save(slot)

        logger.info(f"Created slot {slot.id} [{start.isoformat()}, {end.isoformat()}) for user {owner_id}")
        return slot

    async def get_slot(self, caller_id: UUID, slot_id: UUID) -> TimeSlot:
        return await self._get_owned_slot(caller_id, slot_id)

    async def list_slots(
        self,
        caller_id: UUID,
        start: datetime,
        end: datetime,
        page_request: PageRequest | None = None,
    ) -> Page[TimeSlot]:
        """Caller's slots overlapping ``[start, end)``, earliest first."""
        page_request = page_request or PageRequest()
        calendar = await get_calendar_for_user(self.db, caller_id)
        start, end = ensure_utc(start), ensure_utc(end)
        validate_window(start, end)

        items = await self.slots.find_overlapping(
            calendar.id,
            start,
            end,
            limit=page_request.size,
            offset=page_request.offset,
        )
        total = await self.slots.count_overlapping(calendar.id, start, end)
        return Page(
            items=items,
            page=page_request.page,
            size=page_request.size,
            total_elements=total,
        )

    async def update_slot(
        self,
        caller_id: UUID,
        slot_id: UUID,
        start: datetime | None = None,
        end: datetime | None = None,
        status: SlotStatus | None = None,
    ) -> TimeSlot:
        """Move a slot and/or override its status.

        A missing bound keeps its current value. Setting ``status`` here does
        not touch any meeting on the slot.
        """
        async with run_in_transaction(self.db):
            slot = await self._get_owned_slot(caller_id, slot_id)

            if start is not None or end is not None:
                new_start = ensure_utc(start) if start is not None else slot.start_time
                new_end = ensure_utc(end) if end is not None else slot.end_time
                validate_slot_range(new_start, new_end)
                await self._validate_no_overlap(slot.calendar_id, new_start, new_end, slot.id)
                slot.start_time = new_start
                slot.end_time = new_end

            if status is not None:
                slot.status = status

            await self.slots.save(slot)

        logger.info(f"Updated slot {slot.id} (version {slot.version})")
        return slot

    async def delete_slot(self, caller_id: UUID, slot_id: UUID) -> None:
        async with run_in_transaction(self.db):
            slot = await self._get_owned_slot(caller_id, slot_id)
            if slot.status == SlotStatus.BUSY:
                raise ConflictError("Cannot delete a busy slot. Cancel the meeting first.")
            # A status override can free a slot that still backs a meeting
            if await self.meetings.exists_for_slot(slot.id):
                raise ConflictError("Slot backs a meeting. Cancel the meeting first.")
            await self.slots.delete(slot)

        logger.info(f"Deleted slot {slot_id}")

    async def _get_owned_slot(self, caller_id: UUID, slot_id: UUID) -> TimeSlot:
        calendar = await get_calendar_for_user(self.db, caller_id)
        slot = await self.slots.find_by_id(slot_id)
        if slot is None:
            raise NotFoundError("Time slot not found")
        return require_slot_owner(calendar, slot, caller_id)

    async def _validate_no_overlap(
        self,
        calendar_id: UUID,
        start: datetime,
        end: datetime,
        exclude_id: UUID | None = None,
    ) -> None:
        if await self.slots.exists_overlap(calendar_id, start, end, exclude_id):
            raise ConflictError("Time slot overlaps with an existing slot")
