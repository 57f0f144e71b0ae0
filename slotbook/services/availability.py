"""Read-only availability view of any user's calendar."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from slotbook.core.clock import ensure_utc
from slotbook.core.errors import InvalidInputError
from slotbook.models.time_slot import SlotStatus
from slotbook.repositories import TimeSlotRepository
from slotbook.services.time_slot import get_calendar_for_user


@dataclass(frozen=True)
class SlotWindow:
    start_time: datetime
    end_time: datetime
    status: SlotStatus


@dataclass
class Availability:
    user_id: UUID
    start_time: datetime
    end_time: datetime
    windows: list[SlotWindow]


class AvailabilityService:
    """Projects slots into (start, end, status) windows for third parties."""

    def __init__(self, db: AsyncSession):
        self.db = db
        self.slots = TimeSlotRepository(db)

    async def get_availability(
        self, target_user_id: UUID, start: datetime, end: datetime
    ) -> Availability:
        start, end = ensure_utc(start), ensure_utc(end)
        if not end > start:
            raise InvalidInputError("to must be after from")

        calendar = await get_calendar_for_user(self.db, target_user_id)
        slots = await self.slots.find_overlapping(calendar.id, start, end)

        return Availability(
            user_id=target_user_id,
            start_time=start,
            end_time=end,
            windows=[
                SlotWindow(slot.start_time, slot.end_time, slot.status)
                for slot in slots
            ],
        )
