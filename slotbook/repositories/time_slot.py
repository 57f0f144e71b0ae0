"""Time slot data access, including overlap detection.

Intervals are half-open: ``[s1, e1)`` and ``[s2, e2)`` overlap iff
``s1 < e2 and e1 > s2``. Touching edges do not overlap.
"""

from datetime import datetime
from uuid import UUID

from sqlalchemy import exists, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from slotbook.models.time_slot import TimeSlot


def _overlapping(calendar_id: UUID, start: datetime, end: datetime):
    return (
        TimeSlot.calendar_id == calendar_id,
        TimeSlot.start_time < end,
        TimeSlot.end_time > start,
    )


class TimeSlotRepository:
    """Queries and persists slots of a calendar."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def find_by_id(self, slot_id: UUID) -> TimeSlot | None:
        return await self.db.get(TimeSlot, slot_id)

    async def find_overlapping(
        self,
        calendar_id: UUID,
        start: datetime,
        end: datetime,
        limit: int | None = None,
        offset: int = 0,
    ) -> list[TimeSlot]:
        """Slots of ``calendar_id`` overlapping ``[start, end)``, earliest first."""
        stmt = (
            select(TimeSlot)
            .where(*_overlapping(calendar_id, start, end))
            .order_by(TimeSlot.start_time)
            .offset(offset)
        )
        if limit is not None:
            stmt = stmt.limit(limit)
        result = await self.db.execute(stmt)
        return list(result.scalars().all())

    async def count_overlapping(
        self, calendar_id: UUID, start: datetime, end: datetime
    ) -> int:
        result = await self.db.execute(
            select(func.count(TimeSlot.id)).where(*_overlapping(calendar_id, start, end))
        )
        return result.scalar_one() or 0

    async def exists_overlap(
        self,
        calendar_id: UUID,
        start: datetime,
        end: datetime,
        exclude_id: UUID | None = None,
    ) -> bool:
        conditions = list(_overlapping(calendar_id, start, end))
        if exclude_id is not None:
            conditions.append(TimeSlot.id != exclude_id)
        result = await self.db.execute(select(exists().where(*conditions)))
        return bool(result.scalar())

    async def save(self, slot: TimeSlot) -> TimeSlot:
        """Stage ``slot`` and flush.

        For an existing row the UPDATE is conditioned on the version loaded
        with it; a concurrent writer makes the flush raise StaleDataError.
        """
        self.db.add(slot)
        await self.db.flush()
        return slot

    async def delete(self, slot: TimeSlot) -> None:
        await self.db.delete(slot)
        await self.db.flush()
