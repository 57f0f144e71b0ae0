"""Meeting data access."""

from datetime import datetime
from uuid import UUID

from sqlalchemy import exists, func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from slotbook.models.meeting import Meeting, meeting_participants
from slotbook.models.time_slot import TimeSlot


def _visible_to(user_id: UUID, start: datetime, end: datetime):
    is_participant = (
        select(meeting_participants.c.meeting_id)
        .where(
            meeting_participants.c.meeting_id == Meeting.id,
            meeting_participants.c.user_id == user_id,
        )
        .exists()
    )
    return (
        or_(Meeting.organizer_id == user_id, is_participant),
        TimeSlot.start_time < end,
        TimeSlot.end_time > start,
    )


class MeetingRepository:
    """Queries and persists meetings and their participant sets."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def find_by_id(
        self, meeting_id: UUID, with_participants: bool = True
    ) -> Meeting | None:
        stmt = select(Meeting).where(Meeting.id == meeting_id)
        if with_participants:
            stmt = stmt.options(selectinload(Meeting.participants))
        result = await self.db.execute(stmt)
        return result.scalar_one_or_none()

    async def exists_for_slot(self, slot_id: UUID) -> bool:
        result = await self.db.execute(
            select(exists().where(Meeting.slot_id == slot_id))
        )
        return bool(result.scalar())

    async def find_for_user_in_range(
        self,
        user_id: UUID,
        start: datetime,
        end: datetime,
        limit: int,
        offset: int = 0,
    ) -> list[Meeting]:
        """Meetings organized by or including ``user_id`` whose slot overlaps the window."""
        result = await self.db.execute(
            select(Meeting)
            .join(TimeSlot, TimeSlot.id == Meeting.slot_id)
            .where(*_visible_to(user_id, start, end))
            .options(selectinload(Meeting.participants))
            .order_by(TimeSlot.start_time)
            .limit(limit)
            .offset(offset)
        )
        return list(result.scalars().all())

    async def count_for_user_in_range(
        self, user_id: UUID, start: datetime, end: datetime
    ) -> int:
        result = await self.db.execute(
            select(func.count(Meeting.id))
            .select_from(Meeting)
            .join(TimeSlot, TimeSlot.id == Meeting.slot_id)
            .where(*_visible_to(user_id, start, end))
        )
        return result.scalar_one() or 0

    async def add(self, meeting: Meeting) -> Meeting:
        self.db.add(meeting)
        await self.db.flush()
        return meeting

    async def delete(self, meeting: Meeting) -> None:
        await self.db.delete(meeting)
        await self.db.flush()
