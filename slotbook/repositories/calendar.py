"""Calendar registry data access."""

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from slotbook.models.calendar import Calendar


class CalendarRepository:
    """Maps a user to their single calendar."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def find_by_user(self, user_id: UUID) -> Calendar | None:
        result = await self.db.execute(
            select(Calendar).where(Calendar.user_id == user_id)
        )
        return result.scalar_one_or_none()

    def add(self, calendar: Calendar) -> None:
        self.db.add(calendar)
