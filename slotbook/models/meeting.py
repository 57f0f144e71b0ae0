"""Meeting model and its participant association table."""

from datetime import datetime
from typing import TYPE_CHECKING
from uuid import UUID, uuid4

from sqlalchemy import Column, ForeignKey, Index, String, Table, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from slotbook.core.clock import utcnow
from slotbook.database import Base, UTCDateTime

if TYPE_CHECKING:
    from slotbook.models.user import User


# Many-to-many association table between meetings and participant users
meeting_participants = Table(
    "meeting_participants",
    Base.metadata,
    Column(
        "meeting_id",
        Uuid(as_uuid=True),
        ForeignKey("meetings.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column(
        "user_id",
        Uuid(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Index("ix_meeting_participants_user_id", "user_id"),
)


class Meeting(Base):
    """A booked slot: organizer plus a set of participant references."""

    __tablename__ = "meetings"

    id: Mapped[UUID] = mapped_column(
        Uuid(as_uuid=True),
        primary_key=True,
        default=uuid4,
    )
    slot_id: Mapped[UUID] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("time_slots.id", ondelete="RESTRICT"),
        unique=True,
        nullable=False,
    )
    organizer_id: Mapped[UUID] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        UTCDateTime(),
        default=utcnow,
        nullable=False,
    )

    # Relationships
    participants: Mapped[list["User"]] = relationship(
        "User",
        secondary=meeting_participants,
    )

    @property
    def participant_ids(self) -> list[UUID]:
        return [user.id for user in self.participants]
