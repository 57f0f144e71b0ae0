"""TimeSlot model.

A slot is a half-open interval ``[start_time, end_time)`` owned by one
calendar. ``version`` is SQLAlchemy's version counter: every UPDATE is
issued as ``... WHERE id = :id AND version = :version`` and a zero row count
raises ``StaleDataError``, which the transaction boundary reports as a
conflict.
"""

from datetime import datetime
from enum import Enum
from typing import TYPE_CHECKING
from uuid import UUID, uuid4

from sqlalchemy import CheckConstraint, ForeignKey, Index, Integer, Uuid
from sqlalchemy import Enum as SAEnum
from sqlalchemy.orm import Mapped, mapped_column, relationship

from slotbook.core.clock import utcnow
from slotbook.database import Base, UTCDateTime

if TYPE_CHECKING:
    from slotbook.models.calendar import Calendar


class SlotStatus(str, Enum):
    """Slot availability states."""

    FREE = "FREE"
    BUSY = "BUSY"


class TimeSlot(Base):
    """Bookable time interval in a calendar."""

    __tablename__ = "time_slots"

    id: Mapped[UUID] = mapped_column(
        Uuid(as_uuid=True),
        primary_key=True,
        default=uuid4,
    )
    calendar_id: Mapped[UUID] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("calendars.id", ondelete="CASCADE"),
        nullable=False,
    )
    start_time: Mapped[datetime] = mapped_column(UTCDateTime(), nullable=False)
    end_time: Mapped[datetime] = mapped_column(UTCDateTime(), nullable=False)
    status: Mapped[SlotStatus] = mapped_column(
        SAEnum(SlotStatus, native_enum=False, length=10, name="slot_status"),
        default=SlotStatus.FREE,
        nullable=False,
    )
    created_at: Mapped[datetime] = mapped_column(
        UTCDateTime(),
        default=utcnow,
        nullable=False,
    )
    updated_at: Mapped[datetime] = mapped_column(
        UTCDateTime(),
        default=utcnow,
        onupdate=utcnow,
        nullable=False,
    )
    version: Mapped[int] = mapped_column(Integer, nullable=False)

    # Relationships
    calendar: Mapped["Calendar"] = relationship("Calendar", back_populates="slots")

    __mapper_args__ = {"version_id_col": version}

    __table_args__ = (
        Index("ix_time_slots_calendar_start", "calendar_id", "start_time"),
        CheckConstraint("end_time > start_time", name="ck_time_slots_range"),
    )

    @property
    def is_free(self) -> bool:
        return self.status == SlotStatus.FREE
