"""Calendar model - identity anchor for a user's slots."""

from typing import TYPE_CHECKING
from uuid import UUID, uuid4

from sqlalchemy import ForeignKey, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from slotbook.database import Base

if TYPE_CHECKING:
    from slotbook.models.time_slot import TimeSlot
    from slotbook.models.user import User


class Calendar(Base):
    """One calendar per user. Holds no time data itself."""

    __tablename__ = "calendars"

    id: Mapped[UUID] = mapped_column(
        Uuid(as_uuid=True),
        primary_key=True,
        default=uuid4,
    )
    user_id: Mapped[UUID] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        unique=True,
        nullable=False,
    )

    # Relationships
    user: Mapped["User"] = relationship("User", back_populates="calendar")
    slots: Mapped[list["TimeSlot"]] = relationship(
        "TimeSlot",
        back_populates="calendar",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
