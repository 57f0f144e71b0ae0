"""User model - identity with a normalized, unique email."""

from datetime import datetime
from typing import TYPE_CHECKING
from uuid import UUID, uuid4

from sqlalchemy import String, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from slotbook.core.clock import utcnow
from slotbook.database import Base, UTCDateTime

if TYPE_CHECKING:
    from slotbook.models.calendar import Calendar


def normalize_email(email: str) -> str:
    return email.strip().lower()


class User(Base):
    """User owns exactly one calendar, created together at registration."""

    __tablename__ = "users"

    id: Mapped[UUID] = mapped_column(
        Uuid(as_uuid=True),
        primary_key=True,
        default=uuid4,
    )
    email: Mapped[str] = mapped_column(
        String(255),
        unique=True,
        index=True,
        nullable=False,
    )
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    display_name: Mapped[str] = mapped_column(String(255), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        UTCDateTime(),
        default=utcnow,
        nullable=False,
    )

    # Relationships
    calendar: Mapped["Calendar | None"] = relationship(
        "Calendar",
        back_populates="user",
        uselist=False,
        cascade="all, delete-orphan",
    )
