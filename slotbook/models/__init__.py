"""SQLAlchemy models package."""

from slotbook.models.user import User
from slotbook.models.calendar import Calendar
from slotbook.models.time_slot import SlotStatus, TimeSlot
from slotbook.models.meeting import Meeting, meeting_participants

__all__ = [
    "User",
    "Calendar",
    "SlotStatus",
    "TimeSlot",
    "Meeting",
    "meeting_participants",
]
