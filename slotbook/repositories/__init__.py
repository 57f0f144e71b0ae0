"""Store accessors: async repositories bound to one session."""

from slotbook.repositories.calendar import CalendarRepository
from slotbook.repositories.meeting import MeetingRepository
from slotbook.repositories.time_slot import TimeSlotRepository
from slotbook.repositories.user import UserRepository

__all__ = [
    "CalendarRepository",
    "MeetingRepository",
    "TimeSlotRepository",
    "UserRepository",
]
