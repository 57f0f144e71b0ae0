"""Pydantic schemas for API request/response validation."""

from slotbook.schemas.availability import AvailabilityRead, SlotWindowRead
from slotbook.schemas.meeting import MeetingCreate, MeetingRead, MeetingUpdate
from slotbook.schemas.pagination import PageRead
from slotbook.schemas.time_slot import TimeSlotCreate, TimeSlotRead, TimeSlotUpdate
from slotbook.schemas.user import TokenRead, UserLogin, UserRead, UserRegister

__all__ = [
    "AvailabilityRead",
    "SlotWindowRead",
    "MeetingCreate",
    "MeetingRead",
    "MeetingUpdate",
    "PageRead",
    "TimeSlotCreate",
    "TimeSlotRead",
    "TimeSlotUpdate",
    "TokenRead",
    "UserLogin",
    "UserRead",
    "UserRegister",
]
