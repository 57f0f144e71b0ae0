"""Scheduling services.

Services:
- time_slot: slot lifecycle and non-overlap rules
- booking: atomic slot -> meeting conversion
- meeting: meeting read/update/cancel/list
- availability: public (start, end, status) view of a calendar
- user: registration and caller resolution
"""

from slotbook.services.availability import Availability, AvailabilityService, SlotWindow
from slotbook.services.booking import BookingService
from slotbook.services.meeting import MeetingService
from slotbook.services.time_slot import TimeSlotService
from slotbook.services.user import UserService

__all__ = [
    "Availability",
    "AvailabilityService",
    "SlotWindow",
    "BookingService",
    "MeetingService",
    "TimeSlotService",
    "UserService",
]
