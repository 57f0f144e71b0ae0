"""Ownership and visibility rules.

Slots belong to their calendar's owner. A meeting is visible to its
organizer and participants, and only the organizer may change it.
Not-visible is reported as NotFound so a stranger cannot confirm that a
meeting exists; a non-owner touching a known slot gets Forbidden.
"""

from uuid import UUID

from slotbook.core.errors import ForbiddenError, NotFoundError
from slotbook.models.calendar import Calendar
from slotbook.models.meeting import Meeting
from slotbook.models.time_slot import TimeSlot


def is_owner(calendar: Calendar, user_id: UUID) -> bool:
    return calendar.user_id == user_id


def is_organizer(meeting: Meeting, user_id: UUID) -> bool:
    return meeting.organizer_id == user_id


def is_organizer_or_participant(meeting: Meeting, user_id: UUID) -> bool:
    return is_organizer(meeting, user_id) or user_id in set(meeting.participant_ids)


def require_slot_owner(calendar: Calendar, slot: TimeSlot, user_id: UUID) -> TimeSlot:
    if slot.calendar_id != calendar.id or not is_owner(calendar, user_id):
        raise ForbiddenError("You do not have access to this slot")
    return slot


def require_meeting_visible(meeting: Meeting | None, user_id: UUID) -> Meeting:
    if meeting is None or not is_organizer_or_participant(meeting, user_id):
        raise NotFoundError("Meeting not found")
    return meeting


def require_meeting_organizer(meeting: Meeting | None, user_id: UUID) -> Meeting:
    if meeting is None:
        raise NotFoundError("Meeting not found")
    if not is_organizer(meeting, user_id):
        raise ForbiddenError("Only the organizer can modify this meeting")
    return meeting
