"""Tests for the public availability projection."""

from uuid import uuid4

import pytest

from helpers import at
from slotbook.core.errors import InvalidInputError, NotFoundError
from slotbook.models.time_slot import SlotStatus
from slotbook.services.availability import AvailabilityService, SlotWindow
from slotbook.services.booking import BookingService
from slotbook.services.time_slot import TimeSlotService


class TestAvailability:
    @pytest.mark.asyncio
    async def test_windows_ordered_with_status(self, run, alice):
        busy = await run(TimeSlotService, "create_slot", alice.id, at(14), at(15))
        await run(TimeSlotService, "create_slot", alice.id, at(9), at(10))
        await run(BookingService, "schedule_meeting", alice.id, busy.id, title="1:1")

        availability = await run(
            AvailabilityService, "get_availability", alice.id, at(0), at(23)
        )

        assert availability.user_id == alice.id
        assert availability.windows == [
            SlotWindow(at(9), at(10), SlotStatus.FREE),
            SlotWindow(at(14), at(15), SlotStatus.BUSY),
        ]

    @pytest.mark.asyncio
    async def test_partial_overlap_included(self, run, alice):
        await run(TimeSlotService, "create_slot", alice.id, at(9), at(11))

        availability = await run(
            AvailabilityService, "get_availability", alice.id, at(10), at(12)
        )
        assert len(availability.windows) == 1

    @pytest.mark.asyncio
    async def test_unknown_user(self, run):
        with pytest.raises(NotFoundError):
            await run(AvailabilityService, "get_availability", uuid4(), at(0), at(1))

    @pytest.mark.asyncio
    async def test_inverted_window(self, run, alice):
        with pytest.raises(InvalidInputError):
            await run(AvailabilityService, "get_availability", alice.id, at(2), at(1))
