"""Tests for the slot lifecycle: range rules, non-overlap, ownership."""

from datetime import timedelta
from uuid import uuid4

import pytest

from helpers import at
from slotbook.core.errors import ConflictError, ForbiddenError, InvalidInputError, NotFoundError
from slotbook.core.pagination import PageRequest
from slotbook.models.time_slot import SlotStatus
from slotbook.services.booking import BookingService
from slotbook.services.meeting import MeetingService
from slotbook.services.time_slot import TimeSlotService, overlaps, validate_slot_range


# ─── Pure rules ───────────────────────────────────────────────────────────────

class TestOverlapPredicate:
    def test_disjoint(self):
        assert not overlaps(at(9), at(10), at(11), at(12))

    def test_touching_edges_do_not_overlap(self):
        assert not overlaps(at(9), at(10), at(10), at(11))
        assert not overlaps(at(10), at(11), at(9), at(10))

    def test_partial_overlap(self):
        assert overlaps(at(9), at(10), at(9, 30), at(10, 30))

    def test_containment(self):
        assert overlaps(at(9), at(12), at(10), at(11))
        assert overlaps(at(10), at(11), at(9), at(12))

    def test_identical(self):
        assert overlaps(at(9), at(10), at(9), at(10))


class TestRangeValidation:
    def test_end_before_start(self):
        with pytest.raises(InvalidInputError, match="after"):
            validate_slot_range(at(10), at(9))

    def test_zero_length(self):
        with pytest.raises(InvalidInputError):
            validate_slot_range(at(10), at(10))

    def test_too_short(self):
        with pytest.raises(InvalidInputError, match="15 minutes"):
            validate_slot_range(at(9), at(9, 14) + timedelta(seconds=59))

    def test_exactly_minimum(self):
        validate_slot_range(at(9), at(9, 15))


# ─── Service ──────────────────────────────────────────────────────────────────

class TestCreateSlot:
    @pytest.mark.asyncio
    async def test_creates_free_slot(self, run, alice):
        slot = await run(TimeSlotService, "create_slot", alice.id, at(9), at(10))

        assert slot.status == SlotStatus.FREE
        assert slot.start_time == at(9)
        assert slot.end_time == at(10)
        assert slot.version == 1

    @pytest.mark.asyncio
    async def test_ten_minute_slot_rejected(self, run, alice):
        with pytest.raises(InvalidInputError, match="15 minutes"):
            await run(TimeSlotService, "create_slot", alice.id, at(9), at(9, 10))

    @pytest.mark.asyncio
    async def test_overlapping_slot_rejected(self, run, alice):
        await run(TimeSlotService, "create_slot", alice.id, at(9), at(10))

        with pytest.raises(ConflictError, match="overlaps"):
            await run(TimeSlotService, "create_slot", alice.id, at(9, 30), at(10, 30))

    @pytest.mark.asyncio
    async def test_adjacent_slot_allowed(self, run, alice):
        await run(TimeSlotService, "create_slot", alice.id, at(9), at(10))
        slot = await run(TimeSlotService, "create_slot", alice.id, at(10), at(11))
        assert slot.start_time == at(10)

    @pytest.mark.asyncio
    async def test_other_calendars_do_not_conflict(self, run, alice, bob):
        await run(TimeSlotService, "create_slot", alice.id, at(9), at(10))
        slot = await run(TimeSlotService, "create_slot", bob.id, at(9), at(10))
        assert slot.status == SlotStatus.FREE

    @pytest.mark.asyncio
    async def test_unknown_user_has_no_calendar(self, run):
        with pytest.raises(NotFoundError, match="Calendar"):
            await run(TimeSlotService, "create_slot", uuid4(), at(9), at(10))


class TestUpdateSlot:
    @pytest.mark.asyncio
    async def test_move_within_own_range(self, run, alice):
        """The slot's own prior range is excluded from the overlap check."""
        slot = await run(TimeSlotService, "create_slot", alice.id, at(9), at(10))

        updated = await run(TimeSlotService, "update_slot", alice.id, slot.id, end=at(10, 30))

        assert updated.start_time == at(9)
        assert updated.end_time == at(10, 30)
        assert updated.version == 2

    @pytest.mark.asyncio
    async def test_move_onto_neighbour_rejected(self, run, alice):
        await run(TimeSlotService, "create_slot", alice.id, at(9), at(10))
        slot = await run(TimeSlotService, "create_slot", alice.id, at(11), at(12))

        with pytest.raises(ConflictError, match="overlaps"):
            await run(TimeSlotService, "update_slot", alice.id, slot.id, start=at(9, 45))

    @pytest.mark.asyncio
    async def test_partial_bound_revalidates_duration(self, run, alice):
        slot = await run(TimeSlotService, "create_slot", alice.id, at(9), at(10))

        with pytest.raises(InvalidInputError, match="15 minutes"):
            await run(TimeSlotService, "update_slot", alice.id, slot.id, start=at(9, 50))

    @pytest.mark.asyncio
    async def test_status_override(self, run, alice):
        slot = await run(TimeSlotService, "create_slot", alice.id, at(9), at(10))

        updated = await run(
            TimeSlotService, "update_slot", alice.id, slot.id, status=SlotStatus.BUSY
        )
        assert updated.status == SlotStatus.BUSY

    @pytest.mark.asyncio
    async def test_non_owner_forbidden(self, run, alice, bob):
        slot = await run(TimeSlotService, "create_slot", alice.id, at(9), at(10))

        with pytest.raises(ForbiddenError):
            await run(TimeSlotService, "update_slot", bob.id, slot.id, end=at(11))

    @pytest.mark.asyncio
    async def test_stale_version_is_conflict(self, session_maker, alice):
        """Two writers load the same version; the second write loses."""
        async with session_maker() as db:
            slot = await TimeSlotService(db).create_slot(alice.id, at(9), at(10))

        async with session_maker() as first, session_maker() as second:
            first_service = TimeSlotService(first)
            second_service = TimeSlotService(second)
            first_copy = await first_service.get_slot(alice.id, slot.id)
            second_copy = await second_service.get_slot(alice.id, slot.id)
            assert first_copy.version == second_copy.version

            await first_service.update_slot(alice.id, slot.id, status=SlotStatus.BUSY)

            with pytest.raises(ConflictError, match="concurrently"):
                await second_service.update_slot(alice.id, slot.id, end=at(11))

        async with session_maker() as db:
            current = await TimeSlotService(db).get_slot(alice.id, slot.id)
        assert current.end_time == at(10)
        assert current.status == SlotStatus.BUSY


class TestDeleteAndRead:
    @pytest.mark.asyncio
    async def test_delete_free_slot(self, run, alice):
        slot = await run(TimeSlotService, "create_slot", alice.id, at(9), at(10))

        await run(TimeSlotService, "delete_slot", alice.id, slot.id)

        with pytest.raises(NotFoundError):
            await run(TimeSlotService, "get_slot", alice.id, slot.id)

    @pytest.mark.asyncio
    async def test_delete_busy_slot_blocked(self, run, alice):
        slot = await run(TimeSlotService, "create_slot", alice.id, at(9), at(10))
        await run(TimeSlotService, "update_slot", alice.id, slot.id, status=SlotStatus.BUSY)

        with pytest.raises(ConflictError, match="busy"):
            await run(TimeSlotService, "delete_slot", alice.id, slot.id)

        still_there = await run(TimeSlotService, "get_slot", alice.id, slot.id)
        assert still_there.status == SlotStatus.BUSY

    @pytest.mark.asyncio
    async def test_delete_overridden_slot_with_meeting_blocked(self, run, alice):
        slot = await run(TimeSlotService, "create_slot", alice.id, at(9), at(10))
        meeting = await run(BookingService, "schedule_meeting", alice.id, slot.id, title="Sync")
        await run(TimeSlotService, "update_slot", alice.id, slot.id, status=SlotStatus.FREE)

        with pytest.raises(ConflictError, match="Cancel the meeting first"):
            await run(TimeSlotService, "delete_slot", alice.id, slot.id)

        await run(MeetingService, "cancel_meeting", alice.id, meeting.id)
        freed = await run(TimeSlotService, "get_slot", alice.id, slot.id)
        assert freed.status == SlotStatus.FREE

        await run(TimeSlotService, "delete_slot", alice.id, slot.id)
        with pytest.raises(NotFoundError):
            await run(TimeSlotService, "get_slot", alice.id, slot.id)

    @pytest.mark.asyncio
    async def test_get_foreign_slot_forbidden(self, run, alice, bob):
        slot = await run(TimeSlotService, "create_slot", alice.id, at(9), at(10))

        with pytest.raises(ForbiddenError):
            await run(TimeSlotService, "get_slot", bob.id, slot.id)

    @pytest.mark.asyncio
    async def test_list_in_range_paginated(self, run, alice):
        for hour in (13, 9, 11):
            await run(TimeSlotService, "create_slot", alice.id, at(hour), at(hour + 1))
        await run(TimeSlotService, "create_slot", alice.id, at(9, days=1), at(10, days=1))

        first = await run(
            TimeSlotService, "list_slots", alice.id, at(0), at(23), PageRequest(page=0, size=2)
        )
        second = await run(
            TimeSlotService, "list_slots", alice.id, at(0), at(23), PageRequest(page=1, size=2)
        )

        assert [s.start_time for s in first.items] == [at(9), at(11)]
        assert [s.start_time for s in second.items] == [at(13)]
        assert first.total_elements == 3
        assert first.total_pages == 2

    @pytest.mark.asyncio
    async def test_list_rejects_inverted_window(self, run, alice):
        with pytest.raises(InvalidInputError):
            await run(TimeSlotService, "list_slots", alice.id, at(10), at(9))
