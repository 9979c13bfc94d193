"""Tests for Tracker."""

import pytest

from faucet_core.tracker import Tracker


class TestTracker:
    """Tests for Tracker.track()."""

    @pytest.mark.asyncio
    async def test_track_saves_event(self, tracker, storage):
        """Test that track() stores a TraceEvent."""
        await tracker.track("drip_completed", "faucet_agent", {"network_id": "sepolia"})

        events = await storage.get_trace_events()
        assert len(events) == 1
        assert events[0].event_type == "drip_completed"
        assert events[0].actor == "faucet_agent"
        assert events[0].data == {"network_id": "sepolia"}

    @pytest.mark.asyncio
    async def test_track_generates_unique_ids(self, tracker, storage):
        """Test that each event gets its own ID."""
        await tracker.track("a", "x", {})
        await tracker.track("b", "x", {})

        events = await storage.get_trace_events()
        assert len({e.id for e in events}) == 2

    @pytest.mark.asyncio
    async def test_track_sets_utc_timestamp(self, storage):
        """Test that timestamps are timezone-aware."""
        tracker = Tracker(storage)
        await tracker.track("a", "x", {})

        events = await storage.get_trace_events()
        assert events[0].timestamp.tzinfo is not None
