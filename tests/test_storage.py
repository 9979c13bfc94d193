"""Tests for Storage."""

from datetime import datetime, timedelta, timezone

import pytest

from faucet_core.models import TraceEvent
from faucet_core.storage import Storage


def make_event(event_id: str, ts: datetime, **overrides) -> TraceEvent:
    fields = {
        "id": event_id,
        "event_type": "message_received",
        "actor": "faucet_agent",
        "data": {"sender": "0xabc"},
        "timestamp": ts,
    }
    fields.update(overrides)
    return TraceEvent(**fields)


class TestStorageInit:
    """Tests for Storage initialization."""

    @pytest.mark.asyncio
    async def test_init_creates_tables(self, storage):
        """Test that init creates all tables."""
        async with storage._conn.execute(
            "SELECT name FROM sqlite_master WHERE type='table'"
        ) as cursor:
            tables = [row[0] for row in await cursor.fetchall()]
            assert "kv_cache" in tables
            assert "trace_events" in tables

    @pytest.mark.asyncio
    async def test_init_creates_parent_directory(self, tmp_path):
        """Test that the database directory is created on init, not on import."""
        db_path = tmp_path / "nested" / "data" / "faucet.db"
        storage = Storage(db_path)

        await storage.init()
        await storage.close()

        assert db_path.exists()


class TestStorageCache:
    """Tests for the key-value cache."""

    @pytest.mark.asyncio
    async def test_get_missing_key(self, storage):
        """Test that a missing key reads as None."""
        assert await storage.get("supported-networks") is None

    @pytest.mark.asyncio
    async def test_set_then_get(self, storage):
        """Test that a value is stored verbatim."""
        await storage.set("supported-networks", '{"lastSyncedAt": 1}')
        assert await storage.get("supported-networks") == '{"lastSyncedAt": 1}'

    @pytest.mark.asyncio
    async def test_set_overwrites(self, storage):
        """Test that set replaces the whole value."""
        await storage.set("k", "first")
        await storage.set("k", "second")
        assert await storage.get("k") == "second"


class TestStorageTraceEvents:
    """Tests for TraceEvent storage."""

    @pytest.mark.asyncio
    async def test_save_and_get(self, storage):
        """Test retrieving a saved event."""
        ts = datetime.now(timezone.utc)
        await storage.save_trace_event(make_event("e1", ts))

        events = await storage.get_trace_events()
        assert len(events) == 1
        assert events[0].id == "e1"
        assert events[0].data == {"sender": "0xabc"}
        assert events[0].timestamp == ts

    @pytest.mark.asyncio
    async def test_newest_first(self, storage):
        """Test that events are ordered newest first."""
        base = datetime(2024, 1, 1, 12, 0, 0, tzinfo=timezone.utc)
        for i in range(3):
            await storage.save_trace_event(
                make_event(f"e{i}", base + timedelta(minutes=i))
            )

        events = await storage.get_trace_events()
        assert [e.id for e in events] == ["e2", "e1", "e0"]

    @pytest.mark.asyncio
    async def test_filter_after(self, storage):
        """Test retrieving events after a timestamp."""
        base = datetime(2024, 1, 1, 12, 0, 0, tzinfo=timezone.utc)
        for i in range(3):
            await storage.save_trace_event(
                make_event(f"e{i}", base + timedelta(minutes=i))
            )

        events = await storage.get_trace_events(after=base + timedelta(minutes=1))
        assert [e.id for e in events] == ["e2"]

    @pytest.mark.asyncio
    async def test_filter_by_type_and_actor(self, storage):
        """Test filtering by event type and actor."""
        ts = datetime.now(timezone.utc)
        await storage.save_trace_event(make_event("e1", ts))
        await storage.save_trace_event(
            make_event("e2", ts, event_type="drip_completed")
        )
        await storage.save_trace_event(make_event("e3", ts, actor="sim"))

        by_type = await storage.get_trace_events(event_types=["drip_completed"])
        assert [e.id for e in by_type] == ["e2"]

        by_actor = await storage.get_trace_events(actor="sim")
        assert [e.id for e in by_actor] == ["e3"]

    @pytest.mark.asyncio
    async def test_limit(self, storage):
        """Test that limit caps the result size."""
        ts = datetime.now(timezone.utc)
        for i in range(5):
            await storage.save_trace_event(make_event(f"e{i}", ts))

        events = await storage.get_trace_events(limit=2)
        assert len(events) == 2

    @pytest.mark.asyncio
    async def test_save_generates_id(self, storage):
        """Test that saving an event without ID generates one."""
        event = make_event("", datetime.now(timezone.utc))
        await storage.save_trace_event(event)
        assert event.id


class TestStorageClear:
    """Tests for Storage.clear()."""

    @pytest.mark.asyncio
    async def test_clear_removes_everything(self, storage):
        """Test that clear drops cache entries and trace events."""
        await storage.set("k", "v")
        await storage.save_trace_event(make_event("e1", datetime.now(timezone.utc)))

        await storage.clear()

        assert await storage.get("k") is None
        assert await storage.get_trace_events() == []
