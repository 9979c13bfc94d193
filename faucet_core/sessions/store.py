"""Per-sender conversation step storage."""

import time
from typing import Callable, Protocol

from ..models import SessionEntry


class ISessionStore(Protocol):
    """Ephemeral per-sender step counter."""

    def get(self, sender: str) -> int | None:
        """Return the stored step, or None when the sender has no session."""
        ...

    def set(self, sender: str, step: int) -> None:
        """Store the step for a sender."""
        ...

    def delete(self, sender: str) -> None:
        """Drop the session for a sender."""
        ...

    def clear(self) -> None:
        """Drop all sessions."""
        ...


class InMemorySessionStore:
    """
    Process-lifetime session map.

    With ttl_seconds None or 0 entries are never evicted. With a positive TTL,
    an entry not written within the last ttl_seconds reads as absent; every
    set() also sweeps expired entries of other senders.
    """

    def __init__(
        self,
        ttl_seconds: float | None = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        if ttl_seconds is not None and ttl_seconds < 0:
            raise ValueError("ttl_seconds must not be negative")
        self._ttl = ttl_seconds or None
        self._clock = clock
        self._entries: dict[str, SessionEntry] = {}

    def get(self, sender: str) -> int | None:
        entry = self._entries.get(sender)
        if entry is None:
            return None
        if self._is_expired(entry, self._clock()):
            del self._entries[sender]
            return None
        return entry.step

    def set(self, sender: str, step: int) -> None:
        now = self._clock()
        self._evict_expired(now)
        self._entries[sender] = SessionEntry(step=step, updated_at=now)

    def delete(self, sender: str) -> None:
        self._entries.pop(sender, None)

    def clear(self) -> None:
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)

    def _evict_expired(self, now: float) -> None:
        if self._ttl is None:
            return
        expired = [s for s, e in self._entries.items() if self._is_expired(e, now)]
        for sender in expired:
            del self._entries[sender]

    def _is_expired(self, entry: SessionEntry, now: float) -> bool:
        if self._ttl is None:
            return False
        return now - entry.updated_at > self._ttl
