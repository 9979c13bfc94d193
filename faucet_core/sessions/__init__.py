"""Session module."""

from .store import InMemorySessionStore, ISessionStore

__all__ = ["ISessionStore", "InMemorySessionStore"]
