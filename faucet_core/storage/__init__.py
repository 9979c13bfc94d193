"""Storage module."""

from .storage import ICacheStore, IStorage, Storage

__all__ = ["ICacheStore", "IStorage", "Storage"]
