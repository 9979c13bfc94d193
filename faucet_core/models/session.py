"""Conversation state models."""

from dataclasses import dataclass
from enum import Enum


class ConversationState(str, Enum):
    """States of the per-sender step machine."""

    NEW = "new"
    AWAITING_NETWORK = "awaiting_network"
    UNKNOWN = "unknown"

    @classmethod
    def from_step(cls, step: int | None) -> "ConversationState":
        """Resolve a stored step (absent, 0 or 1) to a state."""
        if not step:
            return cls.NEW
        if step == 1:
            return cls.AWAITING_NETWORK
        return cls.UNKNOWN


@dataclass
class SessionEntry:
    """Step counter for one sender plus the time it was last written."""

    step: int
    updated_at: float  # monotonic seconds
