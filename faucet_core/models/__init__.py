"""Core data models for the faucet assistant."""

from .messages import InboundMessage
from .networks import CatalogCacheRecord, DripResult, NetworkCatalogEntry
from .session import ConversationState, SessionEntry
from .tracing import TraceEvent

__all__ = [
    # Messages
    "InboundMessage",
    # Networks
    "NetworkCatalogEntry",
    "CatalogCacheRecord",
    "DripResult",
    # Session
    "ConversationState",
    "SessionEntry",
    # Tracing
    "TraceEvent",
]
