"""Core module."""

from .app import Application, IApplication
from .exceptions import CatalogUnavailable, FaucetError, ServiceError
from .faucet import CollectingChannel, FaucetAgent, IFaucetAgent, IReplyChannel
from .models import (
    CatalogCacheRecord,
    ConversationState,
    DripResult,
    InboundMessage,
    NetworkCatalogEntry,
    TraceEvent,
)
from .networks import INetworkClient, LearnWeb3Client, NetworkCatalog
from .sessions import InMemorySessionStore, ISessionStore
from .storage import ICacheStore, IStorage, Storage
from .tracker import ITracker, Tracker

__all__ = [
    # Application
    "Application",
    "IApplication",
    # Errors
    "FaucetError",
    "ServiceError",
    "CatalogUnavailable",
    # Models
    "InboundMessage",
    "NetworkCatalogEntry",
    "CatalogCacheRecord",
    "DripResult",
    "ConversationState",
    "TraceEvent",
    # Components
    "ICacheStore",
    "IStorage",
    "Storage",
    "ITracker",
    "Tracker",
    "INetworkClient",
    "LearnWeb3Client",
    "NetworkCatalog",
    "ISessionStore",
    "InMemorySessionStore",
    "IFaucetAgent",
    "FaucetAgent",
    "IReplyChannel",
    "CollectingChannel",
]
