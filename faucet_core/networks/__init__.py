"""Network information service and catalog cache."""

from .catalog import INetworkCatalog, NetworkCatalog, is_stale, now_ms
from .client import INetworkClient, LearnWeb3Client

__all__ = [
    "INetworkCatalog",
    "INetworkClient",
    "LearnWeb3Client",
    "NetworkCatalog",
    "is_stale",
    "now_ms",
]
