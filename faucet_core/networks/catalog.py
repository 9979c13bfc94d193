"""Cached catalog of supported networks."""

import time
from typing import Callable, Protocol

from pydantic import ValidationError

from ..config import FIVE_MINUTES_MS, SUPPORTED_NETWORKS_KEY
from ..exceptions import CatalogUnavailable, ServiceError
from ..logging_config import get_logger
from ..models import CatalogCacheRecord, NetworkCatalogEntry
from ..storage import ICacheStore
from .client import INetworkClient

logger = get_logger(__name__)


def now_ms() -> int:
    """Current wall-clock time in epoch milliseconds."""
    return int(time.time() * 1000)


def is_stale(record: CatalogCacheRecord, now: int) -> bool:
    """
    Decide whether a cached record must be refetched.

    Only a lastSyncedAt more than five minutes in the future counts as stale,
    so a record written by this process is reused indefinitely.
    """
    return record.last_synced_at > now + FIVE_MINUTES_MS


class INetworkCatalog(Protocol):
    """Source of the current supported-network list."""

    async def get_networks(self) -> list[NetworkCatalogEntry]:
        """Return supported networks, refreshing the cache when needed."""
        ...


class NetworkCatalog:
    """Supported-network list backed by a key-value cache."""

    def __init__(
        self,
        cache: ICacheStore,
        client: INetworkClient,
        clock: Callable[[], int] = now_ms,
    ):
        self._cache = cache
        self._client = client
        self._clock = clock

    async def get_networks(self) -> list[NetworkCatalogEntry]:
        """Return supported networks, refreshing the cache when needed."""
        record = await self._read_cached()
        now = self._clock()

        if record is not None and not is_stale(record, now):
            return record.supported_networks

        return await self._refresh(now)

    async def _read_cached(self) -> CatalogCacheRecord | None:
        raw = await self._cache.get(SUPPORTED_NETWORKS_KEY)
        if not raw:
            return None
        try:
            return CatalogCacheRecord.model_validate_json(raw)
        except ValidationError as e:
            logger.warning("Discarding unreadable catalog cache record: %s", e)
            return None

    async def _refresh(self, now: int) -> list[NetworkCatalogEntry]:
        try:
            networks = await self._client.get_networks()
        except ServiceError as e:
            raise CatalogUnavailable(f"Supported networks unavailable: {e}") from e

        record = CatalogCacheRecord(last_synced_at=now, supported_networks=networks)
        await self._cache.set(
            SUPPORTED_NETWORKS_KEY, record.model_dump_json(by_alias=True)
        )
        logger.info("Catalog cache refreshed with %s networks", len(networks))
        return networks
