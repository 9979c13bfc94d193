"""Application bootstrap and lifecycle management."""

import os
from typing import Protocol

from .config import get_session_ttl_seconds, resolve_db_path
from .faucet import FaucetAgent, IFaucetAgent
from .logging_config import get_logger
from .networks import INetworkClient, LearnWeb3Client, NetworkCatalog
from .sessions import InMemorySessionStore, ISessionStore
from .storage import IStorage, Storage
from .tracker import ITracker, Tracker

logger = get_logger(__name__)


class IApplication(Protocol):
    """Bootstrap and lifecycle."""

    async def start(self) -> None:
        """Initialize components in dependency order."""
        ...

    async def stop(self) -> None:
        """Shutdown in reverse order."""
        ...

    async def reset(self) -> None:
        """Drop cached catalog, trace events and sessions."""
        ...

    @property
    def storage(self) -> IStorage:
        """Storage holding the catalog cache and trace events."""
        ...

    @property
    def faucet_agent(self) -> IFaucetAgent:
        """Conversation handler for inbound messages."""
        ...


class Application:
    """Main application bootstrap."""

    def __init__(
        self,
        db_path: str | None = None,
        bot_address: str | None = None,
        network_client: INetworkClient | None = None,
        session_ttl_seconds: float | None = None,
    ):
        env_db_path = os.getenv("DATABASE_URL") if db_path is None else db_path
        self._db_path = resolve_db_path(env_db_path)

        self._bot_address = bot_address or os.getenv("BOT_ADDRESS")
        if not self._bot_address:
            raise ValueError("BOT_ADDRESS environment variable not set")

        if session_ttl_seconds is None:
            session_ttl_seconds = get_session_ttl_seconds()
        self._session_ttl = session_ttl_seconds

        # Injected clients are not owned and are left open on stop()
        self._network_client = network_client
        self._owns_client = network_client is None

        # Components (will be initialized in start())
        self._storage: IStorage | None = None
        self._tracker: ITracker | None = None
        self._catalog: NetworkCatalog | None = None
        self._sessions: ISessionStore | None = None
        self._faucet_agent: IFaucetAgent | None = None

    async def start(self) -> None:
        """Initialize components in dependency order."""
        logger.info("Starting application")

        # 1. Storage (no dependencies)
        self._storage = Storage(self._db_path)
        await self._storage.init()
        logger.info("Storage initialized")

        # 2. Tracker (depends on Storage)
        self._tracker = Tracker(self._storage)

        # 3. Network client (external service)
        if self._network_client is None:
            self._network_client = LearnWeb3Client()
        logger.info("Network client initialized")

        # 4. Catalog cache (depends on Storage + client)
        self._catalog = NetworkCatalog(self._storage, self._network_client)

        # 5. Sessions (process-lifetime)
        self._sessions = InMemorySessionStore(ttl_seconds=self._session_ttl)

        # 6. FaucetAgent (depends on everything above)
        self._faucet_agent = FaucetAgent(
            bot_address=self._bot_address,
            catalog=self._catalog,
            network_client=self._network_client,
            sessions=self._sessions,
            tracker=self._tracker,
        )
        logger.info("All components initialized successfully")

    async def stop(self) -> None:
        """Shutdown in reverse order."""
        if self._network_client and self._owns_client:
            await self._network_client.close()
            self._network_client = None
            logger.info("Network client closed")
        if self._storage:
            await self._storage.close()
            logger.info("Storage closed")

    async def reset(self) -> None:
        """Drop cached catalog, trace events and sessions."""
        if self._storage:
            await self._storage.clear()
            logger.info("Storage cleared")
        if self._sessions is not None:
            self._sessions.clear()
            logger.info("Sessions cleared")

    @property
    def storage(self) -> IStorage:
        """Get storage instance."""
        if not self._storage:
            raise RuntimeError("Application not started")
        return self._storage

    @property
    def tracker(self) -> ITracker:
        """Get tracker instance."""
        if not self._tracker:
            raise RuntimeError("Application not started")
        return self._tracker

    @property
    def sessions(self) -> ISessionStore:
        """Get session store instance."""
        if self._sessions is None:
            raise RuntimeError("Application not started")
        return self._sessions

    @property
    def faucet_agent(self) -> IFaucetAgent:
        """Get faucet agent instance."""
        if not self._faucet_agent:
            raise RuntimeError("Application not started")
        return self._faucet_agent
