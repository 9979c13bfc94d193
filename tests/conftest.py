"""Pytest configuration and fixtures."""

import sys
from pathlib import Path
from unittest.mock import AsyncMock, Mock

import pytest
import pytest_asyncio

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

BOT_ADDRESS = "0xB07B07B07B07B07B07B07B07B07B07B07B07B07B"
SENDER = "0xAbCdEf0123456789aBcDeF0123456789AbCdEf01"
FRAME_BASE_URL = "https://frames.example/receipt"


def make_network(**overrides):
    """Build a NetworkCatalogEntry with sensible defaults."""
    from faucet_core.models import NetworkCatalogEntry

    fields = {
        "networkId": "base_sepolia",
        "networkName": "Base Sepolia",
        "networkLogo": "logo.png",
        "tokenName": "TST",
        "dripAmount": "10",
        "balance": "100.5",
    }
    fields.update(overrides)
    return NetworkCatalogEntry.model_validate(fields)


@pytest.fixture
def networks():
    """Catalog with funded and empty networks."""
    return [
        make_network(),
        make_network(
            networkId="sepolia",
            networkName="Sepolia",
            networkLogo="eth.png",
            tokenName="ETH",
            dripAmount="0.01",
            balance="0",
        ),
        make_network(
            networkId="polygon_amoy",
            networkName="Polygon Amoy",
            networkLogo="pol.png",
            tokenName="POL",
            dripAmount="0.5",
            balance="3",
        ),
    ]


@pytest_asyncio.fixture
async def storage():
    """Create in-memory storage for testing."""
    from faucet_core.storage import Storage

    st = Storage(":memory:")
    await st.init()
    yield st
    await st.close()


@pytest.fixture
def tracker(storage):
    """Create Tracker backed by storage."""
    from faucet_core.tracker import Tracker

    return Tracker(storage)


@pytest.fixture
def mock_client(networks):
    """Create mock network information client."""
    from faucet_core.models import DripResult

    client = Mock()
    client.get_networks = AsyncMock(return_value=networks)
    client.drip_tokens = AsyncMock(return_value=DripResult(ok=True))
    return client


@pytest.fixture
def catalog(storage, mock_client):
    """Create NetworkCatalog over in-memory storage and the mock client."""
    from faucet_core.networks import NetworkCatalog

    return NetworkCatalog(storage, mock_client)


@pytest.fixture
def sessions():
    """Create session store without eviction."""
    from faucet_core.sessions import InMemorySessionStore

    return InMemorySessionStore()


@pytest.fixture
def channel():
    """Reply channel that records replies."""
    from faucet_core.faucet import CollectingChannel

    return CollectingChannel()


@pytest.fixture
def faucet_agent(catalog, mock_client, sessions, tracker):
    """Create FaucetAgent for testing."""
    from faucet_core.faucet import FaucetAgent

    return FaucetAgent(
        bot_address=BOT_ADDRESS,
        catalog=catalog,
        network_client=mock_client,
        sessions=sessions,
        tracker=tracker,
        frame_base_url=FRAME_BASE_URL,
    )
