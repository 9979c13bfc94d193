"""SIM implementation - scripted faucet conversations over the HTTP API."""

import asyncio
import random
from typing import Protocol

import httpx

from faucet_core.logging_config import get_logger
from faucet_core.tracker import ITracker

logger = get_logger(__name__)

# Each virtual user greets, asks for an unsupported network, then picks one
DEFAULT_SCRIPT = ["hi", "dogechain", "Base Sepolia"]

DEFAULT_USERS = [
    "0x1111111111111111111111111111111111111111",
    "0x2222222222222222222222222222222222222222",
]


class ISim(Protocol):
    """Drive virtual senders through the faucet conversation."""

    async def start(self) -> None:
        """Start the scripted scenario."""
        ...

    async def stop(self) -> None:
        """Stop the scenario."""
        ...


class Sim:
    """SIM with a scripted scenario for testing."""

    def __init__(
        self,
        api_url: str = "http://localhost:8000",
        tracker: ITracker | None = None,
        senders: list[str] | None = None,
        script: list[str] | None = None,
        max_delay: float = 2.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._api_url = api_url
        self._tracker = tracker
        self._senders = senders or DEFAULT_USERS
        self._script = script or DEFAULT_SCRIPT
        self._max_delay = max_delay
        self._transport = transport
        self._running = False
        self._task: asyncio.Task | None = None
        self._client: httpx.AsyncClient | None = None
        self.transcript: list[tuple[str, str, list[str]]] = []

    def set_tracker(self, tracker: ITracker) -> None:
        """Inject tracker for SIM trace events."""
        self._tracker = tracker

    async def start(self) -> None:
        """Start the scripted scenario."""
        if self._running:
            return

        self._running = True
        self._client = httpx.AsyncClient(
            base_url=self._api_url, transport=self._transport
        )
        self._task = asyncio.create_task(self._run_scenario())

    async def wait(self) -> None:
        """Wait for the scenario to finish."""
        if self._task:
            await self._task

    async def stop(self) -> None:
        """Stop scenario."""
        self._running = False

        if self._task:
            self._task.cancel()
            try:
                await self._task
            except asyncio.CancelledError:
                pass
            self._task = None

        if self._client:
            await self._client.aclose()
            self._client = None

    async def _run_scenario(self) -> None:
        """Send every script line for every sender, one round at a time."""
        summary = {
            "scenario": "scripted",
            "sender_count": len(self._senders),
            "message_count": len(self._senders) * len(self._script),
        }
        try:
            if self._tracker:
                await self._tracker.track("sim_started", "sim", summary)

            for text in self._script:
                for sender in self._senders:
                    if not self._running:
                        return
                    await self._send_message(sender, text)
                    if self._max_delay > 0:
                        await asyncio.sleep(random.uniform(0, self._max_delay))

        except asyncio.CancelledError:
            pass
        except Exception as e:
            logger.error("SIM scenario error: %s", e)
        finally:
            self._running = False
            if self._tracker:
                await self._tracker.track("sim_completed", "sim", summary)

    async def _send_message(self, sender: str, text: str) -> None:
        """Send a message via HTTP API."""
        if not self._client:
            return

        try:
            response = await self._client.post(
                "/api/messages",
                json={"sender_address": sender, "content": text},
                timeout=30.0,
            )
        except httpx.HTTPError as e:
            logger.error("SIM: Failed to send message: %s", e)
            return

        if response.status_code != 200:
            logger.error("SIM: Error sending message: %s", response.status_code)
            return

        replies = response.json().get("replies", [])
        self.transcript.append((sender, text, replies))
        logger.info("SIM: %s -> %s", sender, text)
        for reply in replies:
            logger.info("SIM: Reply: %s", reply)
