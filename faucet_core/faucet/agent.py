"""FaucetAgent implementation."""

from typing import Protocol

from ..config import get_frame_base_url
from ..logging_config import get_logger
from ..models import ConversationState, InboundMessage, NetworkCatalogEntry
from ..networks import INetworkCatalog, INetworkClient
from ..sessions import ISessionStore
from ..tracker import ITracker
from . import replies
from .channel import IReplyChannel

logger = get_logger(__name__)

RESET_COMMAND = "reset"

STEP_START = 0
STEP_AWAITING_NETWORK = 1


class IFaucetAgent(Protocol):
    """Per-sender conversation that ends in a token drip."""

    async def handle_message(
        self, message: InboundMessage, channel: IReplyChannel
    ) -> None:
        """Handle one inbound message, sending replies through channel."""
        ...


class FaucetAgent:
    """Guides a sender through picking a testnet and dispenses tokens."""

    def __init__(
        self,
        bot_address: str,
        catalog: INetworkCatalog,
        network_client: INetworkClient,
        sessions: ISessionStore,
        tracker: ITracker,
        frame_base_url: str | None = None,
    ):
        self._bot_address = bot_address
        self._catalog = catalog
        self._client = network_client
        self._sessions = sessions
        self._tracker = tracker
        self._frame_base_url = frame_base_url or get_frame_base_url()

    async def handle_message(
        self, message: InboundMessage, channel: IReplyChannel
    ) -> None:
        """
        Handle one inbound message.

        Catalog and drip transport failures propagate to the caller; business
        outcomes are always turned into replies.
        """
        sender = message.sender_address
        content = message.content

        if sender.lower() == self._bot_address.lower():
            await self._tracker.track(
                "message_ignored", "faucet_agent", {"sender": sender}
            )
            return

        await self._tracker.track(
            "message_received",
            "faucet_agent",
            {"sender": sender, "content": content},
        )

        # Falls through to normal dispatch for the same message
        if content == RESET_COMMAND:
            self._sessions.set(sender, STEP_START)
            await self._tracker.track(
                "session_reset", "faucet_agent", {"sender": sender}
            )

        networks = await self._catalog.get_networks()

        state = ConversationState.from_step(self._sessions.get(sender))
        logger.info("Message from %s in state %s", sender, state.value)

        if state is ConversationState.NEW:
            await self._start_conversation(sender, networks, channel)
        elif state is ConversationState.AWAITING_NETWORK:
            await self._handle_network_choice(sender, content, networks, channel)
        else:
            logger.warning(
                "No handler for step %s of %s; message dropped",
                self._sessions.get(sender),
                sender,
            )
            await self._tracker.track(
                "state_unhandled", "faucet_agent", {"sender": sender}
            )

    async def _start_conversation(
        self,
        sender: str,
        networks: list[NetworkCatalogEntry],
        channel: IReplyChannel,
    ) -> None:
        await channel.reply(replies.GREETING)
        await channel.reply(replies.network_menu(networks))
        self._sessions.set(sender, STEP_AWAITING_NETWORK)

    async def _handle_network_choice(
        self,
        sender: str,
        content: str,
        networks: list[NetworkCatalogEntry],
        channel: IReplyChannel,
    ) -> None:
        network_id = replies.normalize_network_input(content)
        network = next((n for n in networks if n.network_id == network_id), None)

        if network is None:
            await self._tracker.track(
                "network_rejected",
                "faucet_agent",
                {"sender": sender, "input": content},
            )
            await channel.reply(replies.unsupported_network(content))
            return

        await channel.reply(replies.PROCESSING)
        await self._tracker.track(
            "drip_requested",
            "faucet_agent",
            {"sender": sender, "network_id": network_id},
        )

        # A transport failure raises here and leaves the sender awaiting a network
        result = await self._client.drip_tokens(network_id, sender)
        self._sessions.set(sender, STEP_START)

        if not result.ok:
            await self._tracker.track(
                "drip_failed",
                "faucet_agent",
                {"sender": sender, "network_id": network_id, "error": result.error},
            )
            await channel.reply(replies.drip_failed(result.error))
            return

        await self._tracker.track(
            "drip_completed",
            "faucet_agent",
            {"sender": sender, "network_id": network_id},
        )
        await channel.reply(replies.RECEIPT_HEADER)
        await channel.reply(replies.receipt_url(self._frame_base_url, network))
