"""Message-related data models."""

from dataclasses import dataclass


@dataclass
class InboundMessage:
    """A single message delivered to the assistant by the transport."""

    content: str
    sender_address: str
