"""Outbound reply channels."""

from typing import Protocol


class IReplyChannel(Protocol):
    """Sends replies back to the sender of the message being handled."""

    async def reply(self, content: str) -> None:
        """Send one plain-text reply."""
        ...


class CollectingChannel:
    """Keeps replies in order so a request/response transport can return them."""

    def __init__(self):
        self.replies: list[str] = []

    async def reply(self, content: str) -> None:
        self.replies.append(content)
