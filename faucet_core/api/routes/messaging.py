"""Messaging API routes."""

from pydantic import BaseModel
from fastapi import APIRouter, HTTPException

from ...app import IApplication
from ...faucet import CollectingChannel
from ...logging_config import get_logger
from ...models import InboundMessage

logger = get_logger(__name__)


class MessageRequest(BaseModel):
    """Request model for an inbound message."""

    sender_address: str
    content: str


class MessageResponse(BaseModel):
    """Replies produced for the message, in send order."""

    replies: list[str]


def create_messaging_router(app: IApplication) -> APIRouter:
    """Create messaging router."""
    router = APIRouter(prefix="/api", tags=["messaging"])

    @router.post("/messages", response_model=MessageResponse)
    async def send_message(request: MessageRequest) -> dict:
        """Deliver a message to the faucet agent and return its replies."""
        channel = CollectingChannel()
        try:
            await app.faucet_agent.handle_message(
                InboundMessage(
                    content=request.content,
                    sender_address=request.sender_address,
                ),
                channel,
            )
        except Exception as e:
            # Failures are isolated to this message
            logger.error(
                "Failed to handle message from %s: %s",
                request.sender_address,
                e,
                exc_info=True,
            )
            raise HTTPException(status_code=500, detail=str(e))
        return {"replies": channel.replies}

    return router
