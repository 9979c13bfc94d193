"""Tracing and observability data models."""

from dataclasses import dataclass
from datetime import datetime


@dataclass
class TraceEvent:
    """A single observability event recorded while handling messages."""

    id: str
    event_type: str  # e.g. "message_received", "drip_completed"
    actor: str  # component that recorded the event
    data: dict
    timestamp: datetime
