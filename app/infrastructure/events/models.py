"""Event models for the infrastructure event system.

Provides the generic Event envelope and the DomainEvent protocol that
aggregate-level events implement to be dispatched.
"""

from dataclasses import dataclass, field, asdict
from datetime import datetime, timezone
from typing import Any, Dict, Protocol
from uuid import UUID, uuid4


@dataclass
class Event:
    """Envelope for all events dispatched in the system.

    Events are records of something that happened, used for audit trails and
    cross-module communication.
    """

    event_type: str
    """The type of event (e.g., 'blog.post.published')."""

    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    """When the event occurred."""

    correlation_id: UUID = field(default_factory=uuid4)
    """Unique ID to track related events across the system."""

    metadata: Dict[str, Any] = field(default_factory=dict)
    """Custom payload for this event type."""

    def to_dict(self) -> Dict[str, Any]:
        """Serialize event to dictionary with ISO timestamp and string UUID."""
        data = asdict(self)
        data["timestamp"] = self.timestamp.isoformat()
        data["correlation_id"] = str(self.correlation_id)
        return data

    def __hash__(self) -> int:
        return hash((self.correlation_id, self.timestamp))


class DomainEvent(Protocol):
    """Anything an aggregate records that can be turned into an Event."""

    def to_event(self) -> Event: ...
