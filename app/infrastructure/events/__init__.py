"""Infrastructure event system - centralized event dispatcher.

A lightweight, in-process event dispatcher for cross-module communication.

Usage:

    from infrastructure.events import Event, register_event_handler, dispatch_event

    @register_event_handler("blog.post.published")
    def handle_post_published(event: Event) -> None:
        ...

    dispatch_event(Event(event_type="blog.post.published", metadata={"post_id": "..."}))
"""

from infrastructure.events.dispatcher import (
    clear_handlers,
    dispatch_all,
    dispatch_event,
    get_handlers_for_event,
    get_registered_events,
    register_event_handler,
)
from infrastructure.events.models import DomainEvent, Event

__all__ = [
    "Event",
    "DomainEvent",
    "dispatch_event",
    "dispatch_all",
    "register_event_handler",
    "get_registered_events",
    "get_handlers_for_event",
    "clear_handlers",
]
