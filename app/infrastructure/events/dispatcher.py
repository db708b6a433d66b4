"""Event dispatcher for the infrastructure event system.

Provides a centralized dispatcher with an in-process handler registry.
Handlers are registered with decorators and called synchronously when
events are dispatched.
"""

from typing import Any, Callable, Dict, Iterable, List

from infrastructure.events.models import DomainEvent, Event
from infrastructure.logging import get_module_logger

logger = get_module_logger()

# Event handler registry: event_type -> list of handlers
EVENT_HANDLERS: Dict[str, List[Callable]] = {}


def register_event_handler(event_type: str):
    """Decorator to register an event handler for a specific event type.

    Registering the same handler twice for one event type is a no-op.

    Args:
        event_type: The type of event to handle (e.g., 'blog.post.published').

    Returns:
        Decorator function that registers the handler.
    """

    def decorator(handler_func: Callable) -> Callable:
        handlers = EVENT_HANDLERS.setdefault(event_type, [])
        if handler_func not in handlers:
            handlers.append(handler_func)
        logger.debug(
            "registered_event_handler",
            handler=getattr(handler_func, "__name__", "unknown"),
            event_type=event_type,
            total_handlers=len(handlers),
        )
        return handler_func

    return decorator


def dispatch_event(event: Event) -> List[Any]:
    """Dispatch event synchronously to all registered handlers.

    If a handler raises, the failure is logged and the remaining handlers
    still run. The aggregate change that produced the event is already
    persisted, so a failing side effect must not undo it.

    Args:
        event: The event to dispatch.

    Returns:
        List of return values from all handlers that succeeded.
    """
    results = []
    handlers = EVENT_HANDLERS.get(event.event_type, [])

    logger.info(
        "dispatching_event",
        event_type=event.event_type,
        handler_count=len(handlers),
        correlation_id=str(event.correlation_id),
    )

    for handler in handlers:
        try:
            results.append(handler(event))
        except Exception as e:
            logger.error(
                "event_handler_failed",
                handler=getattr(handler, "__name__", "unknown"),
                event_type=event.event_type,
                error=str(e),
                correlation_id=str(event.correlation_id),
            )

    return results


def dispatch_all(domain_events: Iterable[DomainEvent]) -> int:
    """Dispatch every recorded domain event in order.

    Args:
        domain_events: Events pulled from an aggregate after it was saved.

    Returns:
        Number of events dispatched.
    """
    count = 0
    for domain_event in domain_events:
        dispatch_event(domain_event.to_event())
        count += 1
    return count


def get_registered_events() -> List[str]:
    """Get list of all registered event types."""
    return list(EVENT_HANDLERS.keys())


def get_handlers_for_event(event_type: str) -> List[Callable]:
    """Get all handlers registered for a specific event type."""
    return EVENT_HANDLERS.get(event_type, [])


def clear_handlers() -> None:
    """Clear all registered handlers.

    WARNING: This is intended for testing only.
    """
    EVENT_HANDLERS.clear()
    logger.debug("cleared_all_event_handlers")
