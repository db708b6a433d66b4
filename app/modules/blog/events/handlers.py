"""Blog event consumers."""

from infrastructure.events import Event, register_event_handler
from infrastructure.logging import get_module_logger
from modules.blog.domain.events import POST_PUBLISHED

logger = get_module_logger()


def log_post_published(event: Event) -> None:
    metadata = event.metadata
    logger.info(
        "post_published_event_received",
        post_id=metadata.get("post_id"),
        published_at=metadata.get("published_at"),
        locale=metadata.get("locale"),
        correlation_id=str(event.correlation_id),
    )


def register() -> None:
    """Register blog handlers with the dispatcher. Safe to call repeatedly."""
    register_event_handler(POST_PUBLISHED)(log_post_published)
