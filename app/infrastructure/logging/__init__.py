"""Structured logging for the content backend (structlog).

``configure_logging`` sets up rendering once at startup, ``get_module_logger``
returns a logger bound to the calling module, and ``bind_request_context``
attaches a correlation id and the request locale to every event logged inside
a use case.
"""

from infrastructure.logging.context import (
    bind_request_context,
    clear_request_context,
    get_correlation_id,
)
from infrastructure.logging.setup import configure_logging, get_module_logger

__all__ = [
    "configure_logging",
    "get_module_logger",
    "bind_request_context",
    "get_correlation_id",
    "clear_request_context",
]
