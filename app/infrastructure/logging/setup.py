"""Structlog configuration for the content backend.

``configure_logging`` is called once by ``modules.blog.bootstrap``. Module code
only asks for a logger:

    logger = get_module_logger()
    logger.info("post_saved", post_id=str(post.id), locales=["en", "pl"])

Development renders coloured console lines, production renders one JSON
object per event. Under pytest nothing is emitted.
"""

import inspect
import logging
import sys
from typing import List, Optional

import structlog
from structlog.stdlib import BoundLogger
from structlog.typing import Processor


def _is_test_environment() -> bool:
    return "pytest" in sys.modules


def _processors(production: bool) -> List[Processor]:
    chain: List[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.CallsiteParameterAdder(
            parameters=[
                structlog.processors.CallsiteParameter.FILENAME,
                structlog.processors.CallsiteParameter.LINENO,
                structlog.processors.CallsiteParameter.FUNC_NAME,
            ]
        ),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]
    if production:
        chain.append(structlog.processors.JSONRenderer())
    else:
        chain.append(structlog.dev.ConsoleRenderer())
    return chain


def _apply(processors: List[Processor], level: int, cache: bool = True) -> BoundLogger:
    structlog.configure(
        processors=processors,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=cache,
    )
    logging.basicConfig(format="%(message)s", level=level, force=True)
    return structlog.stdlib.get_logger()


def configure_logging(
    log_level: Optional[str] = None,
    is_production: Optional[bool] = None,
) -> BoundLogger:
    """Configure structlog and the stdlib root logger.

    Args:
        log_level: Level name such as ``"DEBUG"``. Falls back to
            ``Settings.LOG_LEVEL``; unknown names mean INFO.
        is_production: JSON output when True. Falls back to
            ``Settings.is_production``.

    Returns:
        A bound logger using the new configuration.
    """
    if _is_test_environment():
        # Loggers stay usable but the root level sits above CRITICAL. Nothing
        # is cached, so a later configuration still reaches every logger.
        return _apply(
            [
                structlog.stdlib.add_log_level,
                structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
            ],
            logging.CRITICAL + 1,
            cache=False,
        )

    from infrastructure.services.providers import get_settings

    settings = get_settings()
    if is_production is None:
        is_production = settings.is_production
    level_name = (log_level or settings.LOG_LEVEL).upper()
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        level = logging.INFO

    return _apply(_processors(is_production), level)


def get_module_logger() -> BoundLogger:
    """Logger bound to the calling module.

    In ``modules/blog/service.py`` the bound context is
    ``{"component": "service", "module_path": "modules.blog.service"}``.

    The logger is a lazy proxy: modules create it at import time, before
    ``configure_logging`` runs, and it resolves the configuration on first use.
    """
    frame = inspect.currentframe()
    caller = frame.f_back if frame is not None else None
    module = inspect.getmodule(caller) if caller is not None else None
    if module is None:
        return structlog.stdlib.get_logger(component="unknown")
    return structlog.stdlib.get_logger(
        component=module.__name__.rsplit(".", 1)[-1], module_path=module.__name__
    )
