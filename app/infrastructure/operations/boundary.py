"""Top-level error boundary.

Wraps an entry point (a command handler, a request adapter) so that any
exception escaping the use-case layer is logged with full context and turned
into an ``ErrorResponse`` instead of propagating further.
"""

import functools
from typing import Any, Callable, TypeVar, Union

from pydantic import ValidationError

from infrastructure.logging import get_module_logger
from infrastructure.models import ErrorResponse
from infrastructure.operations.errors import ConfigurationError, DomainError

logger = get_module_logger()

T = TypeVar("T")

INTERNAL_ERROR_CODE = "INTERNAL_ERROR"
VALIDATION_ERROR_CODE = "VALIDATION_ERROR"


def to_error_response(exc: Exception) -> ErrorResponse:
    """Render an exception as an ErrorResponse.

    Recoverable domain errors keep their own code and public context.
    Request schema validation failures list the offending fields.
    Configuration errors and anything unexpected produce a generic
    internal error so that no internals leak to the caller.
    """
    if isinstance(exc, DomainError) and not isinstance(exc, ConfigurationError):
        return ErrorResponse(
            error=exc.message,
            error_code=exc.error_code,
            details=exc.public_context() or None,
        )
    if isinstance(exc, ValidationError):
        return ErrorResponse(
            error="Invalid request",
            error_code=VALIDATION_ERROR_CODE,
            details={
                "errors": [
                    {"field": ".".join(str(part) for part in error["loc"]), "message": error["msg"]}
                    for error in exc.errors()
                ]
            },
        )
    return ErrorResponse(error="Internal error", error_code=INTERNAL_ERROR_CODE)


def error_boundary(func: Callable[..., T]) -> Callable[..., Union[T, ErrorResponse]]:
    """Decorator that converts escaping exceptions into ErrorResponse."""

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Union[T, ErrorResponse]:
        try:
            return func(*args, **kwargs)
        except DomainError as exc:
            if isinstance(exc, ConfigurationError):
                logger.exception(
                    "unhandled_operation_error",
                    operation=func.__name__,
                    error_code=exc.error_code,
                    error=str(exc),
                )
            else:
                logger.warning(
                    "domain_error",
                    operation=func.__name__,
                    error_code=exc.error_code,
                    error=exc.message,
                    context=exc.public_context(),
                )
            return to_error_response(exc)
        except ValidationError as exc:
            logger.warning(
                "request_validation_failed",
                operation=func.__name__,
                error_count=exc.error_count(),
            )
            return to_error_response(exc)
        except Exception as exc:
            logger.exception(
                "unhandled_operation_error",
                operation=func.__name__,
                error_type=type(exc).__name__,
                error=str(exc),
            )
            return to_error_response(exc)

    return wrapper
