"""Error classifiers for domain exceptions.

Converts domain exceptions into standardized OperationResult objects.
Centralizes the mapping so every use case reports failures the same way.

Usage:
    from infrastructure.operations.classifiers import classify_domain_error

    try:
        post.publish()
    except DomainError as exc:
        return classify_domain_error(exc)
"""

from infrastructure.operations.errors import ConfigurationError, DomainError
from infrastructure.operations.result import OperationResult


def classify_domain_error(exc: DomainError) -> OperationResult:
    """Classify a recoverable domain error into an OperationResult.

    The result carries the error's status, its stable error code, and its
    public context as ``data``.

    Args:
        exc: Validation, business-rule, or not-found domain error.

    Returns:
        OperationResult with the error's status and code.

    Raises:
        ConfigurationError: Re-raised unchanged; configuration defects are
            not caller-correctable and must reach the top-level boundary.
    """
    if isinstance(exc, ConfigurationError):
        raise exc

    return OperationResult.error(
        status=exc.status,
        message=exc.message,
        error_code=exc.error_code,
        data=exc.public_context() or None,
    )
