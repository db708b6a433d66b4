"""Domain error base classes.

Every domain failure carries a stable machine-readable ``error_code`` and an
``OperationStatus`` so that use cases can turn it into an ``OperationResult``
without inspecting concrete exception types.

Two families exist:

- ``DomainError``: validation and business-rule failures. Use cases catch these
  and return them as typed results to their immediate caller.
- ``ConfigurationError``: missing or inconsistent startup configuration (for
  example an unregistered entity type). These are never converted into results;
  they propagate to the top-level ``error_boundary``.
"""

from typing import Any, ClassVar, Dict

from infrastructure.operations.status import OperationStatus


class DomainError(Exception):
    """Base class for all domain errors."""

    error_code: ClassVar[str] = "DOMAIN_ERROR"
    status: ClassVar[OperationStatus] = OperationStatus.PERMANENT_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def public_context(self) -> Dict[str, Any]:
        """Additional data safe to include in an external error response."""
        return {}


class ConfigurationError(DomainError):
    """Raised when startup configuration is missing or inconsistent."""

    error_code: ClassVar[str] = "CONFIGURATION_ERROR"
    status: ClassVar[OperationStatus] = OperationStatus.INTERNAL_ERROR
