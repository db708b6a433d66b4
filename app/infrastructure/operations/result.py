"""Result type returned by every use case."""

from dataclasses import dataclass
from typing import Any, Optional

from infrastructure.operations.status import OperationStatus

NOT_FOUND_CODE = "NOT_FOUND"


@dataclass
class OperationResult:
    """Outcome of a use case.

    ``data`` holds the response model on success and the error's public
    context on failure. ``error_code`` is the stable external code callers
    branch on (``INVALID_LOCALE``, ``BLOG_POST_MISSING_REQUIRED_FIELDS``...).
    """

    status: OperationStatus
    message: str
    data: Optional[Any] = None
    error_code: Optional[str] = None

    @property
    def is_success(self) -> bool:
        return self.status is OperationStatus.SUCCESS

    @classmethod
    def success(cls, data: Optional[Any] = None, message: str = "ok") -> "OperationResult":
        return cls(OperationStatus.SUCCESS, message, data=data)

    @classmethod
    def error(
        cls,
        status: OperationStatus,
        message: str,
        error_code: Optional[str] = None,
        data: Optional[Any] = None,
    ) -> "OperationResult":
        return cls(status, message, data=data, error_code=error_code)

    @classmethod
    def not_found(cls, message: str) -> "OperationResult":
        """Missing entities are an expected outcome, not an exception."""
        return cls.error(OperationStatus.NOT_FOUND, message, error_code=NOT_FOUND_CODE)
