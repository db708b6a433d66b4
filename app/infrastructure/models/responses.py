"""Standard response wrappers for consistent response formatting.

Presentation adapters (HTTP, console) return these shapes so every outcome of
a use case is rendered the same way.
"""

from typing import Any, Generic, TypeVar

from pydantic import BaseModel, Field

from infrastructure.operations.result import OperationResult

T = TypeVar("T")


class APIResponse(BaseModel, Generic[T]):
    """Generic response wrapper.

    Attributes:
        success: Whether the operation succeeded
        data: Response payload
        message: Optional human-readable message
        error_code: Optional machine-readable error code

    Example:
        >>> APIResponse.from_result(OperationResult.success(data={"id": "1"}))
        APIResponse(success=True, data={'id': '1'}, message='ok', error_code=None)
    """

    success: bool = Field(..., description="Whether the operation succeeded")
    data: T | None = Field(default=None, description="Response payload")
    message: str | None = Field(
        default=None, description="Optional human-readable message"
    )
    error_code: str | None = Field(
        default=None, description="Optional machine-readable error code"
    )

    @classmethod
    def from_result(cls, result: OperationResult) -> "APIResponse":
        """Build a response from a use-case OperationResult."""
        return cls(
            success=result.is_success,
            data=result.data,
            message=result.message,
            error_code=result.error_code,
        )


class ErrorResponse(BaseModel):
    """Standard error response wrapper.

    Attributes:
        success: Always False for error responses
        error: Human-readable error message
        error_code: Machine-readable error code for error handling
        details: Optional public context (e.g., the offending field)

    Example:
        >>> ErrorResponse(
        ...     error="Cannot publish post without title",
        ...     error_code="BLOG_POST_MISSING_REQUIRED_FIELDS",
        ...     details={"field": "title"},
        ... )
    """

    success: bool = Field(default=False, description="Always False for error responses")
    error: str = Field(..., description="Human-readable error message")
    error_code: str = Field(..., description="Machine-readable error code")
    details: dict[str, Any] | None = Field(
        default=None, description="Optional additional error details"
    )
