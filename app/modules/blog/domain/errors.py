"""Errors for the blog module."""

from typing import Any, ClassVar, Dict, Optional

from infrastructure.operations.errors import DomainError
from infrastructure.operations.status import OperationStatus


class PostNotReadyForPublicationError(DomainError):
    """Raised when a post fails a publication precondition.

    Attributes:
        field: The field that blocked publication.
        additional_info: Optional extra detail for the caller.
    """

    error_code: ClassVar[str] = "BLOG_POST_MISSING_REQUIRED_FIELDS"
    status: ClassVar[OperationStatus] = OperationStatus.VALIDATION_ERROR

    def __init__(self, message: str, field: str, additional_info: Optional[str] = None):
        super().__init__(message)
        self.field = field
        self.additional_info = additional_info

    @classmethod
    def missing_title(cls) -> "PostNotReadyForPublicationError":
        return cls("Cannot publish post without title", field="title")

    @classmethod
    def missing_description(cls) -> "PostNotReadyForPublicationError":
        return cls("Cannot publish post without description", field="description")

    @classmethod
    def missing_content(cls) -> "PostNotReadyForPublicationError":
        return cls("Cannot publish post without content", field="content")

    @classmethod
    def already_published(cls) -> "PostNotReadyForPublicationError":
        return cls(
            "Already published",
            field="status",
            additional_info="Published post can not be published again",
        )

    def public_context(self) -> Dict[str, Any]:
        return {"field": self.field, "additional_info": self.additional_info}
