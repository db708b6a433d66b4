"""Domain layer - post aggregate, identifiers, events, and errors."""

from modules.blog.domain.errors import PostNotReadyForPublicationError
from modules.blog.domain.events import POST_PUBLISHED, PostPublished
from modules.blog.domain.identifiers import PostId, PostStatus
from modules.blog.domain.models import Post

__all__ = [
    "POST_PUBLISHED",
    "Post",
    "PostId",
    "PostNotReadyForPublicationError",
    "PostPublished",
    "PostStatus",
]
