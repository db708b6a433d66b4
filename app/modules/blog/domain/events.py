"""Domain events recorded by blog aggregates."""

from dataclasses import dataclass
from datetime import datetime

from infrastructure.events import Event
from modules.blog.domain.identifiers import PostId

POST_PUBLISHED = "blog.post.published"


@dataclass(frozen=True)
class PostPublished:
    post_id: PostId
    published_at: datetime
    locale: str

    def to_event(self) -> Event:
        return Event(
            event_type=POST_PUBLISHED,
            metadata={
                "post_id": str(self.post_id),
                "published_at": self.published_at.isoformat(),
                "locale": self.locale,
            },
        )
