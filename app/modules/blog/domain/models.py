"""Post aggregate.

Title, description and content are translatable: they are read through the
post's active locale and written with an explicit locale
(``change_title(value, locale)``). A post loaded by the repository is active in
the locale it was loaded with, so ``post.title`` needs no locale argument.
Use ``post.translation("title", locale)`` to read another materialized locale.
"""

from datetime import datetime, timezone
from typing import Optional

from infrastructure.i18n import Locale
from modules.blog.domain.errors import PostNotReadyForPublicationError
from modules.blog.domain.events import PostPublished
from modules.blog.domain.identifiers import PostId, PostStatus
from modules.content.domain.aggregate import AggregateRoot
from modules.content.domain.identifiers import SeoMetadataId
from modules.content.domain.registry import entity_type
from modules.content.domain.seo import SeoMetadata
from modules.content.domain.translatable import TranslatableField, TranslatableRecord


@entity_type("blog_post")
class Post(AggregateRoot, TranslatableRecord):
    title = TranslatableField()
    description = TranslatableField()
    content = TranslatableField()

    def __init__(self, post_id: PostId, status: PostStatus):
        super().__init__()
        self.id = post_id
        self.status = status
        self.published_at: Optional[datetime] = None
        self.seo_metadata_id: Optional[SeoMetadataId] = None

    @classmethod
    def create(cls) -> "Post":
        """New draft post with a generated id."""
        return cls(PostId.generate(), PostStatus.DRAFT)

    def change_title(self, title: str, locale) -> None:
        self.set_translation("title", title, locale)

    def change_description(self, description: Optional[str], locale) -> None:
        self.set_translation("description", description, locale)

    def change_content(self, content: str, locale) -> None:
        self.set_translation("content", content, locale)

    def change_seo_metadata(self, seo_metadata: SeoMetadata, locale) -> None:
        """Link ``seo_metadata`` to this post and make ``locale`` active.

        Raises:
            ValueError: If the metadata is attached to another entity.
        """
        target = Locale.from_string(locale)
        if seo_metadata.entity_id != str(self.id):
            raise ValueError(
                f"SEO metadata {seo_metadata.id} is attached to {seo_metadata.entity_id}, not post {self.id}"
            )
        self.set_active_locale(target)
        self.seo_metadata_id = seo_metadata.id

    def publish(self, locale=None) -> None:
        """Publish the post if it is ready in ``locale`` (default: the active locale).

        Raises:
            PostNotReadyForPublicationError: If already published or a required
                field is empty in that locale.
        """
        target = Locale.from_string(locale) if locale is not None else self.active_locale
        self._ensure_can_be_published(target)

        self.published_at = datetime.now(timezone.utc)
        self.status = PostStatus.PUBLISHED
        self.record_event(
            PostPublished(
                post_id=self.id,
                published_at=self.published_at,
                locale=target.value if target is not None else "",
            )
        )

    def unpublish(self) -> None:
        self.published_at = None
        self.status = PostStatus.DRAFT

    def archive(self) -> None:
        self.published_at = None
        self.status = PostStatus.ARCHIVED

    @property
    def is_published(self) -> bool:
        return self.status == PostStatus.PUBLISHED

    def _ensure_can_be_published(self, locale: Optional[Locale]) -> None:
        if self.status == PostStatus.PUBLISHED:
            raise PostNotReadyForPublicationError.already_published()
        if not self.translation("title", locale):
            raise PostNotReadyForPublicationError.missing_title()
        if not self.translation("content", locale):
            raise PostNotReadyForPublicationError.missing_content()
        if not self.translation("description", locale):
            raise PostNotReadyForPublicationError.missing_description()

    def __repr__(self) -> str:
        return f"Post(id={self.id}, status={self.status.value}, locale={self.active_locale})"
