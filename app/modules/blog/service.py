"""Service layer for the blog module.

Use cases return an ``OperationResult``. Validation and business-rule
failures (unsupported locale, malformed id, publication preconditions) come
back as typed error results; a missing post is a ``NOT_FOUND`` result.
Configuration errors such as an unregistered entity type are not converted:
they propagate to the caller's ``error_boundary``.

Every read takes the locale to materialize. Every write takes the locale it
writes in; loading for a write never applies the fallback locale.
"""

from typing import Any, List, Optional

from infrastructure.events import dispatch_all
from infrastructure.i18n import Locale
from infrastructure.logging import bind_request_context, get_module_logger
from infrastructure.operations import (
    DomainError,
    OperationResult,
    classify_domain_error,
)
from modules.blog.domain import Post, PostId
from modules.blog.repository import PostRepository
from modules.blog.schemas import (
    GetPostRequest,
    PostContentRequest,
    PostResponse,
    SeoMetadataRequest,
    SeoMetadataResponse,
)
from modules.content.domain.registry import EntityTypeRegistry, entity_types
from modules.content.domain.seo import update_or_create
from modules.content.persistence import SeoMetadataRepository

logger = get_module_logger()


class BlogService:
    """Blog use cases over a post repository and an SEO metadata repository."""

    def __init__(
        self,
        posts: PostRepository,
        seo_metadata: SeoMetadataRepository,
        default_locale: Locale = Locale.ENGLISH,
        registry: EntityTypeRegistry = entity_types,
    ):
        self._posts = posts
        self._seo_metadata = seo_metadata
        self._default_locale = default_locale
        self._registry = registry

    def get_post(self, request: GetPostRequest) -> OperationResult:
        with bind_request_context(locale=request.locale, post_id=request.post_id):
            try:
                post = self._posts.find_by_id(request.post_id, request.locale)
            except DomainError as exc:
                return self._failure("get_post", exc)
            if post is None:
                return self._post_not_found(request.post_id)
            return OperationResult.success(PostResponse.from_post(post, request.locale))

    def list_posts(self, locale: Optional[str] = None) -> OperationResult:
        with bind_request_context(locale=locale):
            try:
                target = Locale.resolve(locale, self._default_locale)
                posts = self._posts.find_all(target)
            except DomainError as exc:
                return self._failure("list_posts", exc)
            data: List[PostResponse] = [PostResponse.from_post(post, target) for post in posts]
            return OperationResult.success(data, message=f"{len(data)} posts")

    def create_post(
        self,
        title: str,
        content: str,
        locale: Optional[str] = None,
        description: Optional[str] = None,
    ) -> OperationResult:
        """Create a draft post written in ``locale``."""
        with bind_request_context(locale=locale):
            try:
                target = Locale.resolve(locale, self._default_locale)
                post = Post.create()
                post.change_title(title, target)
                post.change_content(content, target)
                if description is not None:
                    post.change_description(description, target)
                self._posts.save(post)
            except DomainError as exc:
                return self._failure("create_post", exc)

            logger.info("post_created", post_id=str(post.id), locale=target.value)
            return OperationResult.success(
                PostResponse.from_post(post, target), message="Post created"
            )

    def update_post_content(
        self, post_id: Any, locale: Optional[str], request: PostContentRequest
    ) -> OperationResult:
        """Write the supplied translatable fields in ``locale``.

        Other locales are not touched; a locale without a stored row gets one.
        """
        with bind_request_context(locale=locale, post_id=str(post_id)):
            try:
                target = Locale.resolve(locale, self._default_locale)
                post = self._posts.find_by_id(post_id, target, fallback=False)
                if post is None:
                    return self._post_not_found(post_id)
                changes = request.changes()
                for field, value in changes.items():
                    getattr(post, f"change_{field}")(value, target)
                self._posts.save(post)
            except DomainError as exc:
                return self._failure("update_post_content", exc)

            logger.info("post_content_updated", fields=list(changes))
            return OperationResult.success(PostResponse.from_post(post, target))

    def publish_post(self, post_id: Any, locale: Optional[str] = None) -> OperationResult:
        """Publish a post that is complete in ``locale``, then dispatch its events."""
        with bind_request_context(locale=locale, post_id=str(post_id)):
            try:
                target = Locale.resolve(locale, self._default_locale)
                post = self._posts.find_by_id(post_id, target, fallback=False)
                if post is None:
                    return self._post_not_found(post_id)
                post.publish(target)
                self._posts.save(post)
            except DomainError as exc:
                return self._failure("publish_post", exc)

            dispatched = dispatch_all(post.pull_domain_events())
            logger.info("post_published", dispatched_events=dispatched)
            return OperationResult.success(
                PostResponse.from_post(post, target), message="Post published"
            )

    def unpublish_post(self, post_id: Any) -> OperationResult:
        return self._transition(post_id, "unpublish")

    def archive_post(self, post_id: Any) -> OperationResult:
        return self._transition(post_id, "archive")

    def delete_post(self, post_id: Any) -> OperationResult:
        """Remove a post, its translations and its SEO metadata."""
        with bind_request_context(post_id=str(post_id)):
            try:
                post = self._posts.find_by_id(post_id, self._default_locale)
                if post is None:
                    return self._post_not_found(post_id)
                tag = self._registry.resolve_tag(Post)
                seo_metadata = self._seo_metadata.find_for_entity(tag, post.id, self._default_locale)
                if seo_metadata is not None:
                    self._seo_metadata.remove(seo_metadata)
                self._posts.remove(post)
            except DomainError as exc:
                return self._failure("delete_post", exc)

            logger.info("post_deleted")
            return OperationResult.success(message="Post deleted")

    def update_seo_metadata(
        self, post_id: Any, locale: Optional[str], request: SeoMetadataRequest
    ) -> OperationResult:
        """Apply a sparse SEO update in ``locale``, creating the record if needed."""
        with bind_request_context(locale=locale, post_id=str(post_id)):
            try:
                target = Locale.resolve(locale, self._default_locale)
                post = self._posts.find_by_id(post_id, target, fallback=False)
                if post is None:
                    return self._post_not_found(post_id)
                tag = self._registry.resolve_tag(Post)
                existing = self._seo_metadata.find_for_entity(tag, post.id, target, fallback=False)
                record = update_or_create(
                    Post,
                    post.id,
                    request.to_update(),
                    target,
                    existing=existing,
                    registry=self._registry,
                )
                self._seo_metadata.save(record)
                post.change_seo_metadata(record, target)
                self._posts.save(post)
            except DomainError as exc:
                return self._failure("update_seo_metadata", exc)

            return OperationResult.success(SeoMetadataResponse.from_record(record, target))

    def get_seo_metadata(self, post_id: Any, locale: Optional[str] = None) -> OperationResult:
        with bind_request_context(locale=locale, post_id=str(post_id)):
            try:
                target = Locale.resolve(locale, self._default_locale)
                identifier = PostId.from_string(post_id)
                tag = self._registry.resolve_tag(Post)
                record = self._seo_metadata.find_for_entity(tag, identifier, target)
            except DomainError as exc:
                return self._failure("get_seo_metadata", exc)
            if record is None:
                return OperationResult.not_found(f"No SEO metadata for post {post_id}")
            return OperationResult.success(SeoMetadataResponse.from_record(record, target))

    def _transition(self, post_id: Any, action: str) -> OperationResult:
        with bind_request_context(post_id=str(post_id)):
            try:
                post = self._posts.find_by_id(post_id, self._default_locale)
                if post is None:
                    return self._post_not_found(post_id)
                getattr(post, action)()
                self._posts.save(post)
            except DomainError as exc:
                return self._failure(f"{action}_post", exc)

            logger.info("post_status_changed", action=action, status=post.status.value)
            return OperationResult.success(PostResponse.from_post(post, self._default_locale))

    def _post_not_found(self, post_id: Any) -> OperationResult:
        logger.info("post_not_found")
        return OperationResult.not_found(f"Post {post_id} not found")

    def _failure(self, operation: str, exc: DomainError) -> OperationResult:
        result = classify_domain_error(exc)
        logger.warning(
            "blog_operation_failed",
            operation=operation,
            error_code=result.error_code,
            error=result.message,
        )
        return result
