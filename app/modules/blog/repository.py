"""Post repositories.

``PostRepository`` is the storage seam used by the blog use cases:

- ``find_by_id(post_id, locale)``: the post materialized in ``locale``, or
  ``None``. The id is validated before storage is touched.
- ``find_all(locale)``: every post materialized in ``locale``; order is
  storage-defined.
- ``save(post)``: upserts the identity row and one translation row per locale
  written since the post was loaded. Other locale rows are left untouched.
- ``remove(post)``: deletes the identity row and all of its translation rows.

When ``fallback_locale`` is set and a post has no row for the requested
locale, the fallback locale's values are materialized in its place. Callers
that are about to write pass ``fallback=False`` so a new locale row never
inherits another locale's text.
"""

import copy
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Protocol

from sqlalchemy import Column, DateTime, ForeignKey, String, Table, delete, select
from sqlalchemy.orm import sessionmaker

from infrastructure.i18n import Locale
from infrastructure.logging import get_module_logger
from infrastructure.persistence import metadata, session_scope
from modules.blog.domain import Post, PostId, PostStatus
from modules.content.domain.identifiers import SeoMetadataId
from modules.content.persistence.seo import seo_metadata_table
from modules.content.persistence.translations import (
    delete_translations,
    hydrate,
    save_translations,
    translation_table,
    upsert,
)

logger = get_module_logger()


class PostRepository(Protocol):
    def find_by_id(self, post_id: Any, locale, fallback: bool = True) -> Optional[Post]: ...

    def find_all(self, locale) -> List[Post]: ...

    def save(self, post: Post) -> None: ...

    def remove(self, post: Post) -> None: ...


posts_table = Table(
    "posts",
    metadata,
    Column("id", String(36), primary_key=True),
    Column("status", String(16), nullable=False),
    Column("published_at", DateTime(timezone=True), nullable=True),
    Column(
        "seo_metadata_id",
        String(36),
        ForeignKey(seo_metadata_table.c.id, ondelete="SET NULL"),
        nullable=True,
    ),
)

post_translations_table = translation_table("post_translations", "posts", Post.translatable_fields())


def _as_utc(value: Optional[datetime]) -> Optional[datetime]:
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class SqlAlchemyPostRepository:
    """Relational ``PostRepository`` over ``posts`` / ``post_translations``."""

    def __init__(self, session_factory: sessionmaker, fallback_locale: Optional[Locale] = None):
        self._session_factory = session_factory
        self._fallback_locale = fallback_locale

    def find_by_id(self, post_id: Any, locale, fallback: bool = True) -> Optional[Post]:
        identifier = PostId.from_string(post_id)
        target = Locale.from_string(locale)
        with session_scope(self._session_factory) as session:
            row = session.execute(
                select(posts_table).where(posts_table.c.id == identifier.value)
            ).mappings().first()
            if row is None:
                logger.debug("post_not_found", post_id=identifier.value)
                return None
            return self._build(session, row, target, fallback)

    def find_all(self, locale) -> List[Post]:
        target = Locale.from_string(locale)
        with session_scope(self._session_factory) as session:
            rows = session.execute(select(posts_table)).mappings().all()
            return [self._build(session, row, target) for row in rows]

    def save(self, post: Post) -> None:
        with session_scope(self._session_factory) as session:
            upsert(
                session,
                posts_table,
                {"id": post.id.value},
                {
                    "status": post.status.value,
                    "published_at": post.published_at,
                    "seo_metadata_id": post.seo_metadata_id.value if post.seo_metadata_id else None,
                },
            )
            locales = save_translations(session, post_translations_table, post, post.id.value)
        post.mark_clean(locales)
        logger.info(
            "post_saved",
            post_id=post.id.value,
            status=post.status.value,
            locales=[locale.value for locale in locales],
        )

    def remove(self, post: Post) -> None:
        with session_scope(self._session_factory) as session:
            delete_translations(session, post_translations_table, post.id.value)
            session.execute(delete(posts_table).where(posts_table.c.id == post.id.value))
        logger.info("post_removed", post_id=post.id.value)

    def _build(self, session, row, locale: Locale, fallback: bool = True) -> Post:
        post = Post(PostId(row["id"]), PostStatus(row["status"]))
        post.published_at = _as_utc(row["published_at"])
        if row["seo_metadata_id"]:
            post.seo_metadata_id = SeoMetadataId(row["seo_metadata_id"])
        hydrate(
            session,
            post_translations_table,
            post,
            row["id"],
            locale,
            self._fallback_locale if fallback else None,
        )
        return post


class InMemoryPostRepository:
    """Dict-backed ``PostRepository`` with the same save/load semantics.

    Stores plain snapshots, so a loaded post never shares state with the
    instance that was saved.
    """

    def __init__(self, fallback_locale: Optional[Locale] = None):
        self._fallback_locale = fallback_locale
        self._rows: Dict[str, Dict[str, Any]] = {}
        self._translations: Dict[str, Dict[Locale, Dict[str, Any]]] = {}

    def find_by_id(self, post_id: Any, locale, fallback: bool = True) -> Optional[Post]:
        identifier = PostId.from_string(post_id)
        target = Locale.from_string(locale)
        row = self._rows.get(identifier.value)
        if row is None:
            return None
        return self._build(row, target, fallback)

    def find_all(self, locale) -> List[Post]:
        target = Locale.from_string(locale)
        return [self._build(row, target) for row in self._rows.values()]

    def save(self, post: Post) -> None:
        self._rows[post.id.value] = {
            "id": post.id.value,
            "status": post.status,
            "published_at": post.published_at,
            "seo_metadata_id": post.seo_metadata_id,
        }
        stored = self._translations.setdefault(post.id.value, {})
        locales = post.dirty_locales()
        for locale in locales:
            row = stored.setdefault(locale, {})
            row.update(copy.deepcopy(post.changed_translations(locale)))
        post.mark_clean(locales)

    def remove(self, post: Post) -> None:
        self._rows.pop(post.id.value, None)
        self._translations.pop(post.id.value, None)

    def __len__(self) -> int:
        return len(self._rows)

    def _build(self, row: Dict[str, Any], locale: Locale, fallback: bool = True) -> Post:
        post = Post(PostId(row["id"]), row["status"])
        post.published_at = row["published_at"]
        post.seo_metadata_id = row["seo_metadata_id"]
        stored = self._translations.get(row["id"], {})
        values = stored.get(locale)
        if values is None and fallback and self._fallback_locale is not None:
            values = stored.get(self._fallback_locale)
        post.materialize(locale, copy.deepcopy(values or {}))
        return post
