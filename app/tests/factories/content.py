"""Test data factories for content and blog tests.

Provides deterministic builders for:
- Post (optionally translated into several locales)
- SeoMetadata records
- SeoMetadataUpdate payloads
"""

from typing import Dict, Optional

from infrastructure.i18n import Locale
from modules.blog.domain import Post, PostId, PostStatus
from modules.content.domain.identifiers import SeoMetadataId
from modules.content.domain.patch import UNSET, Value
from modules.content.domain.seo import SeoMetadata, SeoMetadataUpdate

POST_ID = "6f1d3c9a-2b4e-4f8a-9c3d-1e2f3a4b5c6d"
SEO_METADATA_ID = "a3b2c1d0-e9f8-4a7b-8c6d-5e4f3a2b1c0d"


def make_post(
    post_id: Optional[str] = None,
    translations: Optional[Dict[Locale, Dict[str, str]]] = None,
    status: PostStatus = PostStatus.DRAFT,
    clean: bool = False,
) -> Post:
    """Create a Post with the given per-locale field values.

    Args:
        post_id: UUID string; a fresh id when omitted.
        translations: ``{locale: {field: value}}``. Defaults to a complete
            English translation.
        status: Initial status.
        clean: Mark every written locale as saved.

    Returns:
        Post instance, active in the last locale written.
    """
    post = Post(PostId(post_id) if post_id else PostId.generate(), status)
    if translations is None:
        translations = {
            Locale.ENGLISH: {
                "title": "Hello",
                "description": "A first post",
                "content": "Body text",
            }
        }
    for locale, values in translations.items():
        for field, value in values.items():
            post.set_translation(field, value, locale)
    if clean:
        post.mark_clean()
    return post


def make_seo_metadata(
    entity_id: str = POST_ID,
    entity_type: str = "blog_post",
    metadata_id: str = SEO_METADATA_ID,
    locale: Locale = Locale.ENGLISH,
    **values,
) -> SeoMetadata:
    """Create a SeoMetadata record with ``values`` written in ``locale``."""
    record = SeoMetadata(SeoMetadataId(metadata_id), entity_type, entity_id)
    record.set_active_locale(locale)
    for field, value in values.items():
        if field in SeoMetadata.translatable_fields():
            record.set_translation(field, value, locale)
        else:
            setattr(record, field, value)
    return record


def make_seo_update(**values) -> SeoMetadataUpdate:
    """Create an update where each keyword is wrapped in ``Value``.

    Pass a patch object (``NULL``, ``UNSET``) directly to use it as-is.
    """
    patches = {}
    for field, value in values.items():
        if value is UNSET or not isinstance(value, (str, bool, int)):
            patches[field] = value
        else:
            patches[field] = Value(value)
    return SeoMetadataUpdate(**patches)
