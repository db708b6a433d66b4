"""Request and response schemas for blog use cases.

Responses carry plain values materialized in one locale plus the locale tag
that was used. Update requests are sparse: a field left out of the payload is
not the same as a field sent as ``null``.
"""

from datetime import datetime
from typing import Annotated, Any, Dict, Optional

from pydantic import ConfigDict, Field

from infrastructure.i18n import Locale
from infrastructure.models import InfrastructureModel
from modules.blog.domain import Post, PostStatus
from modules.content.domain.patch import NULL, UNSET, Value
from modules.content.domain.seo import SeoMetadata, SeoMetadataUpdate


class GetPostRequest(InfrastructureModel):
    """Schema for fetching a post in one locale."""

    post_id: Annotated[
        str,
        Field(
            ...,
            min_length=1,
            description="Post identifier (UUID)",
            json_schema_extra={"example": "0b7a4b9e-5f0e-4c55-9c55-0f1c8f3d2a11"},
        ),
    ]
    locale: Annotated[
        Locale,
        Field(..., description="Locale to materialize", json_schema_extra={"example": "en"}),
    ]


class PostResponse(InfrastructureModel):
    """Schema for a post as materialized in ``locale``."""

    id: str
    title: Optional[str] = None
    description: Optional[str] = None
    content: Optional[str] = None
    status: PostStatus
    published_at: Optional[datetime] = None
    seo_metadata_id: Optional[str] = None
    locale: str

    @classmethod
    def from_post(cls, post: Post, locale: Optional[Locale] = None) -> "PostResponse":
        target = locale or post.active_locale
        return cls(
            id=str(post.id),
            title=post.translation("title", target),
            description=post.translation("description", target),
            content=post.translation("content", target),
            status=post.status,
            published_at=post.published_at,
            seo_metadata_id=str(post.seo_metadata_id) if post.seo_metadata_id else None,
            locale=target.value if target is not None else "",
        )


class PostContentRequest(InfrastructureModel):
    """Schema for writing a post's translatable fields in one locale.

    Only the fields present in the payload are written.
    """

    model_config = ConfigDict(extra="forbid")

    title: Annotated[Optional[str], Field(default=None, max_length=255)] = None
    description: Optional[str] = None
    content: Optional[str] = None

    def changes(self) -> Dict[str, Any]:
        """Supplied fields and their values, in declaration order."""
        return {
            name: getattr(self, name)
            for name in type(self).model_fields
            if name in self.model_fields_set
        }


class SeoMetadataRequest(InfrastructureModel):
    """Schema for a sparse SEO metadata update.

    Omitted fields are left untouched; fields sent as ``null`` are cleared.
    """

    model_config = ConfigDict(extra="forbid")

    title: Optional[str] = None
    description: Optional[str] = None
    keywords: Optional[str] = None
    og_title: Optional[str] = None
    og_description: Optional[str] = None
    og_image: Optional[str] = None
    og_type: Optional[str] = None
    twitter_title: Optional[str] = None
    twitter_description: Optional[str] = None
    twitter_image: Optional[str] = None
    twitter_card: Optional[str] = None
    canonical_url: Optional[str] = None
    no_index: Optional[bool] = None
    no_follow: Optional[bool] = None

    def to_update(self) -> SeoMetadataUpdate:
        patches = {}
        for name in type(self).model_fields:
            if name not in self.model_fields_set:
                patches[name] = UNSET
            elif getattr(self, name) is None:
                patches[name] = NULL
            else:
                patches[name] = Value(getattr(self, name))
        return SeoMetadataUpdate(**patches)


class SeoMetadataResponse(InfrastructureModel):
    """Schema for SEO metadata as materialized in ``locale``."""

    id: str
    entity_type: str
    entity_id: str
    title: Optional[str] = None
    description: Optional[str] = None
    keywords: Optional[str] = None
    og_title: Optional[str] = None
    og_description: Optional[str] = None
    og_image: Optional[str] = None
    og_type: Optional[str] = None
    twitter_title: Optional[str] = None
    twitter_description: Optional[str] = None
    twitter_image: Optional[str] = None
    twitter_card: Optional[str] = None
    canonical_url: Optional[str] = None
    no_index: bool = False
    no_follow: bool = False
    locale: str

    @classmethod
    def from_record(cls, record: SeoMetadata, locale: Optional[Locale] = None) -> "SeoMetadataResponse":
        target = locale or record.active_locale
        return cls(
            id=str(record.id),
            entity_type=record.entity_type,
            entity_id=record.entity_id,
            og_image=record.og_image,
            og_type=record.og_type,
            twitter_image=record.twitter_image,
            twitter_card=record.twitter_card,
            canonical_url=record.canonical_url,
            no_index=record.no_index,
            no_follow=record.no_follow,
            locale=target.value if target is not None else "",
            **record.translations(target),
        )
