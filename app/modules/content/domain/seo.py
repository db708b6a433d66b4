"""SEO metadata attached to any registered entity.

One ``SeoMetadata`` record exists per ``(entity_type, entity_id)`` pair.
``entity_type`` is the registry discriminator of the owning entity class, so
the metadata table needs no typed foreign key per entity kind.
"""

from dataclasses import dataclass, fields
from typing import Any, Mapping, Optional

from infrastructure.i18n import Locale
from infrastructure.logging import get_module_logger
from modules.content.domain.fill import FieldSpec, fill
from modules.content.domain.identifiers import SeoMetadataId
from modules.content.domain.patch import UNSET, Patch, patch_from
from modules.content.domain.registry import EntityTypeRegistry, entity_types
from modules.content.domain.translatable import TranslatableField, TranslatableRecord

logger = get_module_logger()


class SeoMetadata(TranslatableRecord):
    title = TranslatableField()
    description = TranslatableField()
    keywords = TranslatableField()
    og_title = TranslatableField()
    og_description = TranslatableField()
    twitter_title = TranslatableField()
    twitter_description = TranslatableField()

    def __init__(self, metadata_id: SeoMetadataId, entity_type: str, entity_id: str):
        super().__init__()
        self.id = metadata_id
        self.entity_type = entity_type
        self.entity_id = str(entity_id)
        self.og_image: Optional[str] = None
        self.og_type: Optional[str] = None
        self.twitter_image: Optional[str] = None
        self.twitter_card: Optional[str] = None
        self.canonical_url: Optional[str] = None
        self.no_index: bool = False
        self.no_follow: bool = False

    @classmethod
    def attach(
        cls,
        entity_cls: type,
        entity_id: Any,
        registry: EntityTypeRegistry = entity_types,
    ) -> "SeoMetadata":
        """Create an empty record attached to ``entity_cls`` / ``entity_id``.

        Raises:
            UnknownEntityClassError: If ``entity_cls`` is not registered.
        """
        tag = registry.resolve_tag(entity_cls)
        return cls(SeoMetadataId.generate(), tag, str(entity_id))

    def attached_class(self, registry: EntityTypeRegistry = entity_types) -> type:
        """The entity class this record belongs to.

        Raises:
            UnknownEntityTypeError: If the stored discriminator is not registered.
        """
        return registry.resolve_type(self.entity_type)

    def __repr__(self) -> str:
        return (
            f"SeoMetadata(id={self.id}, entity_type={self.entity_type!r}, "
            f"entity_id={self.entity_id!r}, locale={self.active_locale})"
        )


@dataclass(frozen=True)
class SeoMetadataUpdate:
    """Sparse update for ``SeoMetadata``; every field defaults to ``UNSET``."""

    title: Patch = UNSET
    description: Patch = UNSET
    keywords: Patch = UNSET
    og_title: Patch = UNSET
    og_description: Patch = UNSET
    og_image: Patch = UNSET
    og_type: Patch = UNSET
    twitter_title: Patch = UNSET
    twitter_description: Patch = UNSET
    twitter_image: Patch = UNSET
    twitter_card: Patch = UNSET
    canonical_url: Patch = UNSET
    no_index: Patch = UNSET
    no_follow: Patch = UNSET

    @classmethod
    def from_mapping(cls, payload: Mapping[str, Any]) -> "SeoMetadataUpdate":
        """Build from a JSON-like mapping; absent keys stay ``UNSET``."""
        names = {f.name for f in fields(cls)}
        unknown = set(payload) - names
        if unknown:
            raise ValueError(f"Unknown SEO metadata fields: {sorted(unknown)}")
        return cls(**{name: patch_from(payload, name) for name in names})


SEO_FIELDS = (
    FieldSpec("title", translatable=True),
    FieldSpec("description", translatable=True),
    FieldSpec("keywords", translatable=True),
    FieldSpec("og_title", translatable=True),
    FieldSpec("og_description", translatable=True),
    FieldSpec("og_image"),
    FieldSpec("og_type"),
    FieldSpec("twitter_title", translatable=True),
    FieldSpec("twitter_description", translatable=True),
    FieldSpec("twitter_image"),
    FieldSpec("twitter_card"),
    FieldSpec("canonical_url"),
    FieldSpec("no_index", setter=lambda record, value, _: setattr(record, "no_index", bool(value))),
    FieldSpec("no_follow", setter=lambda record, value, _: setattr(record, "no_follow", bool(value))),
)


def update_or_create(
    entity_cls: type,
    entity_id: Any,
    update: SeoMetadataUpdate,
    locale,
    existing: Optional[SeoMetadata] = None,
    registry: EntityTypeRegistry = entity_types,
) -> SeoMetadata:
    """Fill ``existing`` with ``update``, or attach a fresh record first.

    Creation and update share the same fill path, so a field behaves the same
    whether the record is new or not.

    Raises:
        InvalidLocaleError: If ``locale`` is not supported.
        UnknownEntityClassError: On the creation path when ``entity_cls`` is
            not registered.
    """
    target = Locale.from_string(locale)
    record = existing
    if record is None:
        record = SeoMetadata.attach(entity_cls, entity_id, registry)
        logger.info(
            "seo_metadata_attached",
            metadata_id=str(record.id),
            entity_type=record.entity_type,
            entity_id=record.entity_id,
        )
    record.set_active_locale(target)

    applied = fill(record, update, target, SEO_FIELDS)
    logger.info(
        "seo_metadata_filled",
        metadata_id=str(record.id),
        locale=target.value,
        fields=applied,
    )
    return record
