"""Content domain: translatable records, sparse updates, entity type registry."""

from modules.content.domain.aggregate import AggregateRoot
from modules.content.domain.errors import (
    DuplicateEntityTypeError,
    InvalidIdentifierError,
    RegistryFrozenError,
    UnknownEntityClassError,
    UnknownEntityTypeError,
)
from modules.content.domain.fill import FieldSpec, fill
from modules.content.domain.identifiers import EntityId, SeoMetadataId
from modules.content.domain.patch import NULL, UNSET, Null, Patch, Unset, Value
from modules.content.domain.registry import (
    EntityTypeRegistry,
    entity_type,
    entity_types,
)
from modules.content.domain.seo import (
    SEO_FIELDS,
    SeoMetadata,
    SeoMetadataUpdate,
    update_or_create,
)
from modules.content.domain.translatable import TranslatableField, TranslatableRecord

__all__ = [
    "AggregateRoot",
    "DuplicateEntityTypeError",
    "EntityId",
    "EntityTypeRegistry",
    "FieldSpec",
    "InvalidIdentifierError",
    "NULL",
    "Null",
    "Patch",
    "RegistryFrozenError",
    "SEO_FIELDS",
    "SeoMetadata",
    "SeoMetadataId",
    "SeoMetadataUpdate",
    "TranslatableField",
    "TranslatableRecord",
    "UNSET",
    "UnknownEntityClassError",
    "UnknownEntityTypeError",
    "Unset",
    "Value",
    "entity_type",
    "entity_types",
    "fill",
    "update_or_create",
]
