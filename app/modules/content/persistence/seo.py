"""SQL storage for SEO metadata."""

from typing import Any, Optional

from sqlalchemy import Boolean, Column, String, Table, Text, UniqueConstraint, delete, select
from sqlalchemy.orm import sessionmaker

from infrastructure.i18n import Locale
from infrastructure.logging import get_module_logger
from infrastructure.persistence import metadata, session_scope
from modules.content.domain.identifiers import SeoMetadataId
from modules.content.domain.seo import SeoMetadata
from modules.content.persistence.translations import (
    delete_translations,
    hydrate,
    save_translations,
    translation_table,
    upsert,
)

logger = get_module_logger()

seo_metadata_table = Table(
    "seo_metadata",
    metadata,
    Column("id", String(36), primary_key=True),
    Column("entity_type", String(64), nullable=False),
    Column("entity_id", String(36), nullable=False),
    Column("og_image", Text, nullable=True),
    Column("og_type", String(64), nullable=True),
    Column("twitter_image", Text, nullable=True),
    Column("twitter_card", String(64), nullable=True),
    Column("canonical_url", Text, nullable=True),
    Column("no_index", Boolean, nullable=False, default=False),
    Column("no_follow", Boolean, nullable=False, default=False),
    UniqueConstraint("entity_type", "entity_id", name="uq_seo_metadata_entity"),
)

seo_metadata_translations_table = translation_table(
    "seo_metadata_translations",
    "seo_metadata",
    SeoMetadata.translatable_fields(),
)

PLAIN_FIELDS = (
    "og_image",
    "og_type",
    "twitter_image",
    "twitter_card",
    "canonical_url",
    "no_index",
    "no_follow",
)


class SeoMetadataRepository:
    """Load and store ``SeoMetadata`` with its per-locale translation rows.

    Args:
        session_factory: SQLAlchemy session factory.
        fallback_locale: Locale whose row is materialized when the requested
            locale has none. ``None`` disables the fallback.
    """

    def __init__(self, session_factory: sessionmaker, fallback_locale: Optional[Locale] = None):
        self._session_factory = session_factory
        self._fallback_locale = fallback_locale

    def find_by_id(self, metadata_id: Any, locale, fallback: bool = True) -> Optional[SeoMetadata]:
        identifier = SeoMetadataId.from_string(metadata_id)
        target = Locale.from_string(locale)
        with session_scope(self._session_factory) as session:
            row = session.execute(
                select(seo_metadata_table).where(seo_metadata_table.c.id == identifier.value)
            ).mappings().first()
            if row is None:
                return None
            return self._build(session, row, target, fallback)

    def find_for_entity(
        self, entity_type: str, entity_id: Any, locale, fallback: bool = True
    ) -> Optional[SeoMetadata]:
        """Find the record attached to ``(entity_type, entity_id)``."""
        target = Locale.from_string(locale)
        with session_scope(self._session_factory) as session:
            row = session.execute(
                select(seo_metadata_table).where(
                    seo_metadata_table.c.entity_type == entity_type,
                    seo_metadata_table.c.entity_id == str(entity_id),
                )
            ).mappings().first()
            if row is None:
                return None
            return self._build(session, row, target, fallback)

    def save(self, record: SeoMetadata) -> None:
        with session_scope(self._session_factory) as session:
            upsert(
                session,
                seo_metadata_table,
                {"id": record.id.value},
                {
                    "entity_type": record.entity_type,
                    "entity_id": record.entity_id,
                    **{field: getattr(record, field) for field in PLAIN_FIELDS},
                },
            )
            locales = save_translations(session, seo_metadata_translations_table, record, record.id.value)
        record.mark_clean(locales)
        logger.info(
            "seo_metadata_saved",
            metadata_id=record.id.value,
            entity_type=record.entity_type,
            locales=[locale.value for locale in locales],
        )

    def remove(self, record: SeoMetadata) -> None:
        with session_scope(self._session_factory) as session:
            delete_translations(session, seo_metadata_translations_table, record.id.value)
            session.execute(delete(seo_metadata_table).where(seo_metadata_table.c.id == record.id.value))
        logger.info("seo_metadata_removed", metadata_id=record.id.value)

    def _build(self, session, row, locale: Locale, fallback: bool = True) -> SeoMetadata:
        record = SeoMetadata(SeoMetadataId(row["id"]), row["entity_type"], row["entity_id"])
        for field in PLAIN_FIELDS:
            setattr(record, field, row[field])
        hydrate(
            session,
            seo_metadata_translations_table,
            record,
            row["id"],
            locale,
            self._fallback_locale if fallback else None,
        )
        return record
