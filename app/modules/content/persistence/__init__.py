"""Relational persistence for translatable content.

Translation side tables (one row per owner and locale) and the SEO metadata
repository.
"""

from modules.content.persistence.seo import (
    SeoMetadataRepository,
    seo_metadata_table,
    seo_metadata_translations_table,
)
from modules.content.persistence.translations import (
    delete_translations,
    hydrate,
    load_translation,
    save_translations,
    translation_table,
    upsert,
)

__all__ = [
    "SeoMetadataRepository",
    "delete_translations",
    "hydrate",
    "load_translation",
    "save_translations",
    "seo_metadata_table",
    "seo_metadata_translations_table",
    "translation_table",
    "upsert",
]
