"""Unit tests for the sparse update fill engine."""

from dataclasses import dataclass

import pytest

from infrastructure.i18n import InvalidLocaleError, Locale
from modules.content.domain.fill import FieldSpec, fill
from modules.content.domain.patch import NULL, UNSET, Patch, Value
from modules.content.domain.seo import SEO_FIELDS, SeoMetadataUpdate
from modules.content.domain.translatable import TranslatableField, TranslatableRecord
from tests.factories.content import make_seo_metadata, make_seo_update

pytestmark = pytest.mark.unit


class Banner(TranslatableRecord):
    headline = TranslatableField()

    def __init__(self):
        super().__init__()
        self.image = None


@dataclass(frozen=True)
class BannerUpdate:
    headline: Patch = UNSET
    image: Patch = UNSET


BANNER_FIELDS = (FieldSpec("headline", translatable=True), FieldSpec("image"))


class TestFill:
    """Test the fill engine."""

    def test_all_unset_leaves_record_unchanged(self):
        """An all-Unset update changes nothing."""
        record = make_seo_metadata(title="T", description="x", og_image="img.png", no_index=True)
        before = (record.translations(Locale.ENGLISH), record.og_image, record.no_index)

        applied = fill(record, SeoMetadataUpdate(), Locale.ENGLISH, SEO_FIELDS)

        assert applied == []
        assert (record.translations(Locale.ENGLISH), record.og_image, record.no_index) == before
        assert record.dirty_locales() == [Locale.ENGLISH]

    def test_null_clears_and_unset_keeps(self):
        """Null clears a field while Unset keeps it."""
        cleared = make_seo_metadata(description="x")
        kept = make_seo_metadata(description="x")

        fill(cleared, SeoMetadataUpdate(description=NULL), Locale.ENGLISH, SEO_FIELDS)
        fill(kept, SeoMetadataUpdate(description=UNSET), Locale.ENGLISH, SEO_FIELDS)

        assert cleared.description is None
        assert kept.description == "x"

    def test_translatable_field_written_in_requested_locale(self):
        """Translatable fields are written in the requested locale."""
        record = make_seo_metadata(title="English title")

        fill(record, make_seo_update(title="Tytuł"), "pl", SEO_FIELDS)

        assert record.translation("title", Locale.POLISH) == "Tytuł"
        assert record.translation("title", Locale.ENGLISH) == "English title"
        assert record.active_locale is Locale.POLISH

    def test_plain_field_ignores_locale(self):
        """Plain fields are written regardless of locale."""
        record = make_seo_metadata()

        fill(record, make_seo_update(canonical_url="https://example.com/a"), "ru", SEO_FIELDS)

        assert record.canonical_url == "https://example.com/a"
        assert record.translation("title", Locale.RUSSIAN) is None

    def test_returns_applied_field_names(self):
        """fill returns the names of applied fields."""
        record = make_seo_metadata()

        applied = fill(
            record,
            SeoMetadataUpdate(title=Value("T"), og_image=UNSET, no_index=Value(True), keywords=NULL),
            Locale.ENGLISH,
            SEO_FIELDS,
        )

        assert applied == ["title", "keywords", "no_index"]

    def test_invalid_locale_fails_before_any_write(self):
        """Invalid locale fails before any field is written."""
        record = make_seo_metadata(title="T")

        with pytest.raises(InvalidLocaleError):
            fill(record, make_seo_update(title="X", og_image="a.png"), "fr", SEO_FIELDS)

        assert record.title == "T"
        assert record.og_image is None

    def test_engine_is_independent_of_record_type(self):
        """The engine works for any record type."""
        banner = Banner()

        fill(banner, BannerUpdate(headline=Value("Sale"), image=Value("b.png")), "en", BANNER_FIELDS)

        assert banner.translation("headline", Locale.ENGLISH) == "Sale"
        assert banner.image == "b.png"

    def test_custom_getter_and_setter(self):
        """Custom getters and setters are used."""
        seen = {}
        spec = FieldSpec(
            "headline",
            getter=lambda update: update["headline"],
            setter=lambda record, value, locale: seen.update(value=value, locale=locale),
        )

        fill(Banner(), {"headline": Value("Hi")}, "ua", [spec])

        assert seen == {"value": "Hi", "locale": Locale.UKRAINIAN}
