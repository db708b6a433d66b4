"""Unit tests for SEO metadata attachment and update-or-create."""

import pytest

from infrastructure.i18n import InvalidLocaleError, Locale
from modules.blog.domain import Post, PostId
from modules.content.domain.errors import UnknownEntityClassError, UnknownEntityTypeError
from modules.content.domain.identifiers import SeoMetadataId
from modules.content.domain.patch import NULL, UNSET, Value
from modules.content.domain.registry import EntityTypeRegistry
from modules.content.domain.seo import SeoMetadata, SeoMetadataUpdate, update_or_create
from tests.factories.content import POST_ID, make_seo_metadata, make_seo_update

pytestmark = pytest.mark.unit


class TestSeoMetadata:
    """Test the SeoMetadata record."""

    def test_defaults(self):
        """Plain fields have their defaults."""
        record = SeoMetadata(SeoMetadataId.generate(), "blog_post", POST_ID)

        assert record.no_index is False
        assert record.no_follow is False
        assert record.og_image is None
        assert record.title is None

    def test_translatable_field_set(self):
        """Translatable field set is complete."""
        assert SeoMetadata.translatable_fields() == (
            "title",
            "description",
            "keywords",
            "og_title",
            "og_description",
            "twitter_title",
            "twitter_description",
        )

    def test_attach_uses_registry_tag(self, registry):
        """attach uses the registry tag."""
        post_id = PostId(POST_ID)

        record = SeoMetadata.attach(Post, post_id, registry)

        assert record.entity_type == "blog_post"
        assert record.entity_id == POST_ID
        assert isinstance(record.id, SeoMetadataId)

    def test_attach_unregistered_class_fails(self):
        """Attaching to an unregistered class fails."""
        with pytest.raises(UnknownEntityClassError):
            SeoMetadata.attach(Post, POST_ID, EntityTypeRegistry())

    def test_attached_class(self, registry):
        """attached_class resolves the discriminator."""
        record = make_seo_metadata()
        assert record.attached_class(registry) is Post

    def test_attached_class_with_unknown_discriminator_fails(self, registry):
        """Unknown discriminator fails."""
        record = make_seo_metadata(entity_type="gallery")
        with pytest.raises(UnknownEntityTypeError):
            record.attached_class(registry)


class TestSeoMetadataUpdate:
    """Test SeoMetadataUpdate."""

    def test_defaults_to_unset(self):
        """Every field defaults to Unset."""
        update = SeoMetadataUpdate()
        assert update.title == UNSET
        assert update.no_follow == UNSET

    def test_from_mapping(self):
        """from_mapping builds patches."""
        update = SeoMetadataUpdate.from_mapping({"title": "T", "description": None})

        assert update.title == Value("T")
        assert update.description == NULL
        assert update.keywords == UNSET

    def test_from_mapping_rejects_unknown_fields(self):
        """from_mapping rejects unknown fields."""
        with pytest.raises(ValueError):
            SeoMetadataUpdate.from_mapping({"headline": "T"})


class TestUpdateOrCreate:
    """Test update_or_create."""

    def test_creates_fresh_record(self, registry):
        """A fresh record is created and filled."""
        update = SeoMetadataUpdate(title=Value("SEO Title"), og_image=UNSET, no_index=Value(True))

        record = update_or_create(Post, PostId(POST_ID), update, Locale.ENGLISH, registry=registry)

        assert record.title == "SEO Title"
        assert record.og_image is None
        assert record.no_index is True
        assert record.entity_type == "blog_post"
        assert record.entity_id == POST_ID
        assert record.active_locale is Locale.ENGLISH

    def test_each_creation_assigns_new_identifier(self, registry):
        """Each creation gets a new identifier."""
        first = update_or_create(Post, POST_ID, SeoMetadataUpdate(), "en", registry=registry)
        second = update_or_create(Post, POST_ID, SeoMetadataUpdate(), "en", registry=registry)

        assert first.id != second.id

    def test_updates_existing_record_in_place(self, registry):
        """An existing record is updated in place."""
        existing = make_seo_metadata(title="Old", description="Keep", og_type="article")

        record = update_or_create(
            Post,
            POST_ID,
            make_seo_update(title="New", og_type=NULL),
            Locale.ENGLISH,
            existing=existing,
            registry=registry,
        )

        assert record is existing
        assert record.title == "New"
        assert record.description == "Keep"
        assert record.og_type is None

    def test_create_and_update_apply_fields_identically(self, registry):
        """Create and update apply fields the same way."""
        update = make_seo_update(title="T", keywords="a, b", no_follow=True)
        existing = make_seo_metadata()

        created = update_or_create(Post, POST_ID, update, "pl", registry=registry)
        updated = update_or_create(Post, POST_ID, update, "pl", existing=existing, registry=registry)

        assert created.translations(Locale.POLISH) == updated.translations(Locale.POLISH)
        assert created.no_follow is updated.no_follow is True

    def test_existing_record_becomes_active_in_requested_locale(self, registry):
        """An existing record becomes active in the requested locale."""
        existing = make_seo_metadata(title="English")

        record = update_or_create(
            Post, POST_ID, make_seo_update(og_image="x.png"), "ua", existing=existing, registry=registry
        )

        assert record.active_locale is Locale.UKRAINIAN
        assert record.translation("title", Locale.ENGLISH) == "English"

    def test_invalid_locale_fails_before_creation(self):
        """Invalid locale fails before a record is created."""
        empty = EntityTypeRegistry()
        with pytest.raises(InvalidLocaleError):
            update_or_create(Post, POST_ID, SeoMetadataUpdate(), "fr", registry=empty)

    def test_unregistered_entity_fails_on_creation(self):
        """Unregistered entity fails on creation."""
        with pytest.raises(UnknownEntityClassError):
            update_or_create(Post, POST_ID, SeoMetadataUpdate(), "en", registry=EntityTypeRegistry())
