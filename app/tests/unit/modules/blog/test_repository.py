"""Unit tests for post repositories.

Both implementations share the same contract, so every test runs against the
in-memory repository and the SQLAlchemy repository on in-memory SQLite.
"""

import pytest
from sqlalchemy import func, select

from infrastructure.i18n import InvalidLocaleError, Locale
from infrastructure.persistence import session_scope
from modules.blog.domain import PostStatus
from modules.blog.repository import (
    InMemoryPostRepository,
    SqlAlchemyPostRepository,
    post_translations_table,
    posts_table,
)
from modules.content.domain.errors import InvalidIdentifierError
from tests.factories.content import make_post

pytestmark = pytest.mark.unit

MISSING_ID = "00000000-0000-4000-8000-000000000000"


@pytest.fixture(params=["memory", "sql"])
def repository(request):
    if request.param == "memory":
        return InMemoryPostRepository(fallback_locale=Locale.ENGLISH)
    session_factory = request.getfixturevalue("session_factory")
    return SqlAlchemyPostRepository(session_factory, fallback_locale=Locale.ENGLISH)


class TestFindById:
    """Test loading a single post."""

    @pytest.mark.parametrize("locale", list(Locale))
    def test_written_value_is_loaded_in_same_locale(self, repository, locale):
        """A value written in a locale loads back in that locale."""
        post = make_post(translations={locale: {"title": f"title-{locale.value}"}})
        repository.save(post)

        loaded = repository.find_by_id(post.id, locale)

        assert loaded.title == f"title-{locale.value}"
        assert loaded.active_locale is locale

    def test_each_locale_loads_its_own_value(self, repository):
        """Each locale loads its own value."""
        post = make_post(
            translations={
                Locale.ENGLISH: {"title": "Hello"},
                Locale.UKRAINIAN: {"title": "Привіт"},
            }
        )
        repository.save(post)

        assert repository.find_by_id(post.id, "en").title == "Hello"
        assert repository.find_by_id(post.id, "ua").title == "Привіт"

    def test_accepts_string_id(self, repository):
        """String ids are accepted."""
        post = make_post()
        repository.save(post)

        assert repository.find_by_id(str(post.id), "en").id == post.id

    def test_missing_post_returns_none(self, repository):
        """Missing post returns None."""
        assert repository.find_by_id(MISSING_ID, "en") is None

    def test_malformed_id_fails_before_lookup(self, repository):
        """Malformed id fails before any lookup."""
        with pytest.raises(InvalidIdentifierError):
            repository.find_by_id("42", "en")

    def test_unsupported_locale_fails(self, repository):
        """Unsupported locale fails."""
        with pytest.raises(InvalidLocaleError):
            repository.find_by_id(MISSING_ID, "fr")

    def test_status_and_publication_are_loaded(self, repository):
        """Status and publication timestamp are loaded."""
        post = make_post()
        post.publish()
        repository.save(post)

        loaded = repository.find_by_id(post.id, "en")

        assert loaded.status is PostStatus.PUBLISHED
        assert loaded.published_at == post.published_at

    def test_fallback_materializes_default_locale(self, repository):
        """Missing locale falls back to the default locale without dirtying."""
        post = make_post()
        repository.save(post)

        loaded = repository.find_by_id(post.id, "pl")

        assert loaded.active_locale is Locale.POLISH
        assert loaded.title == "Hello"
        assert loaded.dirty_locales() == []

    def test_fallback_disabled_for_writes(self, repository):
        """fallback=False materializes nothing for a missing locale."""
        post = make_post()
        repository.save(post)

        loaded = repository.find_by_id(post.id, "pl", fallback=False)

        assert loaded.title is None


class TestFindAll:
    """Test loading every post."""

    def test_every_post_in_requested_locale(self, repository):
        """Every post is loaded in the requested locale."""
        first = make_post(translations={Locale.ENGLISH: {"title": "A"}, Locale.POLISH: {"title": "A-pl"}})
        second = make_post(translations={Locale.ENGLISH: {"title": "B"}, Locale.POLISH: {"title": "B-pl"}})
        repository.save(first)
        repository.save(second)

        titles = sorted(post.title for post in repository.find_all("pl"))

        assert titles == ["A-pl", "B-pl"]

    def test_empty(self, repository):
        """Empty repository returns an empty list."""
        assert repository.find_all(Locale.ENGLISH) == []


class TestSave:
    """Test saving posts."""

    def test_save_marks_clean(self, repository):
        """Save marks every locale clean."""
        post = make_post()
        repository.save(post)
        assert post.dirty_locales() == []

    def test_save_overwrites_only_written_locale(self, repository):
        """Save rewrites only the locale that was written."""
        post = make_post(
            translations={
                Locale.ENGLISH: {"title": "Hello", "content": "Body"},
                Locale.RUSSIAN: {"title": "Привет", "content": "Текст"},
            }
        )
        repository.save(post)

        loaded = repository.find_by_id(post.id, "ru")
        loaded.change_title("Здравствуйте", Locale.RUSSIAN)
        repository.save(loaded)

        english = repository.find_by_id(post.id, "en")
        russian = repository.find_by_id(post.id, "ru")
        assert english.title == "Hello"
        assert english.content == "Body"
        assert russian.title == "Здравствуйте"
        assert russian.content == "Текст"

    def test_writing_unloaded_locale_keeps_its_other_fields(self, repository):
        """Changing one field in a locale that was not loaded keeps its stored fields."""
        post = make_post(
            translations={
                Locale.ENGLISH: {"title": "Hello"},
                Locale.RUSSIAN: {"title": "Privet", "content": "Ru body", "description": "Ru desc"},
            }
        )
        repository.save(post)

        loaded = repository.find_by_id(post.id, "en")
        loaded.change_title("Privet 2", Locale.RUSSIAN)
        repository.save(loaded)

        russian = repository.find_by_id(post.id, "ru")
        assert russian.title == "Privet 2"
        assert russian.content == "Ru body"
        assert russian.description == "Ru desc"
        assert repository.find_by_id(post.id, "en").title == "Hello"

    def test_first_write_in_new_locale_leaves_other_fields_empty(self, repository):
        """A locale created by a single write stores only that field."""
        post = make_post()
        repository.save(post)

        loaded = repository.find_by_id(post.id, "pl", fallback=False)
        loaded.change_title("Cześć", Locale.POLISH)
        repository.save(loaded)

        polish = repository.find_by_id(post.id, "pl", fallback=False)
        assert polish.title == "Cześć"
        assert polish.content is None

    def test_status_change_without_translation_changes(self, repository):
        """Status changes persist without touching translations."""
        post = make_post()
        repository.save(post)

        loaded = repository.find_by_id(post.id, "en")
        loaded.archive()
        repository.save(loaded)

        reloaded = repository.find_by_id(post.id, "en")
        assert reloaded.status is PostStatus.ARCHIVED
        assert reloaded.title == "Hello"

    def test_loaded_post_does_not_share_state(self, repository):
        """Stored posts do not share state with the saved instance."""
        post = make_post()
        repository.save(post)

        post.change_title("Changed", Locale.ENGLISH)

        assert repository.find_by_id(post.id, "en").title == "Hello"


class TestRemove:
    """Test removing posts."""

    def test_remove(self, repository):
        """Removed post is no longer found."""
        post = make_post()
        repository.save(post)

        repository.remove(post)

        assert repository.find_by_id(post.id, "en") is None
        assert repository.find_all("en") == []


class TestSqlRows:
    """Test the stored rows of the SQL repository."""

    def test_one_translation_row_per_locale(self, session_factory):
        """One translation row is kept per locale."""
        repository = SqlAlchemyPostRepository(session_factory)
        post = make_post(
            translations={Locale.ENGLISH: {"title": "A"}, Locale.POLISH: {"title": "B"}}
        )
        repository.save(post)
        post.change_title("A2", Locale.ENGLISH)
        repository.save(post)

        with session_scope(session_factory) as session:
            rows = session.execute(
                select(post_translations_table.c.locale, post_translations_table.c.title)
            ).all()

        assert sorted(tuple(row) for row in rows) == [("en", "A2"), ("pl", "B")]

    def test_remove_cascades_to_translation_rows(self, session_factory):
        """Removing a post deletes its translation rows."""
        repository = SqlAlchemyPostRepository(session_factory)
        post = make_post(
            translations={Locale.ENGLISH: {"title": "A"}, Locale.POLISH: {"title": "B"}}
        )
        repository.save(post)

        repository.remove(post)

        with session_scope(session_factory) as session:
            posts = session.execute(select(func.count()).select_from(posts_table)).scalar_one()
            rows = session.execute(
                select(func.count()).select_from(post_translations_table)
            ).scalar_one()
        assert posts == 0
        assert rows == 0
