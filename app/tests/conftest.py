"""Shared pytest fixtures.

Database fixtures run against a private in-memory SQLite engine per test, and
entity type fixtures use a private registry so tests never depend on the
process-wide one.
"""

import pytest

from infrastructure.configuration import ContentSettings, DatabaseSettings, Settings
from infrastructure.events import clear_handlers
from infrastructure.i18n import Locale
from infrastructure.logging import configure_logging
from infrastructure.persistence import (
    create_engine_from_settings,
    create_tables,
    make_session_factory,
)
from modules.blog.domain import Post
from modules.content.domain.registry import EntityTypeRegistry

# Importing repositories registers every table on the shared metadata.
import modules.blog.repository  # noqa: F401  pylint: disable=unused-import
import modules.content.persistence  # noqa: F401  pylint: disable=unused-import


@pytest.fixture(autouse=True, scope="session")
def _quiet_logging():
    configure_logging()


@pytest.fixture
def database_settings():
    return DatabaseSettings(DATABASE_URL="sqlite+pysqlite:///:memory:")


@pytest.fixture
def content_settings():
    return ContentSettings(
        CONTENT_DEFAULT_LOCALE="en",
        CONTENT_TRANSLATION_FALLBACK=True,
    )


@pytest.fixture
def settings(database_settings, content_settings):
    return Settings(
        PREFIX="-test",
        LOG_LEVEL="DEBUG",
        content=content_settings,
        database=database_settings,
    )


@pytest.fixture
def engine(database_settings):
    engine = create_engine_from_settings(database_settings)
    create_tables(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return make_session_factory(engine)


@pytest.fixture
def registry():
    """Private registry with the blog post registered."""
    return EntityTypeRegistry.from_pairs([("blog_post", Post)])


@pytest.fixture
def default_locale():
    return Locale.ENGLISH


@pytest.fixture
def clear_event_handlers():
    """Clear event handlers before and after test."""
    clear_handlers()
    yield
    clear_handlers()
