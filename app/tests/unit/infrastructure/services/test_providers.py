"""Unit tests for application-scoped providers.

Tests cover:
- get_settings() caching behavior
- get_engine() built from the cached settings
"""

import pytest
from sqlalchemy.engine import Engine

from infrastructure.configuration import Settings
from infrastructure.services.providers import get_engine, get_settings

pytestmark = pytest.mark.unit


@pytest.fixture(autouse=True)
def clear_provider_caches():
    get_settings.cache_clear()
    get_engine.cache_clear()
    yield
    get_settings.cache_clear()
    get_engine.cache_clear()


class TestGetSettings:
    def test_returns_settings_instance(self):
        assert isinstance(get_settings(), Settings)

    def test_returns_cached_instance(self):
        assert get_settings() is get_settings()

    def test_cache_can_be_cleared(self):
        first = get_settings()
        get_settings.cache_clear()
        assert get_settings() is not first


class TestGetEngine:
    def test_engine_uses_configured_url(self, monkeypatch):
        monkeypatch.setenv("DATABASE_URL", "sqlite+pysqlite:///:memory:")

        engine = get_engine()

        assert isinstance(engine, Engine)
        assert engine.dialect.name == "sqlite"
        assert get_engine() is engine
