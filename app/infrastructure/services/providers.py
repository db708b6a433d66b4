"""
Factory functions for application-scoped singletons.

Provides process-wide providers for core infrastructure services.
"""

from functools import lru_cache

from sqlalchemy.engine import Engine

from infrastructure.configuration import Settings


@lru_cache
def get_settings() -> Settings:
    """
    Get application-scoped settings singleton.

    The @lru_cache decorator ensures only ONE instance is created per process.

        from infrastructure.services.providers import get_settings
        settings = get_settings()

    Returns:
        Settings: Cached settings instance loaded from environment.
    """
    return Settings()


@lru_cache
def get_engine() -> Engine:
    """
    Get application-scoped SQLAlchemy engine singleton.

    Returns:
        Engine: Cached engine built from ``settings.database``.
    """
    from infrastructure.persistence.database import create_engine_from_settings

    return create_engine_from_settings(get_settings().database)
