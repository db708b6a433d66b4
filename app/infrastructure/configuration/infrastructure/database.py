"""Relational store settings."""

from pydantic import Field

from infrastructure.configuration.base import InfrastructureSettings


class DatabaseSettings(InfrastructureSettings):
    """Relational database connection configuration.

    Environment Variables:
        DATABASE_URL: SQLAlchemy connection URL
            (default: in-memory SQLite)
        DATABASE_ECHO: Echo emitted SQL to the engine logger (default: False)

    Example:
        ```python
        from infrastructure.services import get_settings

        url = get_settings().database.DATABASE_URL
        ```
    """

    DATABASE_URL: str = Field(
        default="sqlite+pysqlite:///:memory:", alias="DATABASE_URL"
    )
    DATABASE_ECHO: bool = Field(default=False, alias="DATABASE_ECHO")

    @property
    def is_sqlite(self) -> bool:
        return self.DATABASE_URL.startswith("sqlite")
