"""Infrastructure configuration module - public API.

Centralized configuration management using Pydantic BaseSettings with
domain-based organization.

Exports:
    Settings: Main settings class (for testing/overrides)
    ContentSettings: Translatable content settings
    DatabaseSettings: Relational store settings

Example:
    ```python
    from infrastructure.services import get_settings

    settings = get_settings()
    if settings.is_production:
        ...
    ```
"""

from infrastructure.configuration.features import ContentSettings
from infrastructure.configuration.infrastructure import DatabaseSettings
from infrastructure.configuration.settings import Settings

__all__ = ["Settings", "ContentSettings", "DatabaseSettings"]
