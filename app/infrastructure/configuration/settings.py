"""Content backend configuration settings - main aggregator."""

from pydantic_settings import BaseSettings, SettingsConfigDict

from infrastructure.configuration.features import ContentSettings
from infrastructure.configuration.infrastructure import DatabaseSettings


class Settings(BaseSettings):
    """Content backend configuration settings - main aggregator.

    Aggregates all domain-specific settings into a single configuration object.
    Settings are organized by concern:

    - **Features**: Feature module configurations (content translation)
    - **Infrastructure**: Core system configurations (database)

    Environment Variables:
        PREFIX: Environment prefix for non-production deployments
        LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR)

    Example:
        ```python
        from infrastructure.services import get_settings

        settings = get_settings()
        default_locale = settings.content.DEFAULT_LOCALE
        url = settings.database.DATABASE_URL
        ```
    """

    PREFIX: str = ""
    LOG_LEVEL: str = "INFO"

    # Feature settings
    content: ContentSettings

    # Infrastructure settings
    database: DatabaseSettings

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )

    @property
    def is_production(self) -> bool:
        """Check if the application is running in production.

        Returns:
            True if PREFIX is empty (production), False otherwise.
        """
        return not bool(self.PREFIX)

    def __init__(self, **kwargs):
        """Initialize Settings with automatic subsettings instantiation.

        Args:
            **kwargs: Optional overrides for specific settings sections.
        """
        settings_map = {
            "content": ContentSettings,
            "database": DatabaseSettings,
        }

        for setting_name, setting_class in settings_map.items():
            if setting_name not in kwargs:
                kwargs[setting_name] = setting_class()

        super().__init__(**kwargs)
