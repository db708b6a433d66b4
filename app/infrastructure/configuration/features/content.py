"""Content translation feature settings."""

from pydantic import Field, field_validator

from infrastructure.configuration.base import FeatureSettings
from infrastructure.i18n.models import Locale


class ContentSettings(FeatureSettings):
    """Translatable content configuration.

    Environment Variables:
        CONTENT_DEFAULT_LOCALE: Locale used when a request does not name one,
            and the fallback translation source (default: en)
        CONTENT_TRANSLATION_FALLBACK: When a requested locale has no stored
            translation row, materialize the default locale's row instead
            (default: True)
    """

    DEFAULT_LOCALE: Locale = Field(
        default=Locale.ENGLISH, alias="CONTENT_DEFAULT_LOCALE"
    )
    TRANSLATION_FALLBACK: bool = Field(
        default=True, alias="CONTENT_TRANSLATION_FALLBACK"
    )

    @field_validator("DEFAULT_LOCALE", mode="before")
    @classmethod
    def validate_default_locale(cls, v):
        """Accept raw locale codes from the environment."""
        if isinstance(v, Locale):
            return v
        return Locale.from_string(str(v).strip())
