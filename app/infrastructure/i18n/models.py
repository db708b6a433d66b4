"""Locale models for the i18n system.

Defines the closed set of languages that translatable content can be
stored and read in.
"""

from enum import Enum
from typing import Any, ClassVar, Dict, List, Optional, Union

from infrastructure.operations.errors import DomainError
from infrastructure.operations.status import OperationStatus


class InvalidLocaleError(DomainError, ValueError):
    """Raised when a locale code is not one of the supported locales."""

    error_code: ClassVar[str] = "INVALID_LOCALE"
    status: ClassVar[OperationStatus] = OperationStatus.VALIDATION_ERROR

    def __init__(self, locale: Any):
        super().__init__(f"Unsupported locale: {locale}")
        self.locale = locale

    def public_context(self) -> Dict[str, Any]:
        return {"locale": str(self.locale), "supported": Locale.languages()}


class Locale(str, Enum):
    """Supported content locales.

    Values are the short language codes used as translation row keys.
    """

    ENGLISH = "en"
    RUSSIAN = "ru"
    UKRAINIAN = "ua"
    POLISH = "pl"

    @classmethod
    def from_string(cls, locale_str: Union[str, "Locale"]) -> "Locale":
        """Convert a locale code to a Locale enum.

        Args:
            locale_str: Locale code (e.g., "en", "pl") or a Locale.

        Returns:
            Matching Locale enum value.

        Raises:
            InvalidLocaleError: If the code is not supported.
        """
        if isinstance(locale_str, cls):
            return locale_str
        try:
            return cls(locale_str)
        except ValueError as e:
            raise InvalidLocaleError(locale_str) from e

    @classmethod
    def resolve(
        cls, requested: Optional[Union[str, "Locale"]], default: "Locale"
    ) -> "Locale":
        """Resolve a requested locale, falling back to ``default`` when absent.

        An empty request falls back; an unsupported one is still an error.
        """
        if requested is None or requested == "":
            return default
        return cls.from_string(requested)

    @classmethod
    def languages(cls) -> List[str]:
        """Return all supported locale codes, e.g. ``["en", "ru", "ua", "pl"]``."""
        return [locale.value for locale in cls]
