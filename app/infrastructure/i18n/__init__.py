"""i18n system - supported content locales.

Main components:
- Locale: closed enumeration of content languages
- InvalidLocaleError: raised for unsupported locale codes
"""

from infrastructure.i18n.models import InvalidLocaleError, Locale

__all__ = [
    "Locale",
    "InvalidLocaleError",
]
