"""
Application-scoped service providers.
"""

from infrastructure.services.providers import get_engine, get_settings

__all__ = [
    "get_settings",
    "get_engine",
]
