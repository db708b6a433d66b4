"""Feature settings __init__ - exports all feature settings."""

from infrastructure.configuration.features.content import ContentSettings

__all__ = [
    "ContentSettings",
]
