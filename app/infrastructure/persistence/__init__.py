"""Relational persistence infrastructure.

Provides the shared SQLAlchemy metadata, engine construction, and the
transactional session scope used by module repositories.
"""

from infrastructure.persistence.database import (
    create_engine_from_settings,
    create_tables,
    make_session_factory,
    metadata,
    session_scope,
)

__all__ = [
    "metadata",
    "create_engine_from_settings",
    "create_tables",
    "make_session_factory",
    "session_scope",
]
