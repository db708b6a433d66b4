"""SQLAlchemy engine and session management.

The relational store is reached exclusively through repositories; this module
only owns connection setup and the unit-of-work session scope.
"""

from contextlib import contextmanager
from typing import Iterator

from sqlalchemy import MetaData, create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from infrastructure.configuration import DatabaseSettings
from infrastructure.logging import get_module_logger

logger = get_module_logger()

# Single metadata shared by every module's table definitions.
metadata = MetaData()


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def create_engine_from_settings(database: DatabaseSettings) -> Engine:
    """Build an engine for the configured database URL.

    SQLite connections get foreign key enforcement switched on so that
    ``ON DELETE CASCADE`` on translation tables behaves as it does on
    PostgreSQL. In-memory SQLite shares one connection across sessions.
    """
    kwargs = {"echo": database.DATABASE_ECHO, "future": True}
    if database.is_sqlite and ":memory:" in database.DATABASE_URL:
        kwargs["connect_args"] = {"check_same_thread": False}
        kwargs["poolclass"] = StaticPool

    engine = create_engine(database.DATABASE_URL, **kwargs)
    if database.is_sqlite:
        event.listen(engine, "connect", _enable_sqlite_foreign_keys)

    logger.info("database_engine_created", dialect=engine.dialect.name)
    return engine


def create_tables(engine: Engine) -> None:
    """Create every table registered on the shared metadata (idempotent)."""
    metadata.create_all(engine)
    logger.info("database_tables_created", tables=sorted(metadata.tables))


def make_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(bind=engine, expire_on_commit=False, class_=Session)


@contextmanager
def session_scope(session_factory: sessionmaker) -> Iterator[Session]:
    """Provide a transactional scope: commit on success, rollback on error."""
    session = session_factory()
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()
