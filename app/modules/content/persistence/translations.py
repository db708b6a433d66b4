"""Translation side tables: one row per (owner, locale).

Helpers shared by every repository that stores ``TranslatableRecord``
entities. Each translatable entity has an identity table plus a side table
with an owner foreign key (``ON DELETE CASCADE``), a ``locale`` column and
one column per translatable field.
"""

from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple

from sqlalchemy import Column, ForeignKey, Integer, String, Table, Text, UniqueConstraint, delete, select, update
from sqlalchemy.orm import Session

from infrastructure.i18n import Locale
from infrastructure.persistence import metadata
from modules.content.domain.translatable import TranslatableRecord


def translation_table(name: str, owner_table: str, fields: Iterable[str]) -> Table:
    """Declare a translation side table for ``owner_table``."""
    return Table(
        name,
        metadata,
        Column("id", Integer, primary_key=True, autoincrement=True),
        Column(
            "owner_id",
            String(36),
            ForeignKey(f"{owner_table}.id", ondelete="CASCADE"),
            nullable=False,
            index=True,
        ),
        Column("locale", String(8), nullable=False),
        *[Column(field, Text, nullable=True) for field in fields],
        UniqueConstraint("owner_id", "locale", name=f"uq_{name}_owner_locale"),
    )


def upsert(session: Session, table: Table, key: Mapping[str, Any], values: Mapping[str, Any]) -> None:
    """Update the row matching ``key`` or insert it when absent."""
    clause = [table.c[column] == value for column, value in key.items()]
    result = session.execute(update(table).where(*clause).values(**values))
    if result.rowcount == 0:
        session.execute(table.insert().values(**key, **values))


def load_translation(
    session: Session,
    table: Table,
    owner_id: str,
    locale: Locale,
    default_locale: Optional[Locale] = None,
) -> Tuple[Dict[str, Any], Optional[Locale]]:
    """Fetch the translation row for ``locale``.

    When it is missing and ``default_locale`` is given, the default-locale row
    is returned instead.

    Returns:
        The row values (without key columns) and the locale they were stored
        under, or ``({}, None)`` when nothing is stored.
    """
    wanted: List[Locale] = [locale]
    if default_locale is not None and default_locale != locale:
        wanted.append(default_locale)

    rows = session.execute(
        select(table).where(
            table.c.owner_id == owner_id,
            table.c.locale.in_([item.value for item in wanted]),
        )
    ).mappings().all()
    by_locale = {row["locale"]: row for row in rows}
    for candidate in wanted:
        row = by_locale.get(candidate.value)
        if row is not None:
            values = {k: v for k, v in row.items() if k not in ("id", "owner_id", "locale")}
            return values, candidate
    return {}, None


def hydrate(
    session: Session,
    table: Table,
    record: TranslatableRecord,
    owner_id: str,
    locale: Locale,
    default_locale: Optional[Locale] = None,
) -> Optional[Locale]:
    """Materialize ``record`` in ``locale`` from ``table``.

    The record's active locale is always ``locale``; the return value is the
    locale the values actually came from (``None`` when no row exists).
    """
    values, source = load_translation(session, table, owner_id, locale, default_locale)
    record.materialize(locale, values)
    return source


def save_translations(session: Session, table: Table, record: TranslatableRecord, owner_id: str) -> List[Locale]:
    """Write the fields mutated on ``record`` since it was loaded, per locale.

    Rows for untouched locales are never written, and columns not written in
    a locale keep their stored value. Returns the locales saved.
    """
    saved = record.dirty_locales()
    for locale in saved:
        upsert(
            session,
            table,
            {"owner_id": owner_id, "locale": locale.value},
            record.changed_translations(locale),
        )
    return saved


def delete_translations(session: Session, table: Table, owner_id: str) -> None:
    session.execute(delete(table).where(table.c.owner_id == owner_id))
