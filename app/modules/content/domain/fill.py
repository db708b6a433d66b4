"""Apply a sparse update onto a record.

The engine knows nothing about the record type it fills: it is driven by a
sequence of ``FieldSpec`` descriptors naming each field, whether it is
translatable, and optionally how to write it. Translatable fields are written
through ``set_translation`` so the write lands in the requested locale;
plain fields are assigned as-is.
"""

from dataclasses import dataclass
from typing import Any, Callable, List, Optional, Sequence

from infrastructure.i18n import Locale
from infrastructure.logging import get_module_logger
from modules.content.domain.patch import Patch, is_unset, resolve

logger = get_module_logger()


@dataclass(frozen=True)
class FieldSpec:
    """How one update field maps onto a record.

    Attributes:
        name: Attribute name on both the update and the record.
        translatable: Whether the value is written in the requested locale.
        getter: Reads the patch off the update. Defaults to ``getattr(update, name)``.
        setter: Writes the value onto the record as ``setter(record, value, locale)``.
            Defaults to ``set_translation`` for translatable fields and ``setattr``
            otherwise.
    """

    name: str
    translatable: bool = False
    getter: Optional[Callable[[Any], Patch]] = None
    setter: Optional[Callable[[Any, Any, Locale], None]] = None

    def read(self, update: Any) -> Patch:
        if self.getter is not None:
            return self.getter(update)
        return getattr(update, self.name)

    def write(self, record: Any, value: Any, locale: Locale) -> None:
        if self.setter is not None:
            self.setter(record, value, locale)
        elif self.translatable:
            record.set_translation(self.name, value, locale)
        else:
            setattr(record, self.name, value)


def fill(record: Any, update: Any, locale, fields: Sequence[FieldSpec]) -> List[str]:
    """Apply every supplied field of ``update`` onto ``record``.

    ``UNSET`` fields are skipped, ``NULL`` writes ``None`` and ``Value(x)``
    writes ``x``. The locale is validated before any field is written.

    Returns:
        The names of the fields that were applied, in ``fields`` order.

    Raises:
        InvalidLocaleError: If ``locale`` is not supported.
    """
    target = Locale.from_string(locale)
    applied: List[str] = []
    for spec in fields:
        patch = spec.read(update)
        if is_unset(patch):
            continue
        spec.write(record, resolve(patch), target)
        applied.append(spec.name)

    logger.debug(
        "record_filled",
        record_type=type(record).__name__,
        locale=target.value,
        fields=applied,
    )
    return applied
