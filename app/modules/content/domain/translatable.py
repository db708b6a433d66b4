"""Locale-aware translatable fields.

An entity mixes in ``TranslatableRecord`` and declares its per-language text
as ``TranslatableField`` descriptors:

    class Post(TranslatableRecord):
        title = TranslatableField()

        def change_title(self, title, locale):
            self.set_translation("title", title, locale)

The record keeps a map ``locale -> {field: value}`` in memory plus one
*active locale*. Plain attribute access (``post.title``) reads and writes the
active locale, which is the locale the entity was loaded in or last mutated
in. ``translation(field, locale)`` reads any materialized locale explicitly,
so callers never depend on mutation order to read a specific language.

Mutators validate the locale before touching any state, then switch the
active locale, then write. Repositories touch one translation row per locale
written since the record was loaded (``dirty_locales``) and only the columns
written in it (``changed_translations``).
"""

from typing import Any, Dict, Iterable, List, Mapping, Optional, Set, Tuple, Union

from infrastructure.i18n import Locale

LocaleLike = Union[Locale, str]


class TranslatableField:
    """Descriptor for a field whose value depends on the active locale."""

    def __init__(self, default: Any = None):
        self.default = default
        self.name = ""

    def __set_name__(self, owner, name):
        self.name = name

    def __get__(self, instance, owner=None):
        if instance is None:
            return self
        return instance.translation(self.name)

    def __set__(self, instance, value):
        instance._write_active(self.name, value)


class TranslatableRecord:
    """Per-entity translation state: a per-locale value map and an active locale."""

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self._translations: Dict[Locale, Dict[str, Any]] = {}
        self._active_locale: Optional[Locale] = None
        self._dirty_fields: Dict[Locale, Set[str]] = {}

    @classmethod
    def translatable_fields(cls) -> Tuple[str, ...]:
        """Names of every TranslatableField declared on the class hierarchy."""
        names: List[str] = []
        for klass in reversed(cls.__mro__):
            for name, attr in vars(klass).items():
                if isinstance(attr, TranslatableField) and name not in names:
                    names.append(name)
        return tuple(names)

    @classmethod
    def _field(cls, name: str) -> TranslatableField:
        attr = getattr(cls, name, None)
        if not isinstance(attr, TranslatableField):
            raise AttributeError(f"{cls.__name__} has no translatable field '{name}'")
        return attr

    @property
    def active_locale(self) -> Optional[Locale]:
        return self._active_locale

    def set_active_locale(self, locale: LocaleLike) -> None:
        """Switch the locale that attribute access reads and writes.

        Pure in-memory pointer change; no stored value is touched.

        Raises:
            InvalidLocaleError: If ``locale`` is not supported.
        """
        self._active_locale = Locale.from_string(locale)

    def translation(self, field: str, locale: Optional[LocaleLike] = None) -> Any:
        """Read ``field`` in ``locale`` (default: the active locale).

        Returns the field default when that locale holds no value.
        """
        descriptor = self._field(field)
        target = Locale.from_string(locale) if locale is not None else self._active_locale
        if target is None:
            return descriptor.default
        return self._translations.get(target, {}).get(field, descriptor.default)

    def translations(self, locale: Optional[LocaleLike] = None) -> Dict[str, Any]:
        """All translatable fields for one locale, defaults filled in."""
        return {name: self.translation(name, locale) for name in self.translatable_fields()}

    def set_translation(self, field: str, value: Any, locale: LocaleLike) -> None:
        """Write ``field`` in ``locale``; ``locale`` becomes the active locale.

        The locale is validated before any state changes, so an unsupported
        locale leaves every stored translation untouched.
        """
        self._field(field)
        self.set_active_locale(locale)
        setattr(self, field, value)

    def _write_active(self, field: str, value: Any) -> None:
        if self._active_locale is None:
            raise RuntimeError(
                f"Cannot write '{field}' on {type(self).__name__}: no active locale set"
            )
        self._translations.setdefault(self._active_locale, {})[field] = value
        self._dirty_fields.setdefault(self._active_locale, set()).add(field)

    def materialize(self, locale: LocaleLike, values: Mapping[str, Any]) -> None:
        """Hydrate one locale from storage and make it active.

        Used by repositories; unknown keys are ignored and nothing is marked
        dirty.
        """
        target = Locale.from_string(locale)
        fields = self.translatable_fields()
        self._translations[target] = {k: v for k, v in values.items() if k in fields}
        self._active_locale = target

    def has_translation(self, locale: LocaleLike) -> bool:
        return Locale.from_string(locale) in self._translations

    def loaded_locales(self) -> List[Locale]:
        return list(self._translations)

    def dirty_locales(self) -> List[Locale]:
        """Locales written since the record was loaded or last saved."""
        return [locale for locale in Locale if locale in self._dirty_fields]

    def changed_translations(self, locale: LocaleLike) -> Dict[str, Any]:
        """Fields written in ``locale`` since the record was loaded or last saved.

        Fields of that locale which were never written here are left out, so a
        partial save cannot clear values that are only held in storage.
        """
        target = Locale.from_string(locale)
        fields = self._dirty_fields.get(target, set())
        values = self._translations.get(target, {})
        return {name: values[name] for name in self.translatable_fields() if name in fields}

    def mark_clean(self, locales: Optional[Iterable[Locale]] = None) -> None:
        if locales is None:
            self._dirty_fields.clear()
        else:
            for locale in locales:
                self._dirty_fields.pop(locale, None)
