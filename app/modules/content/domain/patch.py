"""Tri-state values for sparse updates.

An update request carries one ``Patch`` per mutable field:

- ``Unset``: the field was not supplied; leave the stored value untouched.
- ``Null``: the field was explicitly cleared.
- ``Value(x)``: the field was explicitly set to ``x``.

The three states are distinct dataclass types, so a patch never compares
equal to a plain value (``Value("x") != "x"``) and ``Value`` never holds
``None`` (that is what ``Null`` is for).
"""

from dataclasses import dataclass
from typing import Any, Generic, Mapping, Optional, TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True)
class Unset:
    def __repr__(self) -> str:
        return "UNSET"


@dataclass(frozen=True)
class Null:
    def __repr__(self) -> str:
        return "NULL"


@dataclass(frozen=True)
class Value(Generic[T]):
    value: T

    def __post_init__(self):
        if self.value is None:
            raise ValueError("Value() cannot wrap None; use NULL to clear a field")


Patch = Union[Unset, Null, Value[T]]

UNSET = Unset()
NULL = Null()


def is_unset(patch: Patch) -> bool:
    return isinstance(patch, Unset)


def resolve(patch: Patch) -> Optional[Any]:
    """Return the concrete value a supplied patch applies (None for NULL).

    Raises:
        ValueError: If the patch is UNSET; there is nothing to apply.
        TypeError: If the object is not a patch at all.
    """
    if isinstance(patch, Value):
        return patch.value
    if isinstance(patch, Null):
        return None
    if isinstance(patch, Unset):
        raise ValueError("UNSET patch has no value to apply")
    raise TypeError(f"Expected a patch (UNSET, NULL, Value), got {type(patch).__name__}")


def patch_from(payload: Mapping[str, Any], key: str) -> Patch:
    """Build a patch from a JSON-like mapping: absent, ``None``, or a value."""
    if key not in payload:
        return UNSET
    value = payload[key]
    if value is None:
        return NULL
    return Value(value)
