"""Entity type registry.

Maps a stable string discriminator ("tag") to a concrete entity class so
that generic records (such as SEO metadata) can attach to any entity type by
``(tag, entity id)`` instead of a typed foreign key.

The registry is the one piece of process-wide shared state in the content
domain. It is populated once at startup (``discover`` / ``register``), then
``freeze``-d; after that it is read-only and safe to read from any thread.

Both sides of the mapping are unique: a tag maps to exactly one class and a
class to exactly one tag. Re-registering an identical pair is a no-op.
"""

import threading
from typing import Callable, Dict, Iterable, List, Optional, Tuple, Type, TypeVar

from infrastructure.logging import get_module_logger
from modules.content.domain.errors import (
    DuplicateEntityTypeError,
    RegistryFrozenError,
    UnknownEntityClassError,
    UnknownEntityTypeError,
)

logger = get_module_logger()

ENTITY_TYPE_ATTRIBUTE = "__entity_type__"

C = TypeVar("C", bound=type)


def entity_type(tag: str) -> Callable[[C], C]:
    """Class decorator declaring the discriminator an entity registers under.

    Example:
        @entity_type("blog_post")
        class Post(...):
            ...
    """
    if not isinstance(tag, str) or not tag:
        raise ValueError("Entity type tag must be a non-empty string")

    def decorator(cls: C) -> C:
        setattr(cls, ENTITY_TYPE_ATTRIBUTE, tag)
        return cls

    return decorator


def declared_entity_type(cls: type) -> Optional[str]:
    """Return the tag declared directly on ``cls`` (not inherited), if any."""
    return vars(cls).get(ENTITY_TYPE_ATTRIBUTE)


class EntityTypeRegistry:
    """Bidirectional mapping between discriminators and entity classes.

    Attributes:
        _types: tag -> class
        _tags: class -> tag
        _lock: guards writes during bootstrap
        _frozen: set once startup registration is complete
    """

    def __init__(self):
        self._types: Dict[str, type] = {}
        self._tags: Dict[type, str] = {}
        self._lock = threading.Lock()
        self._frozen = False

    @classmethod
    def from_pairs(cls, pairs: Iterable[Tuple[str, type]]) -> "EntityTypeRegistry":
        """Build a registry from an explicit, auditable list of pairs."""
        registry = cls()
        for tag, entity_cls in pairs:
            registry.register(tag, entity_cls)
        return registry

    def discover(self, candidates: Iterable[type]) -> List[str]:
        """Register every candidate class that declares a type tag.

        Untagged candidates are skipped silently: most classes are not
        registrable. Tags are read from the class itself, so a subclass does
        not inherit its parent's registration.

        Returns:
            The tags registered by this call, in candidate order.
        """
        registered = []
        for candidate in candidates:
            tag = declared_entity_type(candidate)
            if tag is None:
                continue
            self.register(tag, candidate)
            registered.append(tag)
        return registered

    def register(self, tag: str, entity_cls: type) -> None:
        """Register ``tag`` <-> ``entity_cls``.

        Raises:
            RegistryFrozenError: If called after ``freeze``.
            DuplicateEntityTypeError: If the tag or the class is already
                registered with a different partner.
        """
        if not isinstance(tag, str) or not tag:
            raise ValueError("Entity type tag must be a non-empty string")
        if not isinstance(entity_cls, type):
            raise TypeError(f"Expected a class for tag '{tag}', got {entity_cls!r}")

        with self._lock:
            if self._frozen:
                raise RegistryFrozenError(
                    f"Cannot register '{tag}': entity type registry is frozen"
                )

            existing_cls = self._types.get(tag)
            existing_tag = self._tags.get(entity_cls)
            if existing_cls is entity_cls and existing_tag == tag:
                return
            if existing_cls is not None:
                raise DuplicateEntityTypeError(
                    f'Type "{tag}" is already registered for {existing_cls.__qualname__}'
                )
            if existing_tag is not None:
                raise DuplicateEntityTypeError(
                    f'Class "{entity_cls.__qualname__}" is already registered as "{existing_tag}"'
                )

            self._types[tag] = entity_cls
            self._tags[entity_cls] = tag

        logger.info(
            "entity_type_registered",
            entity_type=tag,
            entity_class=entity_cls.__qualname__,
        )

    def resolve_type(self, tag: str) -> type:
        """Return the class registered for ``tag``.

        Raises:
            UnknownEntityTypeError: If the tag is not registered.
        """
        try:
            return self._types[tag]
        except KeyError:
            raise UnknownEntityTypeError(tag) from None

    def resolve_tag(self, entity_cls: Type) -> str:
        """Return the tag registered for ``entity_cls``.

        Raises:
            UnknownEntityClassError: If the class is not registered.
        """
        try:
            return self._tags[entity_cls]
        except (KeyError, TypeError):
            raise UnknownEntityClassError(entity_cls) from None

    def has_type(self, tag: str) -> bool:
        return tag in self._types

    def freeze(self) -> None:
        """Make the registry read-only. Idempotent."""
        with self._lock:
            self._frozen = True
        logger.info("entity_type_registry_frozen", entity_types=sorted(self._types))

    @property
    def is_frozen(self) -> bool:
        return self._frozen

    def items(self) -> List[Tuple[str, type]]:
        return list(self._types.items())

    def clear(self) -> None:
        """Remove every registration and unfreeze.

        WARNING: This is intended for testing only.
        """
        with self._lock:
            self._types.clear()
            self._tags.clear()
            self._frozen = False

    def __len__(self) -> int:
        return len(self._types)

    def __contains__(self, tag: object) -> bool:
        return tag in self._types


# Process-wide registry populated during bootstrap.
entity_types = EntityTypeRegistry()
