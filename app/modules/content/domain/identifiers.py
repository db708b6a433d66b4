"""UUID-backed identifier value objects."""

import uuid
from dataclasses import dataclass

from modules.content.domain.errors import InvalidIdentifierError


@dataclass(frozen=True)
class EntityId:
    """Base identifier: a canonical lowercase hyphenated UUID string.

    Subclasses never compare equal to each other, so a ``PostId`` cannot be
    used where a ``SeoMetadataId`` is expected by accident.
    """

    value: str

    def __post_init__(self):
        try:
            canonical = str(uuid.UUID(str(self.value)))
        except (TypeError, ValueError, AttributeError) as e:
            raise InvalidIdentifierError(type(self).__name__, self.value) from e
        object.__setattr__(self, "value", canonical)

    @classmethod
    def generate(cls):
        return cls(str(uuid.uuid4()))

    @classmethod
    def from_string(cls, value):
        """Build an identifier, accepting an existing instance unchanged."""
        if isinstance(value, cls):
            return value
        return cls(value)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class SeoMetadataId(EntityId):
    pass
