"""Errors for the content module."""

from typing import Any, ClassVar, Dict

from infrastructure.operations.errors import ConfigurationError, DomainError
from infrastructure.operations.status import OperationStatus


class InvalidIdentifierError(DomainError, ValueError):
    """Raised when an entity identifier is not a valid UUID."""

    error_code: ClassVar[str] = "INCORRECT_UUID"
    status: ClassVar[OperationStatus] = OperationStatus.VALIDATION_ERROR

    def __init__(self, identifier_type: str, value: Any):
        super().__init__(f"Invalid UUID for {identifier_type}")
        self.identifier_type = identifier_type
        self.value = value

    def public_context(self) -> Dict[str, Any]:
        return {"type": self.identifier_type, "value": str(self.value)}


class UnknownEntityTypeError(ConfigurationError):
    """Raised when a discriminator is not registered in the entity type registry."""

    error_code: ClassVar[str] = "INCORRECT_ENTITY_TYPE"

    def __init__(self, tag: str):
        super().__init__(f'Type "{tag}" is not registered in entity type mapping')
        self.tag = tag


class UnknownEntityClassError(ConfigurationError):
    """Raised when a class is not registered in the entity type registry."""

    error_code: ClassVar[str] = "INCORRECT_ENTITY_TYPE"

    def __init__(self, cls: Any):
        name = getattr(cls, "__qualname__", repr(cls))
        super().__init__(f'Class "{name}" is not registered in entity type mapping')
        self.cls = cls


class DuplicateEntityTypeError(ConfigurationError):
    """Raised when a tag or a class is registered twice with different partners."""

    error_code: ClassVar[str] = "DUPLICATE_ENTITY_TYPE"


class RegistryFrozenError(ConfigurationError):
    """Raised when registering after the registry was frozen at startup."""

    error_code: ClassVar[str] = "ENTITY_TYPE_REGISTRY_FROZEN"
