"""Operation result types, status enums, and domain error handling.

This module contains standardized result types for use cases, the domain
error base classes, the domain error classifier, and the top-level error
boundary.
"""

from infrastructure.operations.classifiers import classify_domain_error
from infrastructure.operations.errors import ConfigurationError, DomainError
from infrastructure.operations.result import OperationResult
from infrastructure.operations.status import OperationStatus

__all__ = [
    "OperationResult",
    "OperationStatus",
    "DomainError",
    "ConfigurationError",
    "classify_domain_error",
]
