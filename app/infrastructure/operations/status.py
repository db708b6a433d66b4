"""Operation status enumeration.

Status codes for operation results, used to classify outcomes of use cases
so callers can map them to stable external error codes.
"""

from enum import Enum


class OperationStatus(Enum):
    """Status codes for operation results.

    Attributes:
        SUCCESS: Operation completed successfully
        VALIDATION_ERROR: Request input rejected (bad locale, bad identifier)
        PERMANENT_ERROR: Business rule violation, correctable by the caller
        NOT_FOUND: Requested entity does not exist
        INTERNAL_ERROR: Configuration or programming defect
    """

    SUCCESS = "success"
    VALIDATION_ERROR = "validation_error"
    PERMANENT_ERROR = "permanent_error"
    NOT_FOUND = "not_found"
    INTERNAL_ERROR = "internal_error"
