"""Infrastructure models and response wrappers.

Exports:
    APIResponse: Generic response wrapper with success, data, message, error_code
    ErrorResponse: Standard error response with error details
    InfrastructureModel: Base model configuration for schemas
"""

from infrastructure.models.base import InfrastructureModel
from infrastructure.models.responses import APIResponse, ErrorResponse

__all__ = [
    "APIResponse",
    "ErrorResponse",
    "InfrastructureModel",
]
