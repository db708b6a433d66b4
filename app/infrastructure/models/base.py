"""Base Pydantic model configuration.

Defines the model configuration shared by request and response schemas
across modules.
"""

from pydantic import BaseModel, ConfigDict


class InfrastructureModel(BaseModel):
    """Base model for request and response schemas.

    Provides standard Pydantic configuration for:
    - Enums kept as enum objects
    - Population by field name or alias
    - Validation on assignment
    - Creation from attribute-bearing objects
    """

    model_config = ConfigDict(
        use_enum_values=False,
        populate_by_name=True,
        validate_assignment=True,
        from_attributes=True,
        str_strip_whitespace=True,
    )
