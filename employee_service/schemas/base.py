"""
Base Pydantic schemas and common types
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class BaseSchema(BaseModel):
    """Base schema with common configuration.

    Fields are snake_case in Python and camelCase on the wire.
    """

    model_config = ConfigDict(
        from_attributes=True,
        populate_by_name=True,
        use_enum_values=True,
        alias_generator=to_camel,
    )


class FieldError(BaseSchema):
    """A single field-level validation failure."""

    field: str = Field(description="Field name (wire name)")
    message: str = Field(description="Human-readable error message")


class ErrorResponse(BaseModel):
    """Error body produced by the exception handlers."""

    success: bool = Field(default=False)
    detail: str = Field(description="Error detail message")
    status_code: int | None = Field(default=None, description="HTTP status code")
    errors: list[FieldError] = Field(default_factory=list)
