"""Shared schema building blocks."""

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

T = TypeVar("T")


class CamelModel(BaseModel):
    """Base schema exposing camelCase field names on the wire."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class ApiResponse(CamelModel, Generic[T]):
    """Envelope wrapping every response body."""

    success: bool = True
    data: T | None = None
    error: str | None = None


def error_body(message: str) -> dict:
    """Build the envelope for a failed request."""
    return {"success": False, "error": message}
