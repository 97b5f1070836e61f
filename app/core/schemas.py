import uuid
from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

T = TypeVar("T")


class CamelModel(BaseModel):
    """Base model serialized with camelCase keys.

    Snake case names are still accepted on input.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class RequestModel(CamelModel):
    """Base model for request bodies. Unknown fields are rejected."""

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, extra="forbid"
    )


class AuthenticatedUser(BaseModel):
    """Represents an authenticated user, built from verified token claims."""

    user_id: uuid.UUID
    email: str


class ApiResponse(CamelModel, Generic[T]):
    """Envelope wrapped around every successful response."""

    success: bool = True
    data: T | None = None
    message: str | None = None


class ErrorResponse(CamelModel):
    """Envelope returned for every failed request."""

    success: bool = False
    error: str
    status_code: int
