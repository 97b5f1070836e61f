"""Authentication data transfer objects."""

import uuid
from datetime import datetime
from typing import Any

from pydantic import AnyUrl, EmailStr, Field, TypeAdapter, ValidationError, field_validator

from app.core.schemas import CamelModel, RequestModel


_url_adapter = TypeAdapter(AnyUrl)


def _normalize_email(value: Any) -> Any:
    if isinstance(value, str):
        return value.strip().lower()
    return value


class SignupRequest(RequestModel):
    """Request model for creating a password based account."""

    email: EmailStr
    password: str = Field(min_length=8)
    name: str = Field(min_length=1)

    @field_validator("email", mode="before")
    @classmethod
    def normalize_email(cls, value: Any) -> Any:
        return _normalize_email(value)


class LoginRequest(RequestModel):
    """Request model for password login."""

    email: EmailStr
    password: str = Field(min_length=1)

    @field_validator("email", mode="before")
    @classmethod
    def normalize_email(cls, value: Any) -> Any:
        return _normalize_email(value)


class GoogleLoginRequest(RequestModel):
    """Request model for Google login."""

    id_token: str = Field(min_length=1)


class TokenResponse(CamelModel):
    """Access token issued after signup or login."""

    access_token: str
    expires_in: int


class UpdateProfileRequest(RequestModel):
    """Request model for a partial profile update."""

    name: str | None = Field(default=None, min_length=1)
    avatar: str | None = None

    @field_validator("avatar")
    @classmethod
    def validate_avatar(cls, value: str | None) -> str | None:
        """Must parse as a URL; the caller's string is kept as sent."""
        if value is None:
            return value
        try:
            _url_adapter.validate_python(value)
        except ValidationError:
            raise ValueError("avatar must be a valid URL")
        return value


class UserProfile(CamelModel):
    """Public projection of a user. Never carries the password hash."""

    id: uuid.UUID
    email: str
    name: str
    avatar: str | None = None
    google_id: str | None = None
    created_at: datetime
    updated_at: datetime
