"""Authentication data transfer objects."""

from .auth_dto import (
    GoogleLoginRequest,
    LoginRequest,
    SignupRequest,
    TokenResponse,
    UpdateProfileRequest,
    UserProfile,
)

__all__ = [
    "SignupRequest",
    "LoginRequest",
    "GoogleLoginRequest",
    "TokenResponse",
    "UpdateProfileRequest",
    "UserProfile",
]
