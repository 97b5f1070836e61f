"""User store."""

from .user_repository import (
    PasswordHasher,
    SqlAlchemyUserRepository,
    UserAlreadyExistsError,
    UserRepository,
)

__all__ = [
    "PasswordHasher",
    "SqlAlchemyUserRepository",
    "UserAlreadyExistsError",
    "UserRepository",
]
