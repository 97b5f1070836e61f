"""SQLAlchemy implementation of the user store."""

import uuid
from typing import Protocol

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError

from app.db.session import SessionFactory
from app.db.types import utcnow
from app.features.auth.models import User


class PasswordHasher(Protocol):
    """Protocol for password hashing operations."""

    def hash(self, secret: str) -> str:
        """Hash a password or secret."""
        ...


class UserAlreadyExistsError(ValueError):
    """Raised when the email or Google id is already owned by another account."""

    def __init__(self):
        super().__init__("Email already registered")


class UserRepository(Protocol):
    """Protocol for the user store."""

    async def get_by_id(self, user_id: uuid.UUID) -> User | None: ...

    async def get_by_email(self, email: str) -> User | None: ...

    async def get_by_google_id(self, google_id: str) -> User | None: ...

    async def save(self, user: User, plain_secret: str | None = None) -> User: ...

    async def update_profile(
        self, user_id: uuid.UUID, name: str | None, avatar: str | None
    ) -> User | None: ...


class SqlAlchemyUserRepository:
    """User store backed by the `users` table.

    Email uniqueness and Google id uniqueness are enforced by the table's
    unique constraints; violations surface as `UserAlreadyExistsError`.
    """

    def __init__(self, get_db_session: SessionFactory, password_hasher: PasswordHasher):
        self.get_db_session = get_db_session
        self.password_hasher = password_hasher

    async def get_by_id(self, user_id: uuid.UUID) -> User | None:
        async with self.get_db_session() as session:
            return await session.get(User, user_id)

    async def get_by_email(self, email: str) -> User | None:
        async with self.get_db_session() as session:
            result = await session.execute(
                select(User).where(User.email == email.strip().lower())
            )
            return result.scalar_one_or_none()

    async def get_by_google_id(self, google_id: str) -> User | None:
        async with self.get_db_session() as session:
            result = await session.execute(
                select(User).where(User.google_id == google_id)
            )
            return result.scalar_one_or_none()

    async def save(self, user: User, plain_secret: str | None = None) -> User:
        """Insert or update a user.

        The secret is hashed only when `plain_secret` is supplied, i.e. when
        the secret field is dirty for this save. Re-saving a user without it
        leaves the stored hash untouched.
        """
        user.email = user.email.strip().lower()
        if plain_secret is not None:
            user.hashed_password = self.password_hasher.hash(plain_secret)

        async with self.get_db_session() as session:
            try:
                session.add(user)
                await session.commit()
            except IntegrityError:
                await session.rollback()
                raise UserAlreadyExistsError()
            await session.refresh(user)
            return user

    async def update_profile(
        self, user_id: uuid.UUID, name: str | None, avatar: str | None
    ) -> User | None:
        """Apply a partial profile update. Returns None if the user is gone."""
        async with self.get_db_session() as session:
            user = await session.get(User, user_id)
            if user is None:
                return None

            if name is not None:
                user.name = name
            if avatar is not None:
                user.avatar = avatar
            user.updated_at = utcnow()

            await session.commit()
            await session.refresh(user)
            return user
