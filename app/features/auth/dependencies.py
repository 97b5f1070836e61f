"""Dependency providers shared by the auth routes."""

from fastapi import Depends

from app.core.authentication import PasswordHasherImpl
from app.core.settings import Settings, get_settings
from app.db.session import SessionFactory, get_session_factory
from app.features.auth.repositories import SqlAlchemyUserRepository, UserRepository
from app.features.auth.services.google_identity_verifier import GoogleIdentityVerifier
from app.features.auth.services.protocols import IdentityVerifier

_identity_verifier: GoogleIdentityVerifier | None = None


def get_password_hasher() -> PasswordHasherImpl:
    """Dependency injection for the password hasher."""
    return PasswordHasherImpl()


def get_user_repository(
    get_db_session: SessionFactory = Depends(get_session_factory),
    password_hasher: PasswordHasherImpl = Depends(get_password_hasher),
) -> UserRepository:
    """Dependency injection for the user store."""
    return SqlAlchemyUserRepository(get_db_session, password_hasher)


def get_identity_verifier(
    settings: Settings = Depends(get_settings),
) -> IdentityVerifier:
    """Dependency injection for the Google identity verifier (lazily built)."""
    global _identity_verifier
    if _identity_verifier is None:
        _identity_verifier = GoogleIdentityVerifier(settings.google_client_id)
    return _identity_verifier
