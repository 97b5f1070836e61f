"""Authentication utilities: password hashing, JWT issuing and verification."""

import logging
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from uuid import UUID

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError, jwt
from passlib.context import CryptContext

from app.core.schemas import AuthenticatedUser
from app.core.settings import Settings, get_settings

logger = logging.getLogger(__name__)

# Password hashing - using argon2 as bcrypt has issues.
pwd_context = CryptContext(schemes=["argon2"], deprecated="auto")

# Missing credentials are reported by get_current_user itself (401).
bearer_scheme = HTTPBearer(auto_error=False)


class InvalidCredentialError(Exception):
    """Raised when a token is malformed, expired, or carries a bad signature."""


@dataclass(frozen=True)
class IssuedToken:
    """A freshly signed access token and its lifetime in seconds."""

    token: str
    expires_in: int


class PasswordHasherImpl:
    """Salted one-way hashing of account secrets."""

    def hash(self, secret: str) -> str:
        """Hash a password."""
        return pwd_context.hash(secret)

    def verify(self, candidate: str, hashed: str) -> bool:
        """Verify a plain password against its hash."""
        return pwd_context.verify(candidate, hashed)


class CredentialService:
    """Issues and verifies signed, time-limited bearer credentials.

    Holds no state beyond the configuration it was built with.
    """

    def __init__(self, settings: Settings):
        self.secret_key = settings.secret_key
        self.algorithm = settings.algorithm
        self.expires_in = settings.access_token_expire_seconds

    def issue(self, subject_id: UUID | str, email: str) -> IssuedToken:
        """Create a JWT access token for the given subject."""
        expire = datetime.now(UTC) + timedelta(seconds=self.expires_in)
        to_encode = {"sub": str(subject_id), "email": email, "exp": expire}
        encoded_jwt = jwt.encode(to_encode, self.secret_key, algorithm=self.algorithm)
        return IssuedToken(token=encoded_jwt, expires_in=self.expires_in)

    def verify(self, token: str) -> AuthenticatedUser:
        """Verify and decode a JWT token.

        Raises:
            InvalidCredentialError: for any signature, expiry or claim problem.
                Callers cannot tell an expired token from a forged one.
        """
        try:
            payload = jwt.decode(token, self.secret_key, algorithms=[self.algorithm])
        except JWTError as e:
            raise InvalidCredentialError(str(e)) from e

        user_id = payload.get("sub")
        email = payload.get("email")
        if user_id is None or email is None:
            raise InvalidCredentialError("Token missing required claims")

        try:
            return AuthenticatedUser(user_id=UUID(str(user_id)), email=str(email))
        except ValueError as e:
            raise InvalidCredentialError("Invalid subject format in token") from e


def get_credential_service(
    settings: Settings = Depends(get_settings),
) -> CredentialService:
    """Dependency injection for the credential service."""
    return CredentialService(settings)


async def get_current_user(
    request: Request,
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    credential_service: CredentialService = Depends(get_credential_service),
) -> AuthenticatedUser:
    """Resolve the caller from the `Authorization: Bearer` header.

    Raises:
        HTTPException 401 when no credential is sent, 403 when it is invalid
    """
    if credentials is None:
        # A non-Bearer scheme still presents a credential
        scheme, _, presented = request.headers.get("Authorization", "").partition(" ")
        if scheme and presented.strip():
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail="Invalid or expired token",
            )

    if credentials is None or not credentials.credentials:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Access token required",
            headers={"WWW-Authenticate": "Bearer"},
        )

    try:
        return credential_service.verify(credentials.credentials)
    except InvalidCredentialError as e:
        logger.debug("Rejected bearer token: %s", e)
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Invalid or expired token",
        )
