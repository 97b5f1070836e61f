"""Use case for password login."""

from typing import Protocol

from fastapi import HTTPException, status

from app.features.auth.dtos import LoginRequest, TokenResponse
from app.features.auth.repositories import UserRepository
from app.features.auth.usecases.signup_usecase import TokenIssuer


class PasswordVerifier(Protocol):
    """Protocol for password verification operations."""

    def verify(self, candidate: str, hashed: str) -> bool:
        """Verify a password against its hash."""
        ...


class LoginUseCaseImpl:
    """Implementation of the login use case."""

    def __init__(
        self,
        user_repository: UserRepository,
        password_verifier: PasswordVerifier,
        token_issuer: TokenIssuer,
    ):
        """Initialize the use case with dependencies.

        Args:
            user_repository: Store for user accounts
            password_verifier: Service for verifying passwords
            token_issuer: Service for issuing access tokens
        """
        self.user_repository = user_repository
        self.password_verifier = password_verifier
        self.token_issuer = token_issuer

    async def execute(self, request: LoginRequest) -> TokenResponse:
        """Authenticate with email and password.

        Unknown email, a Google-only account without a password, and a wrong
        password all produce the same 401 so accounts cannot be enumerated.

        Raises:
            HTTPException: 401 for any credential mismatch
        """
        user = await self.user_repository.get_by_email(request.email)

        if (
            user is None
            or not user.hashed_password
            or not self.password_verifier.verify(request.password, user.hashed_password)
        ):
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail="Invalid email or password",
                headers={"WWW-Authenticate": "Bearer"},
            )

        token = self.token_issuer.issue(user.id, user.email)
        return TokenResponse(access_token=token.token, expires_in=token.expires_in)
