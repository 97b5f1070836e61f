"""Use case for signing up a password based account."""

import logging
from typing import Protocol
from uuid import UUID

from fastapi import HTTPException, status

from app.core.authentication import IssuedToken
from app.features.auth.dtos import SignupRequest, TokenResponse
from app.features.auth.models import User
from app.features.auth.repositories import UserAlreadyExistsError, UserRepository

logger = logging.getLogger(__name__)


class TokenIssuer(Protocol):
    """Protocol for access token issuing."""

    def issue(self, subject_id: UUID | str, email: str) -> IssuedToken:
        """Issue a signed access token."""
        ...


class SignupUseCaseImpl:
    """Implementation of the signup use case."""

    def __init__(self, user_repository: UserRepository, token_issuer: TokenIssuer):
        """Initialize the use case with dependencies.

        Args:
            user_repository: Store for user accounts
            token_issuer: Service for issuing access tokens
        """
        self.user_repository = user_repository
        self.token_issuer = token_issuer

    async def execute(self, request: SignupRequest) -> TokenResponse:
        """Create an account with a hashed password and log it in.

        Args:
            request: Validated signup payload (email already lower-cased)

        Returns:
            Access token for the new account

        Raises:
            HTTPException: 400 if the email is already registered
        """
        existing = await self.user_repository.get_by_email(request.email)
        if existing is not None:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Email already registered",
            )

        user = User(email=request.email, name=request.name)
        try:
            user = await self.user_repository.save(user, plain_secret=request.password)
        except UserAlreadyExistsError:
            # Lost a race with a concurrent signup for the same email
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Email already registered",
            )

        logger.info("Created account %s", user.id)
        token = self.token_issuer.issue(user.id, user.email)
        return TokenResponse(access_token=token.token, expires_in=token.expires_in)
