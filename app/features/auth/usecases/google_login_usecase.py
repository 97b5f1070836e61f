"""Use case for logging in with a Google ID token."""

import logging

from fastapi import HTTPException, status

from app.features.auth.dtos import TokenResponse
from app.features.auth.models import User
from app.features.auth.repositories import UserAlreadyExistsError, UserRepository
from app.features.auth.services.protocols import (
    ExternalIdentity,
    IdentityVerificationError,
    IdentityVerifier,
)
from app.features.auth.usecases.signup_usecase import TokenIssuer

logger = logging.getLogger(__name__)


class GoogleLoginUseCaseImpl:
    """Implementation of the Google login use case.

    Account resolution is an explicit three-way decision:
    1. an account already linked to the Google subject is used as is;
    2. otherwise an account with the same email is linked to the subject;
    3. otherwise a new account without a password is created.
    """

    def __init__(
        self,
        user_repository: UserRepository,
        identity_verifier: IdentityVerifier,
        token_issuer: TokenIssuer,
    ):
        self.user_repository = user_repository
        self.identity_verifier = identity_verifier
        self.token_issuer = token_issuer

    async def execute(self, id_token: str) -> TokenResponse:
        """Verify the ID token, resolve the account and issue an access token.

        Raises:
            HTTPException: 400 if verification or account resolution fails
        """
        try:
            identity = await self.identity_verifier.verify(id_token)
        except IdentityVerificationError:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Google authentication failed",
            )

        try:
            user = await self._resolve_account(identity)
        except UserAlreadyExistsError:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Google authentication failed",
            )

        token = self.token_issuer.issue(user.id, user.email)
        return TokenResponse(access_token=token.token, expires_in=token.expires_in)

    async def _resolve_account(self, identity: ExternalIdentity) -> User:
        user = await self.user_repository.get_by_google_id(identity.subject_id)
        if user is not None:
            return user

        user = await self.user_repository.get_by_email(identity.email)
        if user is not None:
            return await self._link_existing(user, identity)

        return await self._create_from_identity(identity)

    async def _link_existing(self, user: User, identity: ExternalIdentity) -> User:
        user.google_id = identity.subject_id
        user = await self.user_repository.save(user)
        logger.info("Linked Google identity to account %s", user.id)
        return user

    async def _create_from_identity(self, identity: ExternalIdentity) -> User:
        user = User(
            email=identity.email,
            name=identity.name,
            avatar=identity.avatar,
            google_id=identity.subject_id,
        )
        user = await self.user_repository.save(user)
        logger.info("Created account %s from Google identity", user.id)
        return user
