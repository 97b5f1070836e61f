"""Integration tests for the GoogleLoginUseCase."""

import pytest
from fastapi import HTTPException

from app.core.authentication import CredentialService
from app.features.auth.repositories import SqlAlchemyUserRepository
from app.features.auth.usecases import GoogleLoginUseCaseImpl
from tests.utils.database import insert_user
from tests.utils.fakes import FakeIdentityVerifier


@pytest.fixture
def user_repository(session_factory, password_hasher) -> SqlAlchemyUserRepository:
    return SqlAlchemyUserRepository(session_factory, password_hasher)


@pytest.fixture
def use_case(
    user_repository: SqlAlchemyUserRepository,
    identity_verifier: FakeIdentityVerifier,
    credential_service: CredentialService,
) -> GoogleLoginUseCaseImpl:
    return GoogleLoginUseCaseImpl(
        user_repository=user_repository,
        identity_verifier=identity_verifier,
        token_issuer=credential_service,
    )


@pytest.mark.asyncio
class TestGoogleLoginUseCase:
    """Test suite for the GoogleLoginUseCase."""

    async def test_existing_linked_account_is_used(
        self,
        use_case: GoogleLoginUseCaseImpl,
        identity_verifier: FakeIdentityVerifier,
        credential_service: CredentialService,
        session_factory,
    ):
        """An account already linked to the Google subject logs straight in."""
        user = await insert_user(
            session_factory, email="linked@example.com", google_id="sub-1"
        )
        identity_verifier.register("token-1", "sub-1", "linked@example.com")

        response = await use_case.execute("token-1")

        assert credential_service.verify(response.access_token).user_id == user.id

    async def test_existing_email_account_is_linked(
        self,
        use_case: GoogleLoginUseCaseImpl,
        identity_verifier: FakeIdentityVerifier,
        user_repository: SqlAlchemyUserRepository,
        credential_service: CredentialService,
        session_factory,
        password_hasher,
    ):
        """A password account with the same email gets the Google id attached."""
        user = await insert_user(
            session_factory,
            email="both@example.com",
            hashed_password=password_hasher.hash("password123"),
        )
        identity_verifier.register("token-2", "sub-2", "both@example.com")

        response = await use_case.execute("token-2")

        assert credential_service.verify(response.access_token).user_id == user.id
        linked = await user_repository.get_by_id(user.id)
        assert linked is not None
        assert linked.google_id == "sub-2"
        # The password still works after linking
        assert linked.hashed_password == user.hashed_password

    async def test_new_account_is_created(
        self,
        use_case: GoogleLoginUseCaseImpl,
        identity_verifier: FakeIdentityVerifier,
        user_repository: SqlAlchemyUserRepository,
        credential_service: CredentialService,
    ):
        """An unknown identity creates a password-less account."""
        identity_verifier.register(
            "token-3",
            "sub-3",
            "fresh@example.com",
            name="Fresh User",
            avatar="https://img.test/fresh.png",
        )

        response = await use_case.execute("token-3")

        identity = credential_service.verify(response.access_token)
        user = await user_repository.get_by_id(identity.user_id)
        assert user is not None
        assert user.email == "fresh@example.com"
        assert user.name == "Fresh User"
        assert user.avatar == "https://img.test/fresh.png"
        assert user.google_id == "sub-3"
        assert user.hashed_password is None

    async def test_second_login_reuses_created_account(
        self,
        use_case: GoogleLoginUseCaseImpl,
        identity_verifier: FakeIdentityVerifier,
        credential_service: CredentialService,
    ):
        """Logging in twice with the same identity resolves to one account."""
        identity_verifier.register("token-4", "sub-4", "again@example.com")

        first = await use_case.execute("token-4")
        second = await use_case.execute("token-4")

        assert (
            credential_service.verify(first.access_token).user_id
            == credential_service.verify(second.access_token).user_id
        )

    async def test_invalid_token(self, use_case: GoogleLoginUseCaseImpl):
        """An ID token the verifier rejects fails with 400."""
        with pytest.raises(HTTPException) as exc_info:
            await use_case.execute("forged-token")

        assert exc_info.value.status_code == 400
        assert exc_info.value.detail == "Google authentication failed"
