"""Login, Google login and logout route handlers."""

from typing import Protocol

from fastapi import APIRouter, Depends

from app.core.authentication import (
    CredentialService,
    PasswordHasherImpl,
    get_credential_service,
    get_current_user,
)
from app.core.schemas import ApiResponse, AuthenticatedUser
from app.features.auth.dependencies import (
    get_identity_verifier,
    get_password_hasher,
    get_user_repository,
)
from app.features.auth.dtos import GoogleLoginRequest, LoginRequest, TokenResponse
from app.features.auth.repositories import UserRepository
from app.features.auth.services.protocols import IdentityVerifier
from app.features.auth.usecases import GoogleLoginUseCaseImpl, LoginUseCaseImpl


class LoginUseCase(Protocol):
    """Protocol for the login use case."""

    async def execute(self, request: LoginRequest) -> TokenResponse:
        """Authenticate user and return token."""
        ...


class GoogleLoginUseCase(Protocol):
    """Protocol for the Google login use case."""

    async def execute(self, id_token: str) -> TokenResponse:
        """Authenticate with a Google ID token and return token."""
        ...


async def get_login_use_case(
    user_repository: UserRepository = Depends(get_user_repository),
    password_hasher: PasswordHasherImpl = Depends(get_password_hasher),
    credential_service: CredentialService = Depends(get_credential_service),
) -> LoginUseCase:
    """Dependency injection for the login use case."""
    return LoginUseCaseImpl(
        user_repository=user_repository,
        password_verifier=password_hasher,
        token_issuer=credential_service,
    )


async def get_google_login_use_case(
    user_repository: UserRepository = Depends(get_user_repository),
    identity_verifier: IdentityVerifier = Depends(get_identity_verifier),
    credential_service: CredentialService = Depends(get_credential_service),
) -> GoogleLoginUseCase:
    """Dependency injection for the Google login use case."""
    return GoogleLoginUseCaseImpl(
        user_repository=user_repository,
        identity_verifier=identity_verifier,
        token_issuer=credential_service,
    )


router = APIRouter()


@router.post("/login", response_model=ApiResponse[TokenResponse])
async def login(
    login_data: LoginRequest,
    use_case: LoginUseCase = Depends(get_login_use_case),
) -> ApiResponse[TokenResponse]:
    """Authenticate with email and password."""
    return ApiResponse(data=await use_case.execute(login_data))


@router.post("/google", response_model=ApiResponse[TokenResponse])
async def google_login(
    login_data: GoogleLoginRequest,
    use_case: GoogleLoginUseCase = Depends(get_google_login_use_case),
) -> ApiResponse[TokenResponse]:
    """Authenticate with a Google ID token, creating or linking the account."""
    return ApiResponse(data=await use_case.execute(login_data.id_token))


@router.post("/logout", response_model=ApiResponse[None])
async def logout(
    _current_user: AuthenticatedUser = Depends(get_current_user),
) -> ApiResponse[None]:
    """Acknowledge a logout.

    Tokens are stateless and are not revoked server side; the client is
    expected to discard its copy.
    """
    return ApiResponse(message="Logged out successfully")
