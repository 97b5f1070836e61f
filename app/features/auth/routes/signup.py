"""Signup route handler."""

from typing import Protocol

from fastapi import APIRouter, Depends, status

from app.core.authentication import CredentialService, get_credential_service
from app.core.schemas import ApiResponse
from app.features.auth.dependencies import get_user_repository
from app.features.auth.dtos import SignupRequest, TokenResponse
from app.features.auth.repositories import UserRepository
from app.features.auth.usecases import SignupUseCaseImpl


class SignupUseCase(Protocol):
    """Protocol for the signup use case."""

    async def execute(self, request: SignupRequest) -> TokenResponse:
        """Create an account and return an access token."""
        ...


async def get_signup_use_case(
    user_repository: UserRepository = Depends(get_user_repository),
    credential_service: CredentialService = Depends(get_credential_service),
) -> SignupUseCase:
    """Dependency injection for the signup use case."""
    return SignupUseCaseImpl(
        user_repository=user_repository,
        token_issuer=credential_service,
    )


router = APIRouter()


@router.post(
    "/signup",
    response_model=ApiResponse[TokenResponse],
    status_code=status.HTTP_201_CREATED,
)
async def signup(
    request: SignupRequest,
    use_case: SignupUseCase = Depends(get_signup_use_case),
) -> ApiResponse[TokenResponse]:
    """Create a new user account with email and password."""
    return ApiResponse(data=await use_case.execute(request))
