"""Current user profile route handlers."""

from typing import Protocol

from fastapi import APIRouter, Depends

from app.core.authentication import get_current_user
from app.core.schemas import ApiResponse, AuthenticatedUser
from app.features.auth.dependencies import get_user_repository
from app.features.auth.dtos import UpdateProfileRequest, UserProfile
from app.features.auth.repositories import UserRepository
from app.features.auth.usecases import GetProfileUseCaseImpl, UpdateProfileUseCaseImpl


class GetProfileUseCase(Protocol):
    """Protocol for the get profile use case."""

    async def execute(self, current_user: AuthenticatedUser) -> UserProfile:
        """Return the caller's profile."""
        ...


class UpdateProfileUseCase(Protocol):
    """Protocol for the update profile use case."""

    async def execute(
        self, current_user: AuthenticatedUser, request: UpdateProfileRequest
    ) -> UserProfile:
        """Update the caller's profile."""
        ...


async def get_get_profile_use_case(
    user_repository: UserRepository = Depends(get_user_repository),
) -> GetProfileUseCase:
    """Dependency injection for the get profile use case."""
    return GetProfileUseCaseImpl(user_repository=user_repository)


async def get_update_profile_use_case(
    user_repository: UserRepository = Depends(get_user_repository),
) -> UpdateProfileUseCase:
    """Dependency injection for the update profile use case."""
    return UpdateProfileUseCaseImpl(user_repository=user_repository)


router = APIRouter()


@router.get("/me", response_model=ApiResponse[UserProfile])
async def get_current_user_info(
    current_user: AuthenticatedUser = Depends(get_current_user),
    use_case: GetProfileUseCase = Depends(get_get_profile_use_case),
) -> ApiResponse[UserProfile]:
    """Get current authenticated user information."""
    return ApiResponse(data=await use_case.execute(current_user))


@router.put("/profile", response_model=ApiResponse[UserProfile])
async def update_profile(
    request: UpdateProfileRequest,
    current_user: AuthenticatedUser = Depends(get_current_user),
    use_case: UpdateProfileUseCase = Depends(get_update_profile_use_case),
) -> ApiResponse[UserProfile]:
    """Update the current user's name and/or avatar."""
    return ApiResponse(data=await use_case.execute(current_user, request))
