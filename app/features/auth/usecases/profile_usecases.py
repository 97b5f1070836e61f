"""Use cases for reading and updating the caller's own profile."""

from fastapi import HTTPException, status

from app.core.schemas import AuthenticatedUser
from app.features.auth.dtos import UpdateProfileRequest, UserProfile
from app.features.auth.repositories import UserRepository


class GetProfileUseCaseImpl:
    """Implementation of the get current profile use case."""

    def __init__(self, user_repository: UserRepository):
        self.user_repository = user_repository

    async def execute(self, current_user: AuthenticatedUser) -> UserProfile:
        """Return the public projection of the authenticated user.

        Raises:
            HTTPException: 404 if the account was deleted after the token was issued
        """
        user = await self.user_repository.get_by_id(current_user.user_id)
        if user is None:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="User not found",
            )
        return UserProfile.model_validate(user, from_attributes=True)


class UpdateProfileUseCaseImpl:
    """Implementation of the update profile use case."""

    def __init__(self, user_repository: UserRepository):
        self.user_repository = user_repository

    async def execute(
        self, current_user: AuthenticatedUser, request: UpdateProfileRequest
    ) -> UserProfile:
        """Apply a partial update of name and/or avatar.

        Raises:
            HTTPException: 404 if the account no longer exists
        """
        user = await self.user_repository.update_profile(
            current_user.user_id,
            name=request.name,
            avatar=request.avatar,
        )
        if user is None:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="User not found",
            )
        return UserProfile.model_validate(user, from_attributes=True)
