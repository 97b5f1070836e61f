"""Use case for getting a single entity."""

from uuid import UUID

from fastapi import HTTPException, status

from app.core.schemas import AuthenticatedUser
from app.features.entities.dtos import EntityResponse
from app.features.entities.repositories import EntityRepository


def entity_not_found() -> HTTPException:
    """The single response used for missing and foreign entities alike."""
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail="Entity not found",
    )


class GetEntityUseCaseImpl:
    """Implementation of the get entity use case."""

    def __init__(self, entity_repository: EntityRepository):
        self.entity_repository = entity_repository

    async def execute(
        self, entity_id: UUID, current_user: AuthenticatedUser
    ) -> EntityResponse:
        """Get one of the caller's entities.

        Raises:
            HTTPException: 404 if the id is unknown or owned by another user
        """
        entity = await self.entity_repository.get_for_owner(
            current_user.user_id, entity_id
        )
        if entity is None:
            raise entity_not_found()
        return EntityResponse.model_validate(entity)
