"""Use case for updating an entity."""

from uuid import UUID

from app.core.schemas import AuthenticatedUser
from app.features.entities.dtos import EntityResponse, UpdateEntityRequest
from app.features.entities.repositories import EntityRepository
from app.features.entities.usecases.get_entity_usecase import entity_not_found


class UpdateEntityUseCaseImpl:
    """Implementation of the update entity use case."""

    def __init__(self, entity_repository: EntityRepository):
        self.entity_repository = entity_repository

    async def execute(
        self,
        entity_id: UUID,
        request: UpdateEntityRequest,
        current_user: AuthenticatedUser,
    ) -> EntityResponse:
        """Apply a partial update to one of the caller's entities.

        Raises:
            HTTPException: 404 if the id is unknown or owned by another user
        """
        entity = await self.entity_repository.update_for_owner(
            current_user.user_id, entity_id, request.changes()
        )
        if entity is None:
            raise entity_not_found()
        return EntityResponse.model_validate(entity)
