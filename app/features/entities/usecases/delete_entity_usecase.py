"""Use case for deleting an entity."""

from uuid import UUID

from app.core.schemas import AuthenticatedUser
from app.features.entities.repositories import EntityRepository
from app.features.entities.usecases.get_entity_usecase import entity_not_found


class DeleteEntityUseCaseImpl:
    """Implementation of the delete entity use case."""

    def __init__(self, entity_repository: EntityRepository):
        self.entity_repository = entity_repository

    async def execute(self, entity_id: UUID, current_user: AuthenticatedUser) -> None:
        """Delete one of the caller's entities.

        A repeated delete of the same id also fails with 404.

        Raises:
            HTTPException: 404 if the id is unknown or owned by another user
        """
        deleted = await self.entity_repository.delete_for_owner(
            current_user.user_id, entity_id
        )
        if not deleted:
            raise entity_not_found()
