"""Use case for listing the caller's entities."""

from app.core.schemas import AuthenticatedUser
from app.features.entities.dtos import (
    EntityResponse,
    ListEntitiesRequest,
    ListEntitiesResponse,
    Pagination,
)
from app.features.entities.repositories import EntityRepository


class ListEntitiesUseCaseImpl:
    """Implementation of the list entities use case."""

    def __init__(self, entity_repository: EntityRepository):
        """Initialize the use case with dependencies.

        Args:
            entity_repository: Store for entities
        """
        self.entity_repository = entity_repository

    async def execute(
        self, request: ListEntitiesRequest, current_user: AuthenticatedUser
    ) -> ListEntitiesResponse:
        """List entities with offset pagination, filtering and sorting.

        Args:
            request: Pagination, filter and sort parameters
            current_user: The authenticated owner

        Returns:
            One page of entities plus the total of the filtered query
        """
        entities, total = await self.entity_repository.list_for_owner(
            current_user.user_id,
            category=request.category,
            status=request.status,
            sort_by=request.sort_by,
            offset=request.offset,
            limit=request.limit,
        )

        return ListEntitiesResponse(
            entities=[EntityResponse.model_validate(entity) for entity in entities],
            pagination=Pagination(page=request.page, limit=request.limit, total=total),
        )
