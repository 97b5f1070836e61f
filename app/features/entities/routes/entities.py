"""Entity CRUD route handlers."""

from typing import Protocol
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status

from app.core.authentication import get_current_user
from app.core.schemas import ApiResponse, AuthenticatedUser
from app.features.entities.dependencies import get_entity_repository
from app.features.entities.dtos import (
    CreateEntityRequest,
    EntityResponse,
    EntitySortBy,
    ListEntitiesRequest,
    ListEntitiesResponse,
    UpdateEntityRequest,
)
from app.features.entities.models import EntityStatus
from app.features.entities.repositories import EntityRepository
from app.features.entities.usecases import (
    CreateEntityUseCaseImpl,
    DeleteEntityUseCaseImpl,
    GetEntityUseCaseImpl,
    ListEntitiesUseCaseImpl,
    UpdateEntityUseCaseImpl,
)
from app.features.entities.usecases.get_entity_usecase import entity_not_found

router = APIRouter()


class ListEntitiesUseCase(Protocol):
    """Protocol for the list entities use case."""

    async def execute(
        self, request: ListEntitiesRequest, current_user: AuthenticatedUser
    ) -> ListEntitiesResponse:
        """List entities with pagination and filtering."""
        ...


class CreateEntityUseCase(Protocol):
    """Protocol for the create entity use case."""

    async def execute(
        self, request: CreateEntityRequest, current_user: AuthenticatedUser
    ) -> EntityResponse:
        """Create an entity owned by the caller."""
        ...


class GetEntityUseCase(Protocol):
    """Protocol for the get entity use case."""

    async def execute(
        self, entity_id: UUID, current_user: AuthenticatedUser
    ) -> EntityResponse:
        """Get a single entity by ID."""
        ...


class UpdateEntityUseCase(Protocol):
    """Protocol for the update entity use case."""

    async def execute(
        self,
        entity_id: UUID,
        request: UpdateEntityRequest,
        current_user: AuthenticatedUser,
    ) -> EntityResponse:
        """Update an entity."""
        ...


class DeleteEntityUseCase(Protocol):
    """Protocol for the delete entity use case."""

    async def execute(self, entity_id: UUID, current_user: AuthenticatedUser) -> None:
        """Delete an entity."""
        ...


async def get_list_entities_use_case(
    entity_repository: EntityRepository = Depends(get_entity_repository),
) -> ListEntitiesUseCase:
    """Dependency injection for the list entities use case."""
    return ListEntitiesUseCaseImpl(entity_repository=entity_repository)


async def get_create_entity_use_case(
    entity_repository: EntityRepository = Depends(get_entity_repository),
) -> CreateEntityUseCase:
    """Dependency injection for the create entity use case."""
    return CreateEntityUseCaseImpl(entity_repository=entity_repository)


async def get_get_entity_use_case(
    entity_repository: EntityRepository = Depends(get_entity_repository),
) -> GetEntityUseCase:
    """Dependency injection for the get entity use case."""
    return GetEntityUseCaseImpl(entity_repository=entity_repository)


async def get_update_entity_use_case(
    entity_repository: EntityRepository = Depends(get_entity_repository),
) -> UpdateEntityUseCase:
    """Dependency injection for the update entity use case."""
    return UpdateEntityUseCaseImpl(entity_repository=entity_repository)


async def get_delete_entity_use_case(
    entity_repository: EntityRepository = Depends(get_entity_repository),
) -> DeleteEntityUseCase:
    """Dependency injection for the delete entity use case."""
    return DeleteEntityUseCaseImpl(entity_repository=entity_repository)


def parse_entity_id(entity_id: str) -> UUID:
    """Path parameter parser. A malformed id is reported like a missing one."""
    try:
        return UUID(entity_id)
    except ValueError:
        raise entity_not_found()


@router.get("", response_model=ApiResponse[ListEntitiesResponse])
async def list_entities(
    page: int = Query(1, ge=1),
    limit: int = Query(10, ge=1, le=100),
    category: str | None = None,
    entity_status: EntityStatus | None = Query(None, alias="status"),
    sort_by: EntitySortBy = Query(EntitySortBy.NEWEST, alias="sortBy"),
    current_user: AuthenticatedUser = Depends(get_current_user),
    use_case: ListEntitiesUseCase = Depends(get_list_entities_use_case),
) -> ApiResponse[ListEntitiesResponse]:
    """List the caller's entities.

    - Offset pagination (`page`, `limit`)
    - Optional `category` and `status` filters
    - `sortBy`: newest (default), views or engagement, always descending
    """
    request = ListEntitiesRequest(
        page=page,
        limit=limit,
        category=category,
        status=entity_status,
        sort_by=sort_by,
    )
    return ApiResponse(data=await use_case.execute(request, current_user))


@router.post(
    "",
    response_model=ApiResponse[EntityResponse],
    status_code=status.HTTP_201_CREATED,
)
async def create_entity(
    request: CreateEntityRequest,
    current_user: AuthenticatedUser = Depends(get_current_user),
    use_case: CreateEntityUseCase = Depends(get_create_entity_use_case),
) -> ApiResponse[EntityResponse]:
    """Create a new entity owned by the caller."""
    return ApiResponse(data=await use_case.execute(request, current_user))


@router.get("/{entity_id}", response_model=ApiResponse[EntityResponse])
async def get_entity(
    current_user: AuthenticatedUser = Depends(get_current_user),
    entity_id: UUID = Depends(parse_entity_id),
    use_case: GetEntityUseCase = Depends(get_get_entity_use_case),
) -> ApiResponse[EntityResponse]:
    """Get one of the caller's entities."""
    return ApiResponse(data=await use_case.execute(entity_id, current_user))


@router.put("/{entity_id}", response_model=ApiResponse[EntityResponse])
async def update_entity(
    request: UpdateEntityRequest,
    current_user: AuthenticatedUser = Depends(get_current_user),
    entity_id: UUID = Depends(parse_entity_id),
    use_case: UpdateEntityUseCase = Depends(get_update_entity_use_case),
) -> ApiResponse[EntityResponse]:
    """Update title, description, status, priority and/or tags."""
    return ApiResponse(data=await use_case.execute(entity_id, request, current_user))


@router.delete("/{entity_id}", response_model=ApiResponse[None])
async def delete_entity(
    current_user: AuthenticatedUser = Depends(get_current_user),
    entity_id: UUID = Depends(parse_entity_id),
    use_case: DeleteEntityUseCase = Depends(get_delete_entity_use_case),
) -> ApiResponse[None]:
    """Delete one of the caller's entities."""
    await use_case.execute(entity_id, current_user)
    return ApiResponse(message="Entity deleted successfully")
