"""Entity data transfer objects."""

from .entity_dto import (
    CreateEntityRequest,
    EntityMetrics,
    EntityResponse,
    EntitySortBy,
    ListEntitiesRequest,
    ListEntitiesResponse,
    Pagination,
    UpdateEntityRequest,
)

__all__ = [
    "CreateEntityRequest",
    "UpdateEntityRequest",
    "ListEntitiesRequest",
    "ListEntitiesResponse",
    "EntityMetrics",
    "EntityResponse",
    "EntitySortBy",
    "Pagination",
]
