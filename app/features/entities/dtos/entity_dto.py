"""Entity data transfer objects."""

import enum
import uuid
from datetime import datetime
from typing import Any

from pydantic import Field, model_validator

from app.core.schemas import CamelModel, RequestModel
from app.features.entities.models import EntityPriority, EntityStatus


class EntitySortBy(str, enum.Enum):
    """Sort keys for listing entities. All sort descending."""

    NEWEST = "newest"
    VIEWS = "views"
    ENGAGEMENT = "engagement"


class CreateEntityRequest(RequestModel):
    """Request model for creating an entity. The owner comes from the token."""

    title: str = Field(min_length=1)
    description: str | None = None
    category: str = Field(min_length=1)
    priority: EntityPriority | None = None
    tags: list[str] | None = None


class UpdateEntityRequest(RequestModel):
    """Request model for a partial entity update."""

    title: str | None = Field(default=None, min_length=1)
    description: str | None = None
    status: EntityStatus | None = None
    priority: EntityPriority | None = None
    tags: list[str] | None = None

    def changes(self) -> dict[str, Any]:
        """Fields the caller actually supplied, ignoring explicit nulls."""
        return self.model_dump(exclude_unset=True, exclude_none=True)


class ListEntitiesRequest(CamelModel):
    """Request model for listing entities with pagination and filtering."""

    page: int = Field(default=1, ge=1)
    limit: int = Field(default=10, ge=1, le=100)
    category: str | None = None
    status: EntityStatus | None = None
    sort_by: EntitySortBy = EntitySortBy.NEWEST

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit


class EntityMetrics(CamelModel):
    """Counters tracked on each entity."""

    views: int = Field(default=0, ge=0)
    engagement: float = Field(default=0, ge=0)
    score: float = 0


class EntityResponse(CamelModel):
    """Response model for a single entity."""

    id: uuid.UUID
    user_id: uuid.UUID
    title: str
    description: str | None = None
    category: str
    status: EntityStatus
    priority: EntityPriority
    tags: list[str]
    metrics: EntityMetrics
    created_at: datetime
    updated_at: datetime

    @model_validator(mode="before")
    @classmethod
    def _collect_metrics(cls, data: Any) -> Any:
        """Group the flat metric columns of an ORM row under `metrics`."""
        if isinstance(data, dict) or not hasattr(data, "views"):
            return data
        return {
            "id": data.id,
            "user_id": data.user_id,
            "title": data.title,
            "description": data.description,
            "category": data.category,
            "status": data.status,
            "priority": data.priority,
            "tags": list(data.tags or []),
            "metrics": {
                "views": data.views,
                "engagement": data.engagement,
                "score": data.score,
            },
            "created_at": data.created_at,
            "updated_at": data.updated_at,
        }


class Pagination(CamelModel):
    """Pagination metadata. `total` counts the filtered query, not all rows."""

    page: int
    limit: int
    total: int


class ListEntitiesResponse(CamelModel):
    """Response model for listing entities."""

    entities: list[EntityResponse]
    pagination: Pagination
