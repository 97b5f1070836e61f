"""Use case for creating an entity."""

import logging

from app.core.schemas import AuthenticatedUser
from app.features.entities.dtos import CreateEntityRequest, EntityResponse
from app.features.entities.models import Entity, EntityPriority, EntityStatus
from app.features.entities.repositories import EntityRepository

logger = logging.getLogger(__name__)


class CreateEntityUseCaseImpl:
    """Implementation of the create entity use case."""

    def __init__(self, entity_repository: EntityRepository):
        self.entity_repository = entity_repository

    async def execute(
        self, request: CreateEntityRequest, current_user: AuthenticatedUser
    ) -> EntityResponse:
        """Persist a new entity owned by the caller.

        Status starts as active, priority defaults to medium and all metrics
        start at zero.
        """
        entity = Entity(
            user_id=current_user.user_id,
            title=request.title,
            description=request.description,
            category=request.category,
            status=EntityStatus.ACTIVE,
            priority=request.priority or EntityPriority.MEDIUM,
            tags=list(request.tags or []),
            views=0,
            engagement=0.0,
            score=0.0,
        )
        entity = await self.entity_repository.create(entity)
        logger.debug("Created entity %s for user %s", entity.id, current_user.user_id)
        return EntityResponse.model_validate(entity)
