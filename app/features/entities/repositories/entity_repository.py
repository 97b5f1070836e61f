"""SQLAlchemy implementation of the entity store.

Every read, update and delete is scoped by owner: an entity that exists but
belongs to someone else is indistinguishable from one that does not exist.
"""

import uuid
from datetime import datetime
from typing import Any, Protocol

from sqlalchemy import Select, delete, func, select

from app.db.session import SessionFactory
from app.db.types import utcnow
from app.features.entities.dtos import EntitySortBy
from app.features.entities.models import Entity, EntityStatus

_SORT_COLUMNS = {
    EntitySortBy.NEWEST: Entity.created_at,
    EntitySortBy.VIEWS: Entity.views,
    EntitySortBy.ENGAGEMENT: Entity.engagement,
}

UPDATABLE_FIELDS = frozenset({"title", "description", "status", "priority", "tags"})


class EntityRepository(Protocol):
    """Protocol for the entity store."""

    async def list_for_owner(
        self,
        owner_id: uuid.UUID,
        *,
        category: str | None = None,
        status: EntityStatus | None = None,
        sort_by: EntitySortBy = EntitySortBy.NEWEST,
        offset: int = 0,
        limit: int = 10,
    ) -> tuple[list[Entity], int]: ...

    async def list_all_for_owner(
        self,
        owner_id: uuid.UUID,
        created_from: datetime | None = None,
        created_to: datetime | None = None,
    ) -> list[Entity]: ...

    async def create(self, entity: Entity) -> Entity: ...

    async def get_for_owner(
        self, owner_id: uuid.UUID, entity_id: uuid.UUID
    ) -> Entity | None: ...

    async def update_for_owner(
        self, owner_id: uuid.UUID, entity_id: uuid.UUID, changes: dict[str, Any]
    ) -> Entity | None: ...

    async def delete_for_owner(
        self, owner_id: uuid.UUID, entity_id: uuid.UUID
    ) -> bool: ...


class SqlAlchemyEntityRepository:
    """Entity store backed by the `entities` table."""

    def __init__(self, get_db_session: SessionFactory):
        self.get_db_session = get_db_session

    @staticmethod
    def _owner_query(
        owner_id: uuid.UUID,
        category: str | None = None,
        status: EntityStatus | None = None,
    ) -> Select[tuple[Entity]]:
        query = select(Entity).where(Entity.user_id == owner_id)
        if category:
            query = query.where(Entity.category == category)
        if status:
            query = query.where(Entity.status == status)
        return query

    async def list_for_owner(
        self,
        owner_id: uuid.UUID,
        *,
        category: str | None = None,
        status: EntityStatus | None = None,
        sort_by: EntitySortBy = EntitySortBy.NEWEST,
        offset: int = 0,
        limit: int = 10,
    ) -> tuple[list[Entity], int]:
        """Return one page of the owner's entities and the filtered total."""
        query = self._owner_query(owner_id, category, status)
        count_query = select(func.count()).select_from(query.subquery())

        sort_column = _SORT_COLUMNS[sort_by]
        page_query = (
            query.order_by(sort_column.desc(), Entity.created_at.desc(), Entity.id)
            .offset(offset)
            .limit(limit)
        )

        async with self.get_db_session() as session:
            rows = (await session.execute(page_query)).scalars().all()
            total = (await session.execute(count_query)).scalar() or 0
            return list(rows), total

    async def list_all_for_owner(
        self,
        owner_id: uuid.UUID,
        created_from: datetime | None = None,
        created_to: datetime | None = None,
    ) -> list[Entity]:
        """Return every entity of the owner, optionally within a creation window.

        Both bounds are inclusive. The result is unbounded in size.
        """
        query = self._owner_query(owner_id)
        if created_from is not None:
            query = query.where(Entity.created_at >= created_from)
        if created_to is not None:
            query = query.where(Entity.created_at <= created_to)

        async with self.get_db_session() as session:
            result = await session.execute(query.order_by(Entity.created_at))
            return list(result.scalars().all())

    async def create(self, entity: Entity) -> Entity:
        async with self.get_db_session() as session:
            session.add(entity)
            await session.commit()
            await session.refresh(entity)
            return entity

    async def get_for_owner(
        self, owner_id: uuid.UUID, entity_id: uuid.UUID
    ) -> Entity | None:
        async with self.get_db_session() as session:
            result = await session.execute(
                select(Entity).where(Entity.id == entity_id, Entity.user_id == owner_id)
            )
            return result.scalar_one_or_none()

    async def update_for_owner(
        self, owner_id: uuid.UUID, entity_id: uuid.UUID, changes: dict[str, Any]
    ) -> Entity | None:
        """Apply `changes` to the owner's entity and refresh `updated_at`.

        Concurrent updates are last-write-wins.
        """
        unknown = set(changes) - UPDATABLE_FIELDS
        if unknown:
            raise ValueError(f"Fields cannot be updated: {', '.join(sorted(unknown))}")

        async with self.get_db_session() as session:
            result = await session.execute(
                select(Entity).where(Entity.id == entity_id, Entity.user_id == owner_id)
            )
            entity = result.scalar_one_or_none()
            if entity is None:
                return None

            for field, value in changes.items():
                setattr(entity, field, value)
            entity.updated_at = utcnow()

            await session.commit()
            await session.refresh(entity)
            return entity

    async def delete_for_owner(self, owner_id: uuid.UUID, entity_id: uuid.UUID) -> bool:
        """Delete the owner's entity. Returns False when nothing matched."""
        async with self.get_db_session() as session:
            result = await session.execute(
                delete(Entity).where(Entity.id == entity_id, Entity.user_id == owner_id)
            )
            await session.commit()
            return (result.rowcount or 0) > 0
