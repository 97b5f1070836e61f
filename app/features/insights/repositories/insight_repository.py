"""SQLAlchemy implementation of the insight store."""

import uuid
from typing import Protocol

from sqlalchemy import select

from app.db.session import SessionFactory
from app.features.insights.models import Insight, InsightType


class InsightRepository(Protocol):
    """Protocol for the insight store."""

    async def create(self, insight: Insight) -> Insight: ...

    async def list_for_owner(
        self,
        owner_id: uuid.UUID,
        limit: int = 20,
        insight_type: InsightType | None = None,
    ) -> list[Insight]: ...


class SqlAlchemyInsightRepository:
    """Insight store backed by the `insights` table."""

    def __init__(self, get_db_session: SessionFactory):
        self.get_db_session = get_db_session

    async def create(self, insight: Insight) -> Insight:
        async with self.get_db_session() as session:
            session.add(insight)
            await session.commit()
            await session.refresh(insight)
            return insight

    async def list_for_owner(
        self,
        owner_id: uuid.UUID,
        limit: int = 20,
        insight_type: InsightType | None = None,
    ) -> list[Insight]:
        """Newest first, optionally restricted to one type."""
        query = select(Insight).where(Insight.user_id == owner_id)
        if insight_type is not None:
            query = query.where(Insight.type == insight_type)
        query = query.order_by(Insight.created_at.desc(), Insight.id).limit(limit)

        async with self.get_db_session() as session:
            result = await session.execute(query)
            return list(result.scalars().all())
