"""Dependency providers shared by routes that read entities."""

from fastapi import Depends

from app.db.session import SessionFactory, get_session_factory
from app.features.entities.repositories import (
    EntityRepository,
    SqlAlchemyEntityRepository,
)


def get_entity_repository(
    get_db_session: SessionFactory = Depends(get_session_factory),
) -> EntityRepository:
    """Dependency injection for the entity store."""
    return SqlAlchemyEntityRepository(get_db_session)
