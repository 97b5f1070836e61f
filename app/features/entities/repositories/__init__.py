"""Entity store."""

from .entity_repository import EntityRepository, SqlAlchemyEntityRepository

__all__ = ["EntityRepository", "SqlAlchemyEntityRepository"]
