"""Insight store."""

from .insight_repository import InsightRepository, SqlAlchemyInsightRepository

__all__ = ["InsightRepository", "SqlAlchemyInsightRepository"]
