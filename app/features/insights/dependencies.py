"""Dependency providers for the insight routes."""

from fastapi import Depends

from app.core.settings import Settings, get_settings
from app.db.session import SessionFactory, get_session_factory
from app.features.insights.repositories import (
    InsightRepository,
    SqlAlchemyInsightRepository,
)
from app.features.insights.services.langchain_insight_generator import (
    LangChainInsightGenerator,
)
from app.features.insights.services.protocols import InsightGenerator

_insight_generator: LangChainInsightGenerator | None = None


def get_insight_repository(
    get_db_session: SessionFactory = Depends(get_session_factory),
) -> InsightRepository:
    """Dependency injection for the insight store."""
    return SqlAlchemyInsightRepository(get_db_session)


def get_insight_generator(
    settings: Settings = Depends(get_settings),
) -> InsightGenerator:
    """Dependency injection for the text-generation provider (lazily built)."""
    global _insight_generator
    if _insight_generator is None:
        _insight_generator = LangChainInsightGenerator(settings)
    return _insight_generator
