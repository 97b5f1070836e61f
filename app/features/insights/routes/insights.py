"""Insight route handlers."""

from typing import Protocol

from fastapi import APIRouter, Depends, Query

from app.core.authentication import get_current_user
from app.core.schemas import ApiResponse, AuthenticatedUser
from app.core.settings import Settings, get_settings
from app.features.entities.dependencies import get_entity_repository
from app.features.entities.repositories import EntityRepository
from app.features.insights.dependencies import (
    get_insight_generator,
    get_insight_repository,
)
from app.features.insights.dtos import (
    GenerateInsightRequest,
    GenerateInsightResponse,
    InsightResponse,
    ListInsightsRequest,
)
from app.features.insights.models import InsightType
from app.features.insights.repositories import InsightRepository
from app.features.insights.services.protocols import InsightGenerator
from app.features.insights.usecases import (
    GenerateInsightUseCaseImpl,
    ListInsightsUseCaseImpl,
)


class GenerateInsightUseCase(Protocol):
    """Protocol for the generate insight use case."""

    async def execute(
        self, request: GenerateInsightRequest, current_user: AuthenticatedUser
    ) -> GenerateInsightResponse:
        """Generate and store an insight."""
        ...


class ListInsightsUseCase(Protocol):
    """Protocol for the list insights use case."""

    async def execute(
        self, request: ListInsightsRequest, current_user: AuthenticatedUser
    ) -> list[InsightResponse]:
        """List the caller's insights."""
        ...


async def get_generate_insight_use_case(
    insight_repository: InsightRepository = Depends(get_insight_repository),
    entity_repository: EntityRepository = Depends(get_entity_repository),
    insight_generator: InsightGenerator = Depends(get_insight_generator),
    settings: Settings = Depends(get_settings),
) -> GenerateInsightUseCase:
    """Dependency injection for the generate insight use case."""
    return GenerateInsightUseCaseImpl(
        insight_repository=insight_repository,
        entity_repository=entity_repository,
        insight_generator=insight_generator,
        confidence=settings.insight_default_confidence,
    )


async def get_list_insights_use_case(
    insight_repository: InsightRepository = Depends(get_insight_repository),
) -> ListInsightsUseCase:
    """Dependency injection for the list insights use case."""
    return ListInsightsUseCaseImpl(insight_repository=insight_repository)


router = APIRouter()


@router.post("/generate", response_model=ApiResponse[GenerateInsightResponse])
async def generate_insight(
    request: GenerateInsightRequest,
    current_user: AuthenticatedUser = Depends(get_current_user),
    use_case: GenerateInsightUseCase = Depends(get_generate_insight_use_case),
) -> ApiResponse[GenerateInsightResponse]:
    """Generate an insight from a free-form prompt.

    The reply is stored as a `generated` insight, optionally attached to one
    of the caller's entities.
    """
    return ApiResponse(data=await use_case.execute(request, current_user))


@router.get("", response_model=ApiResponse[list[InsightResponse]])
async def list_insights(
    limit: int = Query(20, ge=1, le=100),
    insight_type: InsightType | None = Query(None, alias="type"),
    current_user: AuthenticatedUser = Depends(get_current_user),
    use_case: ListInsightsUseCase = Depends(get_list_insights_use_case),
) -> ApiResponse[list[InsightResponse]]:
    """List the caller's insights, newest first."""
    request = ListInsightsRequest(limit=limit, type=insight_type)
    return ApiResponse(data=await use_case.execute(request, current_user))
