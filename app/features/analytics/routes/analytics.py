"""Analytics route handlers."""

from typing import Protocol

from fastapi import APIRouter, Depends, Query

from app.core.authentication import get_current_user
from app.core.schemas import ApiResponse, AuthenticatedUser
from app.features.analytics.dtos import (
    DashboardSummary,
    PerformanceBucket,
    PerformancePeriod,
)
from app.features.analytics.usecases import (
    GetDashboardUseCaseImpl,
    GetPerformanceUseCaseImpl,
)
from app.features.entities.dependencies import get_entity_repository
from app.features.entities.repositories import EntityRepository


class GetDashboardUseCase(Protocol):
    """Protocol for the get dashboard use case."""

    async def execute(self, current_user: AuthenticatedUser) -> DashboardSummary:
        """Summarize the caller's entities."""
        ...


class GetPerformanceUseCase(Protocol):
    """Protocol for the get performance use case."""

    async def execute(
        self,
        current_user: AuthenticatedUser,
        start_date: str | None,
        end_date: str | None,
        period: PerformancePeriod = PerformancePeriod.DAILY,
    ) -> list[PerformanceBucket]:
        """Bucket the caller's entities by creation date."""
        ...


async def get_dashboard_use_case(
    entity_repository: EntityRepository = Depends(get_entity_repository),
) -> GetDashboardUseCase:
    """Dependency injection for the get dashboard use case."""
    return GetDashboardUseCaseImpl(entity_repository=entity_repository)


async def get_performance_use_case(
    entity_repository: EntityRepository = Depends(get_entity_repository),
) -> GetPerformanceUseCase:
    """Dependency injection for the get performance use case."""
    return GetPerformanceUseCaseImpl(entity_repository=entity_repository)


router = APIRouter()


@router.get("/dashboard", response_model=ApiResponse[DashboardSummary])
async def get_dashboard(
    current_user: AuthenticatedUser = Depends(get_current_user),
    use_case: GetDashboardUseCase = Depends(get_dashboard_use_case),
) -> ApiResponse[DashboardSummary]:
    """Get dashboard statistics for the caller."""
    return ApiResponse(data=await use_case.execute(current_user))


@router.get("/performance", response_model=ApiResponse[list[PerformanceBucket]])
async def get_performance(
    current_user: AuthenticatedUser = Depends(get_current_user),
    start_date: str | None = Query(None, alias="startDate"),
    end_date: str | None = Query(None, alias="endDate"),
    period: PerformancePeriod = Query(PerformancePeriod.DAILY),
    use_case: GetPerformanceUseCase = Depends(get_performance_use_case),
) -> ApiResponse[list[PerformanceBucket]]:
    """Get performance trends bucketed daily, weekly (Sunday start) or monthly.

    Buckets without entities are omitted.
    """
    buckets = await use_case.execute(current_user, start_date, end_date, period)
    return ApiResponse(data=buckets)
