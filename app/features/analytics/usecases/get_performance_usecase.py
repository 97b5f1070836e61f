"""Use case for the bucketed performance series."""

from fastapi import HTTPException, status

from app.core.schemas import AuthenticatedUser
from app.features.analytics.dtos import PerformanceBucket, PerformancePeriod
from app.features.analytics.services.aggregation import (
    InvalidDateError,
    aggregate_performance,
    parse_date_bound,
)
from app.features.entities.repositories import EntityRepository


class GetPerformanceUseCaseImpl:
    """Implementation of the get performance use case."""

    def __init__(self, entity_repository: EntityRepository):
        self.entity_repository = entity_repository

    async def execute(
        self,
        current_user: AuthenticatedUser,
        start_date: str | None,
        end_date: str | None,
        period: PerformancePeriod = PerformancePeriod.DAILY,
    ) -> list[PerformanceBucket]:
        """Bucket the caller's entities created within [start_date, end_date].

        Args:
            current_user: The authenticated owner
            start_date: ISO date or datetime, inclusive
            end_date: ISO date or datetime, inclusive
            period: Bucket size

        Returns:
            Non-empty buckets sorted ascending by date key

        Raises:
            HTTPException: 400 if either date cannot be parsed
        """
        try:
            start = parse_date_bound(start_date)
            end = parse_date_bound(end_date, end_of_day=True)
        except InvalidDateError:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Invalid date format",
            )

        entities = await self.entity_repository.list_all_for_owner(
            current_user.user_id, created_from=start, created_to=end
        )
        return aggregate_performance(entities, period)
