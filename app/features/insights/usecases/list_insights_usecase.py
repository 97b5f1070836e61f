"""Use case for listing insights."""

from app.core.schemas import AuthenticatedUser
from app.features.insights.dtos import InsightResponse, ListInsightsRequest
from app.features.insights.repositories import InsightRepository


class ListInsightsUseCaseImpl:
    """Implementation of the list insights use case."""

    def __init__(self, insight_repository: InsightRepository):
        self.insight_repository = insight_repository

    async def execute(
        self, request: ListInsightsRequest, current_user: AuthenticatedUser
    ) -> list[InsightResponse]:
        """Return the caller's most recent insights, newest first."""
        insights = await self.insight_repository.list_for_owner(
            current_user.user_id, limit=request.limit, insight_type=request.type
        )
        return [
            InsightResponse.model_validate(insight, from_attributes=True)
            for insight in insights
        ]
