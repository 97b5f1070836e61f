"""Use case for the analytics dashboard summary."""

from collections.abc import Callable
from datetime import UTC, datetime

from app.core.schemas import AuthenticatedUser
from app.features.analytics.dtos import DashboardSummary
from app.features.analytics.services.aggregation import summarize_dashboard
from app.features.entities.repositories import EntityRepository


def _utcnow() -> datetime:
    return datetime.now(UTC)


class GetDashboardUseCaseImpl:
    """Implementation of the get dashboard use case."""

    def __init__(
        self,
        entity_repository: EntityRepository,
        clock: Callable[[], datetime] = _utcnow,
    ):
        """Initialize the use case with dependencies.

        Args:
            entity_repository: Store for entities
            clock: Source of the current time, decides which months the trend compares
        """
        self.entity_repository = entity_repository
        self.clock = clock

    async def execute(self, current_user: AuthenticatedUser) -> DashboardSummary:
        """Summarize all of the caller's entities.

        Every entity of the user is loaded; there is no upper bound.
        """
        entities = await self.entity_repository.list_all_for_owner(current_user.user_id)
        return summarize_dashboard(entities, self.clock())
