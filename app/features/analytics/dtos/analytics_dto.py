"""Analytics data transfer objects."""

import enum

from app.core.schemas import CamelModel


class PerformancePeriod(str, enum.Enum):
    """Bucket size for the performance series."""

    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"


class DashboardSummary(CamelModel):
    """Aggregate figures over all of a user's entities."""

    total_entities: int
    active_entities: int
    avg_engagement: float
    total_views: int
    trend: int


class PerformanceBucket(CamelModel):
    """Totals for the entities created within one date bucket."""

    date: str
    entities: int
    views: int
    engagement: float
