"""Analytics data transfer objects."""

from .analytics_dto import DashboardSummary, PerformanceBucket, PerformancePeriod

__all__ = ["DashboardSummary", "PerformanceBucket", "PerformancePeriod"]
