"""Analytics use cases."""

from .get_dashboard_usecase import GetDashboardUseCaseImpl
from .get_performance_usecase import GetPerformanceUseCaseImpl

__all__ = ["GetDashboardUseCaseImpl", "GetPerformanceUseCaseImpl"]
