"""Insight use cases."""

from .generate_insight_usecase import GenerateInsightUseCaseImpl
from .list_insights_usecase import ListInsightsUseCaseImpl

__all__ = ["GenerateInsightUseCaseImpl", "ListInsightsUseCaseImpl"]
