"""Insight data transfer objects."""

from .insight_dto import (
    GenerateInsightRequest,
    GenerateInsightResponse,
    InsightResponse,
    ListInsightsRequest,
)

__all__ = [
    "GenerateInsightRequest",
    "GenerateInsightResponse",
    "InsightResponse",
    "ListInsightsRequest",
]
