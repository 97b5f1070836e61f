"""Insight data transfer objects."""

import uuid
from datetime import datetime

from pydantic import Field

from app.core.schemas import CamelModel, RequestModel
from app.features.insights.models import InsightType


class GenerateInsightRequest(RequestModel):
    """Request model for generating an insight from a prompt."""

    prompt: str = Field(min_length=1)
    entity_id: uuid.UUID | None = None


class GenerateInsightResponse(CamelModel):
    """Response model for a generated insight."""

    insight: str
    confidence: float
    model: str


class ListInsightsRequest(CamelModel):
    """Request model for listing insights."""

    limit: int = Field(default=20, ge=1, le=100)
    type: InsightType | None = None


class InsightResponse(CamelModel):
    """Response model for a stored insight."""

    id: uuid.UUID
    user_id: uuid.UUID
    entity_id: uuid.UUID | None = None
    title: str
    content: str
    type: InsightType
    confidence: float | None = Field(default=None, ge=0, le=1)
    created_at: datetime
