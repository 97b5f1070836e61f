"""Analytics API routes."""

from fastapi import APIRouter

from app.features.analytics.routes.analytics import router as analytics_router

router = APIRouter(prefix="/analytics", tags=["analytics"])

router.include_router(analytics_router)
