"""Insight API routes."""

from fastapi import APIRouter

from app.features.insights.routes.insights import router as insights_router

router = APIRouter(tags=["insights"])

router.include_router(insights_router, prefix="/insights")
