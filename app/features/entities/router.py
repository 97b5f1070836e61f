"""Entity API routes."""

from fastapi import APIRouter

from app.features.entities.routes.entities import router as entities_router

router = APIRouter(tags=["entities"])

router.include_router(entities_router, prefix="/entities")
