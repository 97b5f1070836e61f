"""Main FastAPI application entry point."""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from slowapi.middleware import SlowAPIASGIMiddleware

from app.core.errors import register_exception_handlers
from app.core.middleware import request_context_middleware
from app.core.rate_limit import build_limiter
from app.core.schemas import ApiResponse
from app.core.settings import Settings, get_settings
from app.db.session import close_db_session, create_tables, init_db_session
from app.features.analytics.router import router as analytics_router
from app.features.auth.router import router as auth_router
from app.features.entities.router import router as entities_router
from app.features.insights.router import router as insights_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan context manager.
    Handles startup and shutdown events.
    """
    # Startup
    settings = get_settings()
    logger.info("Starting %s v%s", settings.app_name, settings.app_version)

    init_db_session()
    await create_tables()
    logger.info("Database session initialized.")

    yield

    # Shutdown
    logger.info("Shutting down application")
    await close_db_session()
    logger.info("Database engine disposed.")


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = settings or get_settings()

    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description="Multi-tenant entity tracking API with analytics and AI insights",
        lifespan=lifespan,
    )

    # Rate limiting runs inside CORS so preflight requests are never counted
    app.state.limiter = build_limiter(settings)
    app.add_middleware(SlowAPIASGIMiddleware)

    # Add CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.middleware("http")(request_context_middleware)

    register_exception_handlers(app)

    # Include routers
    app.include_router(auth_router, prefix="/api")
    app.include_router(entities_router, prefix="/api")
    app.include_router(analytics_router, prefix="/api")
    app.include_router(insights_router, prefix="/api")

    @app.get("/health", response_model=ApiResponse[None])
    async def health_check() -> ApiResponse[None]:  # pyright: ignore[reportUnusedFunction]
        """Health check endpoint."""
        return ApiResponse(message="Server is running")

    return app


# Create the app instance
app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "app.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_level="info" if not settings.debug else "debug",
    )
