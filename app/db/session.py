"""SQLAlchemy async session management.

Provides the declarative base shared by every feature's models and the
session factory the repositories open their units of work with.
"""

from collections.abc import AsyncGenerator, Callable
from contextlib import AbstractAsyncContextManager, asynccontextmanager

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from app.core.settings import get_settings

SessionFactory = Callable[[], AbstractAsyncContextManager[AsyncSession]]


class Base(DeclarativeBase):
    """Base class for all database models."""

    pass


# Global engine and session factory
_engine: AsyncEngine | None = None
_async_session_maker: async_sessionmaker[AsyncSession] | None = None


def init_db_session() -> None:
    """Initialize the database engine and session factory."""
    global _engine, _async_session_maker

    if _async_session_maker is not None:
        return  # Already initialized

    settings = get_settings()

    _engine = create_async_engine(
        settings.database_url,
        echo=settings.debug,
        pool_pre_ping=True,
    )

    _async_session_maker = async_sessionmaker(
        bind=_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )


@asynccontextmanager
async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """Get a database session."""
    if _async_session_maker is None:
        init_db_session()

    if _async_session_maker is None:
        raise RuntimeError("Failed to initialize database session")

    async with _async_session_maker() as session:
        try:
            yield session
        finally:
            await session.close()


def get_session_factory() -> SessionFactory:
    """FastAPI dependency returning the session factory used by repositories."""
    return get_db_session


async def create_tables() -> None:
    """Create all tables registered on the declarative base."""
    # Importing the models registers them with Base.metadata
    from app.features.auth import models as _auth_models  # noqa: F401
    from app.features.entities import models as _entity_models  # noqa: F401
    from app.features.insights import models as _insight_models  # noqa: F401

    if _engine is None:
        init_db_session()
    assert _engine is not None

    async with _engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def close_db_session() -> None:
    """Dispose of the engine and forget the session factory."""
    global _engine, _async_session_maker

    if _engine is not None:
        await _engine.dispose()
    _engine = None
    _async_session_maker = None
