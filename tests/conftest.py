"""Pytest configuration and shared fixtures for all tests.

This module provides function-scoped fixtures for:
- An in-memory SQLite database with every table created
- The session factory handed to repositories
- Test settings and the credential service built from them
- An HTTP client bound to the application with test dependencies
"""

from collections.abc import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlalchemy.pool import StaticPool

from app.core.authentication import CredentialService, PasswordHasherImpl
from app.core.settings import Settings, get_settings
from app.db.session import Base, SessionFactory, get_session_factory
from app.features.auth.dependencies import get_identity_verifier
from app.features.insights.dependencies import get_insight_generator
from app.main import create_app
from tests.utils.database import create_session_factory
from tests.utils.fakes import FakeIdentityVerifier, FakeInsightGenerator


@pytest.fixture(scope="function")
def test_settings() -> Settings:
    """Provide settings isolated from the developer's environment."""
    return Settings(
        secret_key="test-secret-key",
        database_url_override="sqlite+aiosqlite://",
        google_client_id="test-client-id",
        insight_provider_api_key="test-provider-key",
        insight_model="test/model",
        _env_file=None,  # pyright: ignore[reportCallIssue]
    )


@pytest_asyncio.fixture(scope="function")
async def async_engine() -> AsyncGenerator[AsyncEngine, None]:
    """Provide a fresh in-memory database for each test.

    StaticPool keeps a single connection so every session sees the same data.
    """
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest.fixture
def session_factory(async_engine: AsyncEngine) -> SessionFactory:
    """Provide the session factory repositories open their sessions with."""
    return create_session_factory(async_engine)


@pytest.fixture
def password_hasher() -> PasswordHasherImpl:
    """Provide password hasher instance for tests."""
    return PasswordHasherImpl()


@pytest.fixture
def credential_service(test_settings: Settings) -> CredentialService:
    """Provide a credential service signing with the test secret."""
    return CredentialService(test_settings)


@pytest.fixture
def identity_verifier() -> FakeIdentityVerifier:
    """Provide a Google identity verifier that never leaves the process."""
    return FakeIdentityVerifier()


@pytest.fixture
def insight_generator() -> FakeInsightGenerator:
    """Provide a text-generation provider with a canned reply."""
    return FakeInsightGenerator()


@pytest_asyncio.fixture
async def client(
    test_settings: Settings,
    session_factory: SessionFactory,
    identity_verifier: FakeIdentityVerifier,
    insight_generator: FakeInsightGenerator,
) -> AsyncGenerator[AsyncClient, None]:
    """Provide an HTTP client for the application.

    The lifespan is not run; the database comes from `async_engine`.
    """
    app = create_app(test_settings)
    app.dependency_overrides[get_settings] = lambda: test_settings
    app.dependency_overrides[get_session_factory] = lambda: session_factory
    app.dependency_overrides[get_identity_verifier] = lambda: identity_verifier
    app.dependency_overrides[get_insight_generator] = lambda: insight_generator

    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
