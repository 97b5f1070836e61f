"""Tests for the per-client request rate limit."""

from collections.abc import AsyncGenerator

import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from app.core.settings import Settings
from app.main import create_app


@pytest_asyncio.fixture
async def small_limit_client(
    test_settings: Settings,
) -> AsyncGenerator[AsyncClient, None]:
    """Client for an app allowing three requests per minute."""
    settings = test_settings.model_copy(update={"rate_limit": "3/minute"})
    transport = ASGITransport(app=create_app(settings), raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


async def test_request_over_default_limit_is_rejected(client: AsyncClient):
    """The 101st request within a minute gets a 429 envelope."""
    for _ in range(100):
        response = await client.get("/health")
        assert response.status_code == 200

    response = await client.get("/health")

    assert response.status_code == 429
    assert response.json() == {
        "success": False,
        "error": "Too many requests from this IP, please try again later",
        "statusCode": 429,
    }
    assert response.headers["X-RateLimit-Limit"] == "100"
    assert response.headers["X-RateLimit-Remaining"] == "0"


async def test_options_requests_are_not_limited(small_limit_client: AsyncClient):
    """OPTIONS requests neither count nor get rejected."""
    for _ in range(5):
        response = await small_limit_client.options("/health")
        assert response.status_code != 429

    for _ in range(3):
        assert (await small_limit_client.get("/health")).status_code == 200

    response = await small_limit_client.options("/health")
    assert response.status_code != 429


async def test_limit_is_shared_across_routes(small_limit_client: AsyncClient):
    """Every route draws from the same per-client budget."""
    await small_limit_client.get("/health")
    await small_limit_client.get("/api/entities")
    await small_limit_client.post("/api/auth/login", json={})

    response = await small_limit_client.get("/api/analytics/dashboard")

    assert response.status_code == 429


async def test_successful_responses_carry_window_headers(
    small_limit_client: AsyncClient,
):
    response = await small_limit_client.get("/health")

    assert response.headers["X-RateLimit-Limit"] == "3"
    assert response.headers["X-RateLimit-Remaining"] == "2"


async def test_limit_can_be_disabled(test_settings: Settings):
    settings = test_settings.model_copy(
        update={"rate_limit": "1/minute", "rate_limit_enabled": False}
    )
    transport = ASGITransport(app=create_app(settings))
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        statuses = [(await ac.get("/health")).status_code for _ in range(3)]

    assert statuses == [200, 200, 200]
