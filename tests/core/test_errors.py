"""Tests for the response envelope and centralized error handling."""

import pytest
import pytest_asyncio
from fastapi import FastAPI, HTTPException
from httpx import ASGITransport, AsyncClient
from pydantic import BaseModel

from app.core.errors import register_exception_handlers


def _app_with_failing_routes() -> FastAPI:
    app = FastAPI()
    register_exception_handlers(app)

    class Payload(BaseModel):
        count: int

    @app.get("/boom")
    async def boom() -> None:  # pyright: ignore[reportUnusedFunction]
        raise RuntimeError("database exploded")

    @app.get("/teapot")
    async def teapot() -> None:  # pyright: ignore[reportUnusedFunction]
        raise HTTPException(status_code=418, detail="I'm a teapot")

    @app.post("/payload")
    async def payload(body: Payload) -> Payload:  # pyright: ignore[reportUnusedFunction]
        return body

    return app


@pytest_asyncio.fixture
async def bare_client():
    transport = ASGITransport(app=_app_with_failing_routes(), raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


async def test_health_check(client: AsyncClient):
    """Health check answers without authentication."""
    response = await client.get("/health")

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["message"] == "Server is running"


async def test_responses_carry_request_id(client: AsyncClient):
    """Every response is stamped with a request id."""
    response = await client.get("/health")

    assert response.headers.get("X-Request-Id")


async def test_unmatched_route_returns_error_envelope(client: AsyncClient):
    """Unknown paths produce the standard 404 envelope."""
    response = await client.get("/api/does-not-exist")

    assert response.status_code == 404
    assert response.json() == {
        "success": False,
        "error": "Not Found",
        "statusCode": 404,
    }


async def test_http_exception_keeps_status_and_detail(bare_client: AsyncClient):
    """HTTPExceptions are rendered with their own status and detail."""
    response = await bare_client.get("/teapot")

    assert response.status_code == 418
    assert response.json() == {
        "success": False,
        "error": "I'm a teapot",
        "statusCode": 418,
    }


async def test_validation_error_is_400(bare_client: AsyncClient):
    """Body validation failures become 400 with a readable message."""
    response = await bare_client.post("/payload", json={"count": "many"})

    assert response.status_code == 400
    body = response.json()
    assert body["success"] is False
    assert body["statusCode"] == 400
    assert body["error"].startswith("count:")


async def test_unhandled_exception_is_generic_500(bare_client: AsyncClient):
    """Unclassified failures do not leak their message."""
    response = await bare_client.get("/boom")

    assert response.status_code == 500
    assert response.json() == {
        "success": False,
        "error": "Internal Server Error",
        "statusCode": 500,
    }
