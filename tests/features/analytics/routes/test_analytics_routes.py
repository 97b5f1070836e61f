"""HTTP tests for the /api/analytics routes."""

from datetime import UTC, datetime

import pytest
import pytest_asyncio
from httpx import AsyncClient

from app.core.authentication import CredentialService
from tests.utils.database import insert_entity, insert_user
from tests.utils.http import bearer_headers, signup_headers


@pytest_asyncio.fixture
async def owner(session_factory):
    return await insert_user(session_factory, email="owner@example.com")


async def test_dashboard_empty(client: AsyncClient):
    """A new account has an all-zero dashboard."""
    headers = await signup_headers(client)

    response = await client.get("/api/analytics/dashboard", headers=headers)

    assert response.status_code == 200
    assert response.json()["data"] == {
        "totalEntities": 0,
        "activeEntities": 0,
        "avgEngagement": 0,
        "totalViews": 0,
        "trend": 0,
    }


async def test_dashboard_counts_only_own_entities(
    client: AsyncClient, session_factory, credential_service: CredentialService, owner
):
    """Totals cover the caller's entities and nobody else's."""
    other = await insert_user(session_factory, email="other@example.com")
    await insert_entity(session_factory, owner, views=10, engagement=2.0)
    await insert_entity(session_factory, owner, views=30, engagement=3.0)
    await insert_entity(session_factory, other, views=1000, engagement=9.0)

    response = await client.get(
        "/api/analytics/dashboard", headers=bearer_headers(credential_service, owner)
    )

    data = response.json()["data"]
    assert data["totalEntities"] == 2
    assert data["activeEntities"] == 2
    assert data["totalViews"] == 40
    assert data["avgEngagement"] == pytest.approx(2.5)


async def test_performance_daily(
    client: AsyncClient, session_factory, credential_service: CredentialService, owner
):
    """Daily buckets within the range, with a date-only end that is inclusive."""
    await insert_entity(
        session_factory, owner, views=1, created_at=datetime(2024, 5, 1, 9, tzinfo=UTC)
    )
    await insert_entity(
        session_factory, owner, views=2, created_at=datetime(2024, 5, 1, 18, tzinfo=UTC)
    )
    await insert_entity(
        session_factory, owner, views=4, created_at=datetime(2024, 5, 3, 23, tzinfo=UTC)
    )
    await insert_entity(
        session_factory, owner, views=8, created_at=datetime(2024, 5, 4, 0, tzinfo=UTC)
    )

    response = await client.get(
        "/api/analytics/performance",
        params={"startDate": "2024-05-01", "endDate": "2024-05-03"},
        headers=bearer_headers(credential_service, owner),
    )

    assert response.status_code == 200
    assert response.json()["data"] == [
        {"date": "2024-05-01", "entities": 2, "views": 3, "engagement": 0},
        {"date": "2024-05-03", "entities": 1, "views": 4, "engagement": 0},
    ]


async def test_performance_weekly(
    client: AsyncClient, session_factory, credential_service: CredentialService, owner
):
    """Weekly buckets are keyed by the Sunday that starts the week."""
    await insert_entity(
        session_factory, owner, created_at=datetime(2024, 5, 15, tzinfo=UTC)
    )
    await insert_entity(
        session_factory, owner, created_at=datetime(2024, 5, 18, tzinfo=UTC)
    )
    await insert_entity(
        session_factory, owner, created_at=datetime(2024, 5, 19, tzinfo=UTC)
    )

    response = await client.get(
        "/api/analytics/performance",
        params={
            "startDate": "2024-05-01",
            "endDate": "2024-05-31",
            "period": "weekly",
        },
        headers=bearer_headers(credential_service, owner),
    )

    buckets = response.json()["data"]
    assert [(b["date"], b["entities"]) for b in buckets] == [
        ("2024-05-12", 2),
        ("2024-05-19", 1),
    ]


async def test_performance_requires_valid_dates(client: AsyncClient):
    """Missing or unparseable dates are a 400."""
    headers = await signup_headers(client)

    missing = await client.get("/api/analytics/performance", headers=headers)
    garbage = await client.get(
        "/api/analytics/performance",
        params={"startDate": "soon", "endDate": "later"},
        headers=headers,
    )

    assert missing.status_code == 400
    assert missing.json()["error"] == "Invalid date format"
    assert garbage.status_code == 400


async def test_performance_rejects_unknown_period(client: AsyncClient):
    headers = await signup_headers(client)

    response = await client.get(
        "/api/analytics/performance",
        params={"startDate": "2024-05-01", "endDate": "2024-05-31", "period": "hourly"},
        headers=headers,
    )

    assert response.status_code == 400


async def test_analytics_require_authentication(client: AsyncClient):
    response = await client.get("/api/analytics/dashboard")

    assert response.status_code == 401
