"""Tests for health check endpoints."""

import pytest
from httpx import AsyncClient

from core.config import settings


class TestHealthEndpoint:
    """Tests for the liveness endpoint."""

    @pytest.mark.asyncio
    async def test_health_is_healthy(self, client: AsyncClient) -> None:
        response = await client.get("/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["version"] == settings.app_version
        assert data["environment"] == settings.app_env
        assert data["database"] is None

    @pytest.mark.asyncio
    async def test_health_carries_request_id(self, client: AsyncClient) -> None:
        response = await client.get("/health", headers={"X-Request-ID": "lb-7f3a"})

        assert response.headers["x-request-id"] == "lb-7f3a"


class TestDetailedHealthEndpoint:
    """Tests for the readiness endpoint."""

    @pytest.mark.asyncio
    async def test_reports_database_and_profile_count(self, api_client: AsyncClient) -> None:
        """Detailed health pings the database and counts stored profiles."""
        await api_client.post(
            "/api/profiles",
            json={"name": "John Doe", "email": "john.doe@example.com"},
        )

        response = await api_client.get("/health/detailed")
        data = response.json()

        assert response.status_code == 200
        assert data["status"] == "healthy"
        assert data["database"] == "healthy"
        assert data["profile_count"] == 1
