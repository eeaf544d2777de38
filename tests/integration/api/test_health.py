"""Tests for health check endpoints."""

import pytest
from httpx import ASGITransport, AsyncClient

from infrastructure.store.memory_storage import InMemorySnapshotStorage
from infrastructure.store.profile_store import ProfileStore


class TestHealthEndpoint:
    """Tests for the basic health check endpoint."""

    @pytest.mark.asyncio
    async def test_health_is_healthy(self, client: AsyncClient) -> None:
        response = await client.get("/health")
        data = response.json()

        assert response.status_code == 200
        assert data["status"] == "healthy"
        assert data["version"] == "1.0.0"
        assert data["environment"] == "development"
        assert data["timestamp"]

    @pytest.mark.asyncio
    async def test_health_skips_store_details(self, client: AsyncClient) -> None:
        """Basic check does not touch the profile store."""
        data = (await client.get("/health")).json()

        assert data["storage"] is None
        assert data["profile_count"] is None


class TestDetailedHealthEndpoint:
    """Tests for the detailed health check endpoint."""

    @pytest.mark.asyncio
    async def test_reports_store_status_and_count(self, client: AsyncClient) -> None:
        response = await client.get("/health/detailed")
        data = response.json()

        assert response.status_code == 200
        assert data["status"] == "healthy"
        assert data["storage"] == "healthy"
        assert data["profile_count"] == 4

    @pytest.mark.asyncio
    async def test_count_follows_deletes(self, client: AsyncClient) -> None:
        await client.delete("/api/users/1")

        response = await client.get("/health/detailed")

        assert response.json()["profile_count"] == 3

    @pytest.mark.asyncio
    async def test_uninitialized_store_is_degraded(self) -> None:
        from main import create_app

        app = create_app(profile_store=ProfileStore(InMemorySnapshotStorage()))
        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://test") as c:
            data = (await c.get("/health/detailed")).json()

        assert data["status"] == "degraded"
        assert data["storage"] == "not initialized"
        assert data["profile_count"] is None
