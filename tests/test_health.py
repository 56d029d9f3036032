"""Liveness endpoint and application wiring."""

# Third-party imports
import pytest

pytestmark = pytest.mark.asyncio


class TestHealthCheck:
    async def test_health_endpoint(self, client):
        resp = await client.get("/health")
        assert resp.status_code == 200
        data = resp.json()
        assert data["status"] == "healthy"
        assert data["database"] == "connected"

    async def test_openapi_served_outside_production(self, client):
        resp = await client.get("/api/openapi.json")
        assert resp.status_code == 200
        paths = resp.json()["paths"]
        assert "/api/issues" in paths
        assert "/api/technicians/{technician_id}/assign/{issue_id}" in paths
