"""
Tests for app-level endpoints and error rendering.
"""

import pytest


class TestHealth:
    """Tests for health check endpoints."""

    @pytest.mark.asyncio
    async def test_health(self, client):
        response = await client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "healthy"}

    @pytest.mark.asyncio
    async def test_root(self, client):
        response = await client.get("/")

        assert response.status_code == 200
        assert response.json()["status"] == "running"


class TestErrorBodies:
    """Every error is a flat JSON object with success false."""

    @pytest.mark.asyncio
    async def test_unknown_route(self, client):
        response = await client.get("/api/v1/forms/no-such-form")

        assert response.status_code == 404
        body = response.json()
        assert body["success"] is False
        assert body["error"] == "HTTP_ERROR"

    @pytest.mark.asyncio
    async def test_invalid_json_body_is_400(self, client):
        response = await client.post(
            "/api/v1/forms/health-form",
            content=b"{not json",
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 400
        assert response.json()["error"] == "VALIDATION_FAILED"
