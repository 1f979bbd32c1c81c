"""Tests for health endpoints.

Covers:
- GET /health returns 200 with status and version
- GET /health/ready returns 503 when the organization management service is unavailable
"""

from unittest.mock import AsyncMock, patch

import httpx
import pytest
from httpx import ASGITransport, AsyncClient

from app.main import app


@pytest.fixture
async def client():
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac


@pytest.fixture
def upstream():
    mock = AsyncMock()
    app.state.http_client = mock
    yield mock
    del app.state.http_client


class TestHealthEndpoint:
    async def test_health_returns_correct_response(self, client):
        with patch("app.routers.health.importlib.metadata.version", return_value="0.1.0"):
            response = await client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "ok", "version": "0.1.0"}
        assert "x-request-id" in response.headers


class TestHealthReadyEndpoint:
    async def test_health_ready_returns_200_when_upstream_answers(self, client, upstream):
        upstream.get = AsyncMock(return_value=httpx.Response(200))

        response = await client.get("/health/ready")

        assert response.status_code == 200
        assert response.json()["status"] == "ok"

    async def test_health_ready_returns_503_when_upstream_unreachable(self, client, upstream):
        upstream.get = AsyncMock(side_effect=httpx.ConnectError("connection refused"))

        response = await client.get("/health/ready")

        assert response.status_code == 503
        body = response.json()
        assert body["status"] == "unavailable"
        assert "detail" in body

    async def test_health_ready_returns_503_on_upstream_server_error(self, client, upstream):
        upstream.get = AsyncMock(return_value=httpx.Response(502))

        response = await client.get("/health/ready")

        assert response.status_code == 503
