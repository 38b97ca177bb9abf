"""Tests for the health check endpoint."""

import pytest
from httpx import ASGITransport, AsyncClient

from blog_console.main import app


@pytest.mark.asyncio
async def test_health_check_returns_200_without_credentials():
    """Health endpoint should answer anonymously with status, version and locale."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        response = await client.get("/api/v1/health")

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "healthy"
    assert "version" in data
    assert "environment" in data
    assert "locale" in data
