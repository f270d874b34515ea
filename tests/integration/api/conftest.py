"""Fixtures for API integration tests using aiohttp TestClient."""

from __future__ import annotations

from typing import Any

import pytest
from aiohttp.test_utils import TestClient, TestServer

from app.config import Settings
from app.main import create_app


@pytest.fixture
async def api_client(settings: Settings) -> Any:
    """aiohttp TestClient over the real app (routes + middleware) with test settings.

    Usage:
        async def test_health(api_client):
            resp = await api_client.get("/api/health")
            assert resp.status == 200
    """
    app = create_app(settings)
    client = TestClient(TestServer(app))
    await client.start_server()
    yield client
    await client.close()
