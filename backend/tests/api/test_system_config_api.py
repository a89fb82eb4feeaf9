"""Tests for the configuration snapshot and health endpoints."""

from __future__ import annotations

import pytest
from httpx import AsyncClient

pytestmark = pytest.mark.asyncio


class TestSystemConfig:
    async def test_entries(self, client: AsyncClient):
        resp = await client.get("/api/v1/system-config")
        assert resp.status_code == 200
        data = resp.json()
        assert data["rate_schedule_version"] == "2024"
        assert data["entries"]["SMP_PRICE"]["value"] == "120.0"
        assert data["entries"]["QUOTATION_VALID_DAYS"]["value"] == "30"
        assert "SMP" in data["entries"]["SMP_PRICE"]["description"]


class TestHealth:
    async def test_health(self, client: AsyncClient):
        resp = await client.get("/health")
        assert resp.status_code == 200
        data = resp.json()
        assert data["status"] == "ok"
        assert data["financing_schedule"] == "2024"

    async def test_request_id_propagated(self, client: AsyncClient):
        resp = await client.get("/health", headers={"x-request-id": "abc12345"})
        assert resp.headers["x-request-id"] == "abc12345"

    async def test_request_id_generated(self, client: AsyncClient):
        resp = await client.get("/health")
        assert len(resp.headers["x-request-id"]) == 8
