"""Tests for the /health endpoint."""

from __future__ import annotations

from fastapi.testclient import TestClient

from catalogdesk.storage import StoreHandle
from catalogdesk.web.app import create_app


class TestHealthEndpoint:
    def test_healthy_response(self, tmp_path):
        store = StoreHandle(str(tmp_path / "test.db"))
        store.initialize()
        client = TestClient(create_app(store))

        resp = client.get("/health")
        assert resp.status_code == 200
        data = resp.json()
        assert data["status"] == "healthy"
        assert data["database"] == "ok"
        store.close()

    def test_unhealthy_when_store_not_initialized(self, tmp_path):
        store = StoreHandle(str(tmp_path / "test.db"))
        client = TestClient(create_app(store), raise_server_exceptions=False)

        resp = client.get("/health")
        assert resp.status_code == 503
        data = resp.json()
        assert data["status"] == "unhealthy"
        assert data["database"] == "error"
        assert "detail" in data

    def test_health_not_under_api_prefix(self, tmp_path):
        store = StoreHandle(str(tmp_path / "test.db"))
        store.initialize()
        client = TestClient(create_app(store))

        # /health should work at root
        assert client.get("/health").status_code == 200
        # /api/v1/health should NOT exist
        resp = client.get("/api/v1/health")
        assert resp.status_code != 200
        store.close()
