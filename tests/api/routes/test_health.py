"""Tests for health check routes"""
import time

from fastapi import FastAPI
from fastapi.testclient import TestClient

from instantpdf.api.routes.health import create_health_router


def _client(**kwargs) -> TestClient:
    app = FastAPI()
    app.include_router(create_health_router(start_time=time.time(), **kwargs))
    return TestClient(app)


class TestHealthRoutes:
    """Test health check and metrics endpoints"""

    def test_health_check_returns_healthy(self):
        """Should return healthy status"""
        response = _client().get("/api/v1/ledger/health")
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert "uptime" in data
        assert data["stores"] == {}

    def test_health_reports_store_status(self):
        """Should include the load status of each store"""
        client = _client(store_status_getter=lambda: {"history": "corrupt"})
        data = client.get("/api/v1/ledger/health").json()
        assert data["stores"] == {"history": "corrupt"}

    def test_metrics_endpoint(self):
        """Should return Prometheus metrics"""
        response = _client().get("/metrics")
        assert response.status_code == 200
        assert "text/plain" in response.headers["content-type"]
