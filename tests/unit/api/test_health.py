"""Tests for the health check endpoints."""

from fastapi.testclient import TestClient

from src.users_service.core.services import DbSessionService


class TestHealthEndpoints:
    def test_liveness(self, client: TestClient):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "healthy", "service": "users"}

    def test_readiness(self, client: TestClient):
        response = client.get("/health/ready")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "ready"
        assert body["checks"]["database"] == {"status": "healthy", "type": "sqlite"}

    def test_readiness_fails_when_database_is_down(
        self, client: TestClient, database_service: DbSessionService, monkeypatch
    ):
        """An unreachable database makes the service not ready."""
        monkeypatch.setattr(database_service, "health_check", lambda: False)

        response = client.get("/health/ready")

        assert response.status_code == 503
        assert response.json()["status"] == "not_ready"

    def test_database_health_reports_pool(self, client: TestClient):
        response = client.get("/health/database")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "healthy"
        assert body["type"] == "sqlite"
        assert body["pool"]["class"] == "StaticPool"
