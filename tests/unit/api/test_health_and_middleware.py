"""Unit tests for the health router and request logging middleware."""

from unittest.mock import patch

from fastapi.testclient import TestClient

from src.product_api.core.services.database.db_session import DbSessionService


class TestHealthRouter:
    """Liveness and readiness probes."""

    def test_health(self, client: TestClient):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "healthy", "service": "product-api"}

    def test_ready_when_database_is_up(self, client: TestClient):
        response = client.get("/health/ready")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "ready"
        assert body["checks"]["database"] == {"status": "healthy", "type": "sqlite"}

    def test_not_ready_when_database_is_down(
        self, client: TestClient, database_service: DbSessionService
    ):
        with patch.object(database_service, "health_check", return_value=False):
            response = client.get("/health/ready")

        assert response.status_code == 503
        assert response.json()["status"] == "not_ready"

    def test_database_health_reports_pool(self, client: TestClient):
        response = client.get("/health/database")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "healthy"
        assert "pool" in body

    def test_database_health_error(
        self, client: TestClient, database_service: DbSessionService
    ):
        with patch.object(
            database_service, "get_pool_status", side_effect=RuntimeError("pool gone")
        ):
            response = client.get("/health/database")

        assert response.status_code == 503
        assert response.json()["error_type"] == "RuntimeError"


class TestRequestLogging:
    """Correlation ids on every response."""

    def test_request_id_is_echoed(self, client: TestClient):
        response = client.get("/products", headers={"X-Request-ID": "abc-123"})

        assert response.headers["X-Request-ID"] == "abc-123"

    def test_request_id_is_generated(self, client: TestClient):
        response = client.get("/products")

        assert response.headers["X-Request-ID"]

    def test_not_found_responses_carry_request_id(self, client: TestClient):
        response = client.get("/products/1", headers={"X-Request-ID": "nf-1"})

        assert response.status_code == 404
        assert response.headers["X-Request-ID"] == "nf-1"
