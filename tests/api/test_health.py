"""
Test suite for health and root endpoints.

System role: Verification of health check HTTP API
"""

from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from docsearch.api.deps import get_vector_store_dependency
from docsearch.api.main import create_app
from docsearch.core.exceptions import VectorStoreError


@pytest.fixture
def mock_vector_store() -> MagicMock:
    store = MagicMock()
    store.ping = AsyncMock(return_value=None)
    return store


@pytest.fixture
def app(mock_vector_store: MagicMock) -> FastAPI:
    app = create_app()
    app.dependency_overrides[get_vector_store_dependency] = lambda: mock_vector_store
    return app


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    return TestClient(app)


def test_root(client: TestClient) -> None:
    response = client.get("/")
    assert response.status_code == 200
    assert response.json() == {"message": "RAG Document Search API is running"}


def test_health_check(client: TestClient) -> None:
    response = client.get("/api/v1/health")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy", "message": "Server Healthy"}


def test_health_check_vector_store(client: TestClient) -> None:
    response = client.get("/api/v1/health/vector-store")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy", "message": "Vector store accessible"}


def test_health_check_vector_store_down(client: TestClient, mock_vector_store: MagicMock) -> None:
    mock_vector_store.ping.side_effect = VectorStoreError("Database unreachable", operation="ping")

    response = client.get("/api/v1/health/vector-store")

    assert response.status_code == 503
    assert response.json() == {
        "success": False,
        "error": "Vector store unavailable",
        "detail": "Database unreachable",
    }


def test_correlation_id_echoed(client: TestClient) -> None:
    response = client.get("/api/v1/health", headers={"X-Correlation-ID": "req-123"})
    assert response.headers["X-Correlation-ID"] == "req-123"


def test_correlation_id_generated(client: TestClient) -> None:
    response = client.get("/api/v1/health")
    assert response.headers["X-Correlation-ID"]


def test_routers_mounted_under_configured_prefix(monkeypatch: pytest.MonkeyPatch, mock_vector_store: MagicMock) -> None:
    """Should serve the API under API_PREFIX."""
    monkeypatch.setenv("API_PREFIX", "/internal")
    app = create_app()
    app.dependency_overrides[get_vector_store_dependency] = lambda: mock_vector_store
    client = TestClient(app)

    assert client.get("/internal/health").status_code == 200
    assert client.get("/api/v1/health").status_code == 404
