"""Tests for the health check endpoint."""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError

from catalog.settings import app_settings
from tests.mocks.redis_mocks import create_mock_redis_connection


@pytest.fixture
def app():
    """
    Create a minimal FastAPI app with only the health endpoint.

    Returns:
        FastAPI: FastAPI application instance.
    """
    from catalog.api.http.health import router

    test_app = FastAPI()
    test_app.include_router(router)
    return test_app


@pytest.fixture
def client(app):
    return TestClient(app)


@pytest.fixture
def healthy_engine():
    mock_engine = MagicMock()
    mock_engine.connect.return_value.__aenter__.return_value = AsyncMock()
    return mock_engine


def test_health_all_services_healthy(client, healthy_engine, monkeypatch):
    monkeypatch.setattr(app_settings, "CACHE_REDIS_ENABLED", True)
    mock_redis = create_mock_redis_connection()

    with (
        patch("catalog.api.http.health.engine", healthy_engine),
        patch(
            "catalog.api.http.health.get_redis_connection",
            AsyncMock(return_value=mock_redis),
        ),
    ):
        response = client.get("/health")

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "healthy"
    assert body["database"] == "healthy"
    assert body["redis"] == "healthy"
    assert "memory_cache_size" in body["cache"]


def test_health_redis_disabled(client, healthy_engine, monkeypatch):
    monkeypatch.setattr(app_settings, "CACHE_REDIS_ENABLED", False)

    with patch("catalog.api.http.health.engine", healthy_engine):
        response = client.get("/health")

    assert response.status_code == 200
    assert response.json()["redis"] == "disabled"


def test_health_database_down(client, monkeypatch):
    monkeypatch.setattr(app_settings, "CACHE_REDIS_ENABLED", False)
    mock_engine = MagicMock()
    mock_engine.connect.side_effect = OperationalError(
        "SELECT 1", {}, Exception("down")
    )

    with patch("catalog.api.http.health.engine", mock_engine):
        response = client.get("/health")

    assert response.status_code == 503
    assert response.json()["status"] == "unhealthy"
    assert response.json()["database"] == "unhealthy"


def test_health_redis_unavailable(client, healthy_engine, monkeypatch):
    monkeypatch.setattr(app_settings, "CACHE_REDIS_ENABLED", True)

    with (
        patch("catalog.api.http.health.engine", healthy_engine),
        patch(
            "catalog.api.http.health.get_redis_connection",
            AsyncMock(return_value=None),
        ),
    ):
        response = client.get("/health")

    assert response.status_code == 503
    assert response.json()["redis"] == "unhealthy"
