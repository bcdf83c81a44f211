"""Tests for application wiring: routes, middlewares and metrics."""

import pytest

from catalog import application
from catalog.routing import collect_subrouters


def test_collect_subrouters_registers_all_endpoints():
    paths = {route.path for route in collect_subrouters().routes}

    assert {
        "/api/authors",
        "/api/authors/{author_id}",
        "/api/authors/{author_id}/books",
        "/api/books",
        "/api/books/{book_id}",
        "/health",
        "/metrics",
    } <= paths


def test_application_factory_returns_new_app():
    assert application() is not application()


@pytest.mark.asyncio
async def test_correlation_id_header(client):
    response = await client.get("/api/authors", headers={"X-Correlation-ID": "abc12345"})

    assert response.headers["X-Correlation-ID"] == "abc12345"


@pytest.mark.asyncio
async def test_correlation_id_generated(client):
    response = await client.get("/api/books")

    assert len(response.headers["X-Correlation-ID"]) == 8


@pytest.mark.asyncio
async def test_unknown_route_is_enveloped(client):
    response = await client.get("/api/unknown")

    assert response.status_code == 404
    assert response.json() == {
        "httpCode": 404,
        "status": False,
        "message": "Not Found",
        "data": None,
    }


@pytest.mark.asyncio
async def test_method_not_allowed_is_enveloped(client):
    response = await client.delete("/api/authors")

    assert response.status_code == 405
    assert response.json()["httpCode"] == 405


@pytest.mark.asyncio
async def test_metrics_expose_cache_and_http_counters(client):
    await client.get("/api/authors")
    await client.get("/api/authors")

    response = await client.get("/metrics")

    assert response.status_code == 200
    assert 'catalog_cache_hits_total{tier="memory"}' in response.text
    assert "catalog_cache_misses_total" in response.text
    assert 'endpoint="/api/authors"' in response.text
