"""
Tests for error handling.

Covers the handle_errors decorator on handler operations and the
application-level exception handlers that keep framework errors inside the
JSON envelope.
"""

from dataclasses import dataclass

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from catalog.exceptions import AppException, DatabaseError
from catalog.schemas.result import OperationResult
from catalog.utils.error_handler import handle_errors, register_exception_handlers


class GoneError(AppException):
    http_status = 410


@dataclass(frozen=True)
class Messages:
    fetch_error: str = "Error fetching thing"


class Thing:
    messages = Messages()

    @handle_errors("fetch_error")
    async def get(self, fail: bool) -> OperationResult:
        if fail:
            raise RuntimeError("connection reset")
        return OperationResult.ok({"id": 1}, "Success")


class TestHandleErrorsDecorator:
    @pytest.mark.asyncio
    async def test_passes_result_through(self):
        result = await Thing().get(False)

        assert result.status_code == 200

    @pytest.mark.asyncio
    async def test_converts_exception_to_500(self):
        result = await Thing().get(True)

        assert result.status_code == 500
        assert result.message == "Error fetching thing"
        assert result.data == []

    def test_preserves_function_name(self):
        assert Thing.get.__name__ == "get"


@pytest.fixture
def client():
    app = FastAPI()
    register_exception_handlers(app)

    @app.get("/items/{item_id}")
    async def get_item(item_id: int):
        if item_id == 1:
            raise GoneError("Item is gone")
        if item_id == 2:
            raise DatabaseError("Database unavailable", {"retry": True})
        raise RuntimeError("unexpected")

    return TestClient(app, raise_server_exceptions=False)


class TestExceptionHandlers:
    def test_app_exception(self, client):
        response = client.get("/items/1")

        assert response.status_code == 410
        assert response.json() == {
            "httpCode": 410,
            "status": False,
            "message": "Item is gone",
            "data": None,
        }

    def test_app_exception_with_data(self, client):
        response = client.get("/items/2")

        assert response.status_code == 500
        assert response.json()["message"] == "Database unavailable"
        assert response.json()["data"] == {"retry": True}

    def test_request_validation(self, client):
        response = client.get("/items/abc")

        assert response.status_code == 422
        assert response.json()["data"] == {
            "item_id": ["The item id field must be an integer."]
        }

    def test_unknown_route(self, client):
        response = client.get("/nowhere")

        assert response.status_code == 404
        assert response.json()["httpCode"] == 404
        assert response.json()["status"] is False

    def test_method_not_allowed(self, client):
        response = client.delete("/items/1")

        assert response.status_code == 405
        assert response.json()["message"] == "Method Not Allowed"
        assert "GET" in response.headers["allow"]

    def test_unhandled_exception(self, client):
        response = client.get("/items/3")

        assert response.status_code == 500
        assert response.json() == {
            "httpCode": 500,
            "status": False,
            "message": "Internal server error",
            "data": [],
        }
