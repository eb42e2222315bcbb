"""Unit tests for the error hierarchy and FastAPI exception handlers."""

from __future__ import annotations

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from pydantic import BaseModel

from dwrgrid.middleware.error_handler import (
    ArgumentConversionError,
    GridServiceError,
    RemoteMethodNotFoundError,
    register_error_handlers,
)


# ---------------------------------------------------------------------------
# Test app fixture
# ---------------------------------------------------------------------------


class _Payload(BaseModel):
    name: str
    age: int


def _make_app() -> FastAPI:
    """Build a minimal FastAPI app with error handlers registered."""
    app = FastAPI()
    register_error_handlers(app)

    @app.get("/raise-base")
    async def _raise_base():
        raise GridServiceError()

    @app.get("/raise-not-found")
    async def _raise_not_found():
        raise RemoteMethodNotFoundError()

    @app.get("/raise-arguments")
    async def _raise_arguments():
        raise ArgumentConversionError("Bad call", arguments=[{"argument": "0"}])

    @app.get("/raise-custom-message")
    async def _raise_custom():
        raise RemoteMethodNotFoundError("Method 'X.y' not found")

    @app.get("/raise-unhandled")
    async def _raise_unhandled():
        raise RuntimeError("something unexpected")

    @app.post("/validate")
    async def _validate(payload: _Payload):
        return {"ok": True}

    return app


@pytest.fixture()
def error_client():
    return TestClient(_make_app(), raise_server_exceptions=False)


# ---------------------------------------------------------------------------
# Error hierarchy tests
# ---------------------------------------------------------------------------


class TestErrorHierarchy:
    def test_all_subclass_grid_service_error(self):
        for cls in (ArgumentConversionError, RemoteMethodNotFoundError):
            assert issubclass(cls, GridServiceError)

    def test_default_messages(self):
        assert GridServiceError().message == "Internal server error"
        assert ArgumentConversionError().message == "Invalid remote call arguments"
        assert RemoteMethodNotFoundError().message == "Remote method not found"

    def test_custom_message_override(self):
        err = RemoteMethodNotFoundError("Method 'X.y' not found")
        assert err.message == "Method 'X.y' not found"
        assert str(err) == "Method 'X.y' not found"

    def test_details_kwargs(self):
        err = ArgumentConversionError("Bad input", arguments=["0"])
        assert err.details == {"arguments": ["0"]}


# ---------------------------------------------------------------------------
# Exception handler tests
# ---------------------------------------------------------------------------


class TestExceptionHandlers:
    @pytest.mark.parametrize(
        "path,expected_status,expected_error",
        [
            ("/raise-base", 500, "Internal server error"),
            ("/raise-not-found", 404, "Remote method not found"),
        ],
    )
    def test_grid_error_envelope(self, error_client, path, expected_status, expected_error):
        resp = error_client.get(path)
        assert resp.status_code == expected_status
        body = resp.json()
        assert body["success"] is False
        assert body["data"] is None
        assert body["error"] == expected_error

    def test_custom_message_in_response(self, error_client):
        resp = error_client.get("/raise-custom-message")
        assert resp.status_code == 404
        assert resp.json()["error"] == "Method 'X.y' not found"

    def test_argument_error_with_details(self, error_client):
        resp = error_client.get("/raise-arguments")
        assert resp.status_code == 422
        body = resp.json()
        assert body["success"] is False
        assert body["error"] == "Bad call"
        assert body["meta"] == {"arguments": [{"argument": "0"}]}

    def test_pydantic_request_validation_error(self, error_client):
        resp = error_client.post("/validate", json={"name": 123})
        assert resp.status_code == 422
        body = resp.json()
        assert body["success"] is False
        assert body["error"] == "Validation error"
        assert len(body["meta"]["fields"]) > 0

    def test_unhandled_exception_returns_500(self, error_client):
        resp = error_client.get("/raise-unhandled")
        assert resp.status_code == 500
        body = resp.json()
        assert body["success"] is False
        assert body["error"] == "Internal server error"
        assert body["data"] is None
