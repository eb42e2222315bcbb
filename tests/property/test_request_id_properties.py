"""Property tests for request ID uniqueness.

Validates that every response carries a unique UUID4 in the X-Request-ID
header, and that a caller-supplied ID is echoed back.
"""

from __future__ import annotations

import uuid

from fastapi import FastAPI
from fastapi.responses import JSONResponse
from fastapi.testclient import TestClient
from hypothesis import given, settings
from hypothesis import strategies as st

from dwrgrid.logging_config import request_id_var
from dwrgrid.middleware.request_id import RequestIdMiddleware


# ---------------------------------------------------------------------------
# Minimal test app with RequestIdMiddleware
# ---------------------------------------------------------------------------

def _create_test_app() -> FastAPI:
    app = FastAPI()

    @app.get("/ping")
    async def ping() -> JSONResponse:
        return JSONResponse(status_code=200, content={"request_id": request_id_var.get()})

    app.add_middleware(RequestIdMiddleware)
    return app


_app = _create_test_app()
_client = TestClient(_app, raise_server_exceptions=False)


@settings(max_examples=50)
@given(n=st.integers(min_value=2, max_value=20))
def test_request_ids_are_unique_uuids(n: int) -> None:
    collected_ids: list[str] = []

    for _ in range(n):
        resp = _client.get("/ping")
        rid = resp.headers.get("X-Request-ID")
        assert rid is not None, "X-Request-ID header must be present"

        parsed = uuid.UUID(rid, version=4)
        assert str(parsed) == rid
        assert resp.json()["request_id"] == rid

        collected_ids.append(rid)

    assert len(set(collected_ids)) == len(collected_ids), "Request IDs must be unique"


@settings(max_examples=50)
@given(rid=st.text(min_size=1, max_size=36, alphabet="abcdefghijklmnopqrstuvwxyz0123456789-"))
def test_caller_request_id_propagated(rid: str) -> None:
    resp = _client.get("/ping", headers={"X-Request-ID": rid})

    assert resp.headers["X-Request-ID"] == rid
    assert resp.json()["request_id"] == rid
