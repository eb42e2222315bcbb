"""Remote call endpoints.

- POST {prefix}/call/{interface}/{method} - invoke a registered handler method
- GET  {prefix}/interfaces - list registered interfaces and their methods

The call endpoint is a plain ``def`` so FastAPI dispatches each call on its
worker thread pool; handlers sharing the id counter must tolerate that.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from fastapi import APIRouter
from pydantic import BaseModel

from dwrgrid.models.requests import RemoteCallRequest
from dwrgrid.models.responses import ApiResponse

if TYPE_CHECKING:
    from dwrgrid.remoting.registry import RemoteRegistry

logger = logging.getLogger(__name__)


def create_remoting_router(
    *,
    registry: "RemoteRegistry",
    prefix: str = "/dwr",
) -> APIRouter:
    """Factory that creates the remoting router with injected dependencies.

    Parameters
    ----------
    registry:
        RemoteRegistry holding every callable interface.
    prefix:
        Path prefix for all remoting routes.
    """
    remoting_router = APIRouter(prefix=prefix, tags=["remoting"])

    @remoting_router.post("/call/{interface}/{method}")
    def call(
        interface: str,
        method: str,
        body: RemoteCallRequest | None = None,
    ) -> dict:
        """Invoke ``interface.method`` and return its envelope as JSON."""
        args = body.args if body is not None else []
        result = registry.invoke(interface, method, args)
        if isinstance(result, BaseModel):
            return result.model_dump(by_alias=True)
        return result

    @remoting_router.get("/interfaces")
    async def interfaces() -> dict:
        """List the interfaces a client can call."""
        return ApiResponse(
            success=True,
            data={"interfaces": registry.list_interfaces()},
        ).model_dump()

    return remoting_router
