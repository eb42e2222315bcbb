"""Health endpoint.

- GET /health - service status, registered interfaces, next id to be minted
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from fastapi import APIRouter

from dwrgrid.models.responses import ApiResponse

if TYPE_CHECKING:
    from dwrgrid.remoting.registry import RemoteRegistry
    from dwrgrid.services.counter import IdCounter


def create_health_router(
    *,
    registry: "RemoteRegistry | None" = None,
    counter: "IdCounter | None" = None,
) -> APIRouter:
    """Factory that creates the health router with injected dependencies."""

    health_router = APIRouter(tags=["health"])

    @health_router.get("/health")
    async def health() -> dict:
        """Service health check."""
        data: dict[str, Any] = {
            "status": "healthy",
            "interfaces": len(registry.list_interfaces()) if registry else 0,
        }
        if counter is not None:
            data["next_id"] = counter.peek()

        return ApiResponse(success=True, data=data).model_dump()

    return health_router
