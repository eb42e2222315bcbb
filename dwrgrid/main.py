"""FastAPI application entry point.

Startup: configure logging, build the shared id counter, register the example
handlers and mount the remoting and health routers.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from dwrgrid.config.settings import GridSettings
from dwrgrid.handlers.basic_read import BasicReadExample, DwrProxyExample
from dwrgrid.handlers.crud import CrudExample
from dwrgrid.logging_config import configure_logging
from dwrgrid.middleware.error_handler import register_error_handlers
from dwrgrid.middleware.request_id import RequestIdMiddleware
from dwrgrid.remoting.registry import RemoteRegistry
from dwrgrid.routers.health import create_health_router
from dwrgrid.routers.remoting import create_remoting_router
from dwrgrid.services.counter import IdCounter

logger = logging.getLogger(__name__)


def build_registry(settings: GridSettings, counter: IdCounter) -> RemoteRegistry:
    """Register every example interface; id-minting handlers share *counter*."""
    limits = {
        "max_prefix_length": settings.max_prefix_length,
        "min_rows": settings.min_row_count,
        "max_rows": settings.max_row_count,
    }
    registry = RemoteRegistry()
    registry.register(BasicReadExample(**limits))
    registry.register(DwrProxyExample(**limits))
    registry.register(CrudExample(counter, read_batch_size=settings.read_batch_size))
    return registry


def create_app(settings: GridSettings | None = None) -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = settings or GridSettings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        configure_logging(settings.log_level)
        logger.info(
            "Grid service started on port %d with interfaces %s",
            settings.port,
            sorted(registry.list_interfaces()),
        )
        yield
        logger.info("Grid service shut down")

    counter = IdCounter(start=settings.counter_start)
    registry = build_registry(settings, counter)

    app = FastAPI(
        title="DWR Grid Examples",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.registry = registry
    app.state.counter = counter

    register_error_handlers(app)
    app.add_middleware(RequestIdMiddleware)

    app.include_router(create_health_router(registry=registry, counter=counter))
    app.include_router(
        create_remoting_router(registry=registry, prefix=settings.remoting_prefix)
    )

    return app


def run() -> None:
    """Serve the application with uvicorn using GridSettings host/port."""
    import uvicorn

    settings = GridSettings()
    uvicorn.run(
        create_app(settings),
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
