"""Middleware package - error hierarchy and request ID."""

from dwrgrid.middleware.error_handler import (
    ArgumentConversionError,
    GridServiceError,
    RemoteMethodNotFoundError,
    register_error_handlers,
)
from dwrgrid.middleware.request_id import RequestIdMiddleware

__all__ = [
    "ArgumentConversionError",
    "GridServiceError",
    "RemoteMethodNotFoundError",
    "RequestIdMiddleware",
    "register_error_handlers",
]
