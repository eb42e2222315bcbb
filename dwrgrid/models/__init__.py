"""Public models for the grid service."""

from dwrgrid.models.records import Employee, GridModel, GridRow
from dwrgrid.models.responses import ApiResponse, JsonReaderResponse, RowsResponse

__all__ = [
    "ApiResponse",
    "Employee",
    "GridModel",
    "GridRow",
    "JsonReaderResponse",
    "RowsResponse",
]
