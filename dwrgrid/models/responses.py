"""Response envelope models.

Grid reads and writes are wrapped in ``JsonReaderResponse`` so the client
reader can be configured once:
{ objectsToConvertToRecords: [T, ...] | None, success: bool }

The simplified example uses ``RowsResponse`` ({ rows: [T, ...] }), the root
name from the Ext documentation. An interface uses one of the two, never both.

Service endpoints that are not grid data (health, errors, interface listing)
use ``ApiResponse``: { success, data, error, meta }.
"""

from __future__ import annotations

from typing import Generic, Sequence, TypeVar

from pydantic import BaseModel

from dwrgrid.models.records import GridModel

T = TypeVar("T")


class JsonReaderResponse(GridModel, Generic[T]):
    """Envelope consumed by an Ext.data.JsonReader with
    ``root: 'objectsToConvertToRecords'``.

    ``success`` is true iff a (possibly empty) list of records was supplied.
    """

    objects_to_convert_to_records: list[T] | None = None
    success: bool = False

    @classmethod
    def wrap(cls, records: Sequence[T] | None) -> "JsonReaderResponse[T]":
        """Build a populated envelope, or the empty one when *records* is None."""
        if records is None:
            return cls(objects_to_convert_to_records=None, success=False)
        return cls(objects_to_convert_to_records=list(records), success=True)


class RowsResponse(GridModel, Generic[T]):
    """Envelope for a reader configured with ``root: 'rows'``."""

    rows: list[T]


class ApiResponse(BaseModel, Generic[T]):
    """JSON envelope for non-grid API responses."""

    success: bool
    data: T | None = None
    error: str | None = None
    meta: dict | None = None
