"""Synthetic grid record generation.

Inputs are never rejected: the prefix is truncated and the row count is
clamped into range before any records are built.

Key behaviors:
- ``None`` prefix is treated as ``""``; longer prefixes keep their first
  ``max_prefix_length`` characters
- row count is forced into ``[min_rows, max_rows]``
- names are ``prefix + "FirstName" + n`` / ``prefix + "LastName" + n``
- with an ``id_source`` each record's id is minted from it and ``n`` is that
  id; otherwise ``n`` and the id are the record's position
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from dwrgrid.models.records import Employee, GridRow

if TYPE_CHECKING:
    from dwrgrid.services.counter import IdCounter

DEFAULT_MAX_PREFIX_LENGTH = 10
DEFAULT_MIN_ROWS = 1
DEFAULT_MAX_ROWS = 1000


def normalize_prefix(
    prefix: str | None,
    max_length: int = DEFAULT_MAX_PREFIX_LENGTH,
) -> str:
    """Return *prefix* with ``None`` mapped to ``""`` and cut to *max_length*."""
    if prefix is None:
        return ""
    return prefix[:max_length]


def clamp_row_count(
    count: int,
    min_rows: int = DEFAULT_MIN_ROWS,
    max_rows: int = DEFAULT_MAX_ROWS,
) -> int:
    """Force *count* into the inclusive range ``[min_rows, max_rows]``."""
    return min(max(count, min_rows), max_rows)


def generate_employees(
    prefix: str | None,
    count: int,
    *,
    id_source: "IdCounter | None" = None,
    max_prefix_length: int = DEFAULT_MAX_PREFIX_LENGTH,
    min_rows: int = DEFAULT_MIN_ROWS,
    max_rows: int = DEFAULT_MAX_ROWS,
) -> list[Employee]:
    """Build ``count`` dummy employees after normalising both inputs.

    Parameters
    ----------
    prefix:
        Prepended to every generated name.
    count:
        Number of records wanted; clamped, never rejected.
    id_source:
        Shared counter to mint ids from.  When ``None`` the id is the
        record's position.
    """
    prefix = normalize_prefix(prefix, max_prefix_length)
    count = clamp_row_count(count, min_rows, max_rows)

    employees: list[Employee] = []
    for index in range(count):
        record_id = id_source.next() if id_source is not None else index
        employees.append(
            Employee(
                id=record_id,
                first_name=f"{prefix}FirstName{record_id}",
                last_name=f"{prefix}LastName{record_id}",
            )
        )
    return employees


def generate_rows(
    prefix: str | None,
    count: int,
    *,
    max_prefix_length: int = DEFAULT_MAX_PREFIX_LENGTH,
    min_rows: int = DEFAULT_MIN_ROWS,
    max_rows: int = DEFAULT_MAX_ROWS,
) -> list[GridRow]:
    """Build ``count`` id-less rows; names are suffixed with the row index."""
    prefix = normalize_prefix(prefix, max_prefix_length)
    count = clamp_row_count(count, min_rows, max_rows)
    return [
        GridRow(
            first_name=f"{prefix}FirstName{index}",
            last_name=f"{prefix}LastName{index}",
        )
        for index in range(count)
    ]
