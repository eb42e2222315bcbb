"""Read-only grid examples.

``BasicReadExample`` answers with the ``objectsToConvertToRecords`` envelope
and position-based ids; ``DwrProxyExample`` is the simplified variant whose
reader uses ``root: 'rows'`` and whose rows carry no id.
"""

from __future__ import annotations

from dwrgrid.models.records import Employee, GridRow
from dwrgrid.models.responses import JsonReaderResponse, RowsResponse
from dwrgrid.remoting.base import RemoteProxy, remote_method
from dwrgrid.services.generator import (
    DEFAULT_MAX_PREFIX_LENGTH,
    DEFAULT_MAX_ROWS,
    DEFAULT_MIN_ROWS,
    generate_employees,
    generate_rows,
)


class _GeneratingProxy(RemoteProxy):
    """Holds the clamping limits shared by the generating examples."""

    def __init__(
        self,
        *,
        max_prefix_length: int = DEFAULT_MAX_PREFIX_LENGTH,
        min_rows: int = DEFAULT_MIN_ROWS,
        max_rows: int = DEFAULT_MAX_ROWS,
    ) -> None:
        self._limits = {
            "max_prefix_length": max_prefix_length,
            "min_rows": min_rows,
            "max_rows": max_rows,
        }


class BasicReadExample(_GeneratingProxy):
    """Grid read example answering with the JsonReaderResponse envelope."""

    name = "BasicReadExampleInterface"

    @remote_method("getGridData")
    def get_grid_data(
        self, base_string: str | None = None, number_of_rows: int = 0
    ) -> JsonReaderResponse[Employee]:
        """Generate ``number_of_rows`` employees named after ``base_string``.

        Both inputs are clamped (prefix to 10 characters, rows to 1–1000 by
        default) rather than rejected.
        """
        employees = generate_employees(base_string, number_of_rows, **self._limits)
        return JsonReaderResponse[Employee].wrap(employees)


class DwrProxyExample(_GeneratingProxy):
    """Simplified grid read example answering with ``{rows: [...]}``."""

    name = "DwrProxyExampleInterface"

    @remote_method("getGridData")
    def get_grid_data(
        self, base_string: str | None = None, number_of_rows: int = 0
    ) -> RowsResponse[GridRow]:
        rows = generate_rows(base_string, number_of_rows, **self._limits)
        return RowsResponse[GridRow](rows=rows)
