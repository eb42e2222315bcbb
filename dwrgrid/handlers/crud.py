"""Create/read/update/destroy grid example.

Nothing is stored.  ``read`` and ``create`` mint ids from the shared
``IdCounter``; ``update`` and ``destroy`` acknowledge their input unchanged.
"""

from __future__ import annotations

import logging

from dwrgrid.models.records import Employee
from dwrgrid.models.responses import JsonReaderResponse
from dwrgrid.remoting.base import RemoteProxy, remote_method
from dwrgrid.services.counter import IdCounter
from dwrgrid.services.generator import generate_employees

logger = logging.getLogger(__name__)


class CrudExample(RemoteProxy):
    """CRUD façade over a conceptual, non-persisted employee set.

    Args:
        counter: Shared id source.  Every handler that mints ids in one
            process must be given the same instance.
        read_batch_size: Number of records ``read`` returns.
    """

    name = "CrudExampleInterface"

    def __init__(self, counter: IdCounter, read_batch_size: int = 10) -> None:
        self._counter = counter
        self._read_batch_size = read_batch_size

    @remote_method()
    def read(self) -> JsonReaderResponse[Employee]:
        """Return a fresh batch of employees named after their new ids."""
        employees = generate_employees(
            None,
            self._read_batch_size,
            id_source=self._counter,
            max_rows=max(self._read_batch_size, 1),
        )
        return JsonReaderResponse[Employee].wrap(employees)

    @remote_method()
    def create(self, employees: list[Employee]) -> JsonReaderResponse[Employee]:
        """Assign a new id to every employee, preserving input order."""
        for employee in employees:
            employee.id = self._counter.next()
        logger.debug("Assigned ids to %d new employees", len(employees))
        return JsonReaderResponse[Employee].wrap(employees)

    @remote_method()
    def update(self, employees: list[Employee]) -> JsonReaderResponse[Employee]:
        """Acknowledge an update without storing anything."""
        return JsonReaderResponse[Employee].wrap(employees)

    @remote_method()
    def destroy(self, employees: list[Employee]) -> JsonReaderResponse[Employee]:
        """Acknowledge a delete without removing anything."""
        return JsonReaderResponse[Employee].wrap(employees)
