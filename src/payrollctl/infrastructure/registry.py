"""EmployeeRegistry — the in-memory, append-only employee collection.

The registry owns every record for the lifetime of the process.  Records
are kept in insertion order and looked up by linear scan.

INVARIANT: The registry never rejects an insert.  Callers check
``is_id_unique()`` first (see :class:`~payrollctl.services.payroll.PayrollService`).
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from payrollctl.domain.employees import Employee

logger = logging.getLogger(__name__)


class EmployeeRegistry:
    """Ordered collection of employee records."""

    def __init__(self) -> None:
        self._records: list[Employee] = []

    def __len__(self) -> int:
        return len(self._records)

    def is_id_unique(self, employee_id: str) -> bool:
        """True iff no stored record carries *employee_id*."""
        return all(record.id != employee_id for record in self._records)

    def insert(self, record: Employee) -> None:
        """Append *record*. Uniqueness is the caller's responsibility."""
        self._records.append(record)
        logger.debug("Inserted %s employee %s", record.kind, record.id)

    def all_records(self) -> tuple[Employee, ...]:
        """Snapshot of every record in insertion order."""
        return tuple(self._records)
