"""PayrollService — employee creation and the payroll report.

Pipeline for additions: BUILD → CHECK UNIQUE → INSERT → RESPOND.
Uniqueness check and insert happen back to back with no other registry
access in between.
"""

from __future__ import annotations

import logging
from typing import Any

from pydantic import ValidationError

from payrollctl.domain.employees import build_employee
from payrollctl.domain.types import EmploymentKind
from payrollctl.services.base import BaseService
from payrollctl.services.result import ServiceResult

logger = logging.getLogger(__name__)


class PayrollService(BaseService):
    """Adds employees of each kind and reports on the registry."""

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def add_full_time(
        self,
        employee_id: str,
        name: str,
        *,
        monthly_salary: float,
    ) -> ServiceResult:
        """Add an employee on a fixed monthly salary."""
        return self._add(
            EmploymentKind.FULL_TIME,
            employee_id,
            name,
            monthly_salary=monthly_salary,
        )

    def add_part_time(
        self,
        employee_id: str,
        name: str,
        *,
        hourly_rate: float,
        hours_worked: int,
    ) -> ServiceResult:
        """Add an hourly employee; salary is rate times hours."""
        return self._add(
            EmploymentKind.PART_TIME,
            employee_id,
            name,
            hourly_rate=hourly_rate,
            hours_worked=hours_worked,
        )

    def add_contractual(
        self,
        employee_id: str,
        name: str,
        *,
        payment_per_project: float,
        projects_completed: int,
    ) -> ServiceResult:
        """Add a contractor; salary is per-project payment times projects."""
        return self._add(
            EmploymentKind.CONTRACTUAL,
            employee_id,
            name,
            payment_per_project=payment_per_project,
            projects_completed=projects_completed,
        )

    def is_id_unique(self, employee_id: str) -> bool:
        """True iff *employee_id* is not yet registered."""
        return self._registry.is_id_unique(employee_id)

    def report(self) -> ServiceResult:
        """Return every record in insertion order with the payroll total."""
        records = self._registry.all_records()
        items = [record.model_dump(mode="json") for record in records]
        total = sum(record.salary for record in records)
        logger.debug("Payroll report over %d employees", len(items))
        return ServiceResult(
            ok=True,
            op="payroll_report",
            data={"count": len(items), "total_payroll": total, "items": items},
        )

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------

    def _add(
        self,
        kind: EmploymentKind,
        employee_id: str,
        name: str,
        **fields: Any,
    ) -> ServiceResult:
        op = "add_employee"
        try:
            record = build_employee(kind, id=employee_id, name=name, **fields)
        except ValidationError as exc:
            errors = exc.errors(include_url=False, include_context=False)
            logger.debug("Rejected %s employee %r: %s", kind, employee_id, exc)
            return ServiceResult.failure(
                op,
                "INVALID_EMPLOYEE",
                f"Invalid {kind} employee: {errors[0]['msg']}",
                errors=errors,
            )

        if not self._registry.is_id_unique(record.id):
            logger.debug("Duplicate employee id %r", record.id)
            return ServiceResult.failure(
                op,
                "DUPLICATE_ID",
                f"Employee ID already exists: {record.id}",
                id=record.id,
            )

        self._registry.insert(record)
        return ServiceResult(ok=True, op=op, data=record.model_dump(mode="json"))
