"""Tests for PayrollService — additions and the report."""

from __future__ import annotations

import pytest

from payrollctl.infrastructure.registry import EmployeeRegistry
from payrollctl.services.payroll import PayrollService


class TestAddEmployee:
    def test_add_full_time(self, service: PayrollService, registry: EmployeeRegistry) -> None:
        result = service.add_full_time("A1", "Ann Lee", monthly_salary=5000.0)
        assert result.ok, result.error
        assert result.op == "add_employee"
        assert result.data["id"] == "A1"
        assert result.data["kind"] == "full_time"
        assert result.data["salary"] == 5000.0
        assert len(registry) == 1

    def test_add_part_time(self, service: PayrollService) -> None:
        result = service.add_part_time("P1", "Pat Kim", hourly_rate=12.5, hours_worked=40)
        assert result.ok
        assert result.data["salary"] == pytest.approx(500.0)

    def test_add_contractual(self, service: PayrollService) -> None:
        result = service.add_contractual(
            "C1", "Cy Moe", payment_per_project=750.0, projects_completed=3
        )
        assert result.ok
        assert result.data["salary"] == pytest.approx(2250.0)

    def test_duplicate_id_is_rejected(
        self, service: PayrollService, registry: EmployeeRegistry
    ) -> None:
        service.add_full_time("A1", "Ann", monthly_salary=1)
        result = service.add_part_time("A1", "Bob", hourly_rate=1, hours_worked=1)
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "DUPLICATE_ID"
        assert result.error.detail == {"id": "A1"}
        assert len(registry) == 1

    def test_invalid_fields_are_rejected(
        self, service: PayrollService, registry: EmployeeRegistry
    ) -> None:
        result = service.add_full_time("A1", "Ann  Lee", monthly_salary=1)
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "INVALID_EMPLOYEE"
        assert result.error.detail["errors"]
        assert len(registry) == 0

    def test_overflowing_salary_is_rejected(
        self, service: PayrollService, registry: EmployeeRegistry
    ) -> None:
        result = service.add_part_time("P1", "Pat", hourly_rate=1e308, hours_worked=10)
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "INVALID_EMPLOYEE"
        assert "salary is out of range" in result.error.message
        assert len(registry) == 0

    def test_is_id_unique(self, service: PayrollService) -> None:
        assert service.is_id_unique("A1")
        service.add_full_time("A1", "Ann", monthly_salary=1)
        assert not service.is_id_unique("A1")
        assert service.is_id_unique("B2")


class TestReport:
    def test_empty(self, service: PayrollService) -> None:
        result = service.report()
        assert result.ok
        assert result.op == "payroll_report"
        assert result.data == {"count": 0, "total_payroll": 0, "items": []}

    def test_items_in_insertion_order_with_total(self, service: PayrollService) -> None:
        service.add_contractual("C1", "Cy", payment_per_project=100, projects_completed=2)
        service.add_full_time("A1", "Ann", monthly_salary=1000)
        service.add_part_time("P1", "Pat", hourly_rate=10, hours_worked=5)

        result = service.report()
        assert result.data["count"] == 3
        assert [item["id"] for item in result.data["items"]] == ["C1", "A1", "P1"]
        assert [item["kind"] for item in result.data["items"]] == [
            "contractual",
            "full_time",
            "part_time",
        ]
        assert result.data["total_payroll"] == pytest.approx(1250.0)

    def test_report_is_repeatable(self, service: PayrollService) -> None:
        service.add_full_time("A1", "Ann", monthly_salary=1)
        assert service.report().data == service.report().data
