"""BaseService — foundation for payrollctl services.

Every service receives an :class:`EmployeeRegistry` at construction time
and performs all record access through it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from payrollctl.infrastructure.registry import EmployeeRegistry


class BaseService:
    """Base for all service-layer classes.

    Usage::

        class PayrollService(BaseService):
            def report(self) -> ServiceResult:
                records = self._registry.all_records()
                ...
    """

    def __init__(self, registry: EmployeeRegistry) -> None:
        self._registry = registry
