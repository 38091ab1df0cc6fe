"""Employee models — one frozen pydantic model per compensation kind.

The three kinds form a closed tagged union discriminated by ``kind``.
``salary`` is derived from the kind-specific inputs and is exposed as a
computed field, so it appears in ``model_dump()`` output alongside the
inputs it was derived from.

INVARIANT: Records are immutable once constructed.
"""

from __future__ import annotations

import math
from typing import Annotated, Any, Literal, Self

from pydantic import (
    BaseModel,
    Field,
    TypeAdapter,
    computed_field,
    field_validator,
    model_validator,
)

from payrollctl.domain.fields import is_valid_id, is_valid_name
from payrollctl.domain.types import EmploymentKind, IdGrammar


class EmployeeBase(BaseModel):
    """Fields shared by every employee kind."""

    model_config = {"frozen": True}

    id: str
    name: str

    @field_validator("id")
    @classmethod
    def _check_id(cls, value: str) -> str:
        # Both identifier grammars are subsets of the alphanumeric one.
        if not is_valid_id(value, IdGrammar.ALPHANUMERIC):
            msg = "id must be non-empty and contain only letters and digits"
            raise ValueError(msg)
        return value

    @field_validator("name")
    @classmethod
    def _check_name(cls, value: str) -> str:
        if not is_valid_name(value):
            msg = "name must be letters separated by single spaces"
            raise ValueError(msg)
        return value


def _require_finite(salary: float) -> None:
    if not math.isfinite(salary):
        msg = "salary is out of range"
        raise ValueError(msg)


class FullTimeEmployee(EmployeeBase):
    """Fixed monthly salary."""

    kind: Literal["full_time"] = "full_time"
    monthly_salary: float = Field(ge=0, allow_inf_nan=False)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def salary(self) -> float:
        return self.monthly_salary


class PartTimeEmployee(EmployeeBase):
    """Paid by the hour."""

    kind: Literal["part_time"] = "part_time"
    hourly_rate: float = Field(ge=0, allow_inf_nan=False)
    hours_worked: int = Field(ge=0)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def salary(self) -> float:
        return self.hourly_rate * self.hours_worked

    @model_validator(mode="after")
    def _check_salary(self) -> Self:
        _require_finite(self.salary)
        return self


class ContractualEmployee(EmployeeBase):
    """Paid per completed project."""

    kind: Literal["contractual"] = "contractual"
    payment_per_project: float = Field(ge=0, allow_inf_nan=False)
    projects_completed: int = Field(ge=0)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def salary(self) -> float:
        return self.payment_per_project * self.projects_completed

    @model_validator(mode="after")
    def _check_salary(self) -> Self:
        _require_finite(self.salary)
        return self


Employee = Annotated[
    FullTimeEmployee | PartTimeEmployee | ContractualEmployee,
    Field(discriminator="kind"),
]

EMPLOYEE_ADAPTER: TypeAdapter[Employee] = TypeAdapter(Employee)


def build_employee(kind: EmploymentKind | str, **fields: Any) -> Employee:
    """Validate *fields* into the model for *kind*.

    Raises:
        pydantic.ValidationError: If any field breaks its grammar or range.
    """
    return EMPLOYEE_ADAPTER.validate_python({"kind": str(kind), **fields})
