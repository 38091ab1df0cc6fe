"""Pydantic configuration models with code-baked defaults.

Each model is one payrollctl.toml table.  Every key has a default, so the
file only lists overrides and may be absent.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from payrollctl.domain.fields import INT32_MAX
from payrollctl.domain.types import IdGrammar


class ReportConfig(BaseModel):
    """[report] section."""

    model_config = {"frozen": True}

    currency_symbol: str = "$"
    decimal_places: int = Field(default=2, ge=0, le=10)
    title: str = "Employee Payroll Report ---"


class ValidationConfig(BaseModel):
    """[validation] section."""

    model_config = {"frozen": True}

    id_grammar: IdGrammar = IdGrammar.ALPHANUMERIC
    max_count: int = Field(default=INT32_MAX, ge=0)

