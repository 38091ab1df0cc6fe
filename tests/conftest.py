"""Shared pytest fixtures and test helpers for payrollctl tests."""

from __future__ import annotations

import logging
import os
from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

from payrollctl.infrastructure.registry import EmployeeRegistry
from payrollctl.services.payroll import PayrollService


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Undo the payrollctl logger changes every CLI invocation makes."""
    payroll = logging.getLogger("payrollctl")
    handlers = payroll.handlers[:]
    level = payroll.level
    propagate = payroll.propagate
    yield
    payroll.handlers = handlers
    payroll.setLevel(level)
    payroll.propagate = propagate


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def registry() -> EmployeeRegistry:
    """Empty in-memory registry."""
    return EmployeeRegistry()


@pytest.fixture
def service(registry: EmployeeRegistry) -> PayrollService:
    """PayrollService over the ``registry`` fixture."""
    return PayrollService(registry)


@pytest.fixture
def _isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run from an empty temp dir with no payrollctl env overrides.

    Use via ``@pytest.mark.usefixtures("_isolated_config")`` so a stray
    ``payrollctl.toml`` or ``PAYROLLCTL_*`` variable cannot leak in.
    """
    for name in list(os.environ):
        if name.startswith("PAYROLLCTL_"):
            monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)