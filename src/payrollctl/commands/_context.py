"""AppContext: the ``ctx.obj`` the root group hands to every command.

One per process.  It holds the settings, owns the employee registry for
the life of the session, and writes service results to the terminal.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from payrollctl.output.formatters import OutputSettings, format_result
from payrollctl.output.renderers import ReportStyle

if TYPE_CHECKING:
    from payrollctl.config.settings import PayrollSettings
    from payrollctl.infrastructure.registry import EmployeeRegistry
    from payrollctl.services.result import ServiceResult


class AppContext:
    """Settings, registry and result output for one payrollctl process."""

    def __init__(self, settings: PayrollSettings) -> None:
        self.settings = settings
        self._registry: EmployeeRegistry | None = None

        from payrollctl.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def registry(self) -> EmployeeRegistry:
        """The employee registry (created lazily on first access)."""
        if self._registry is None:
            from payrollctl.infrastructure.registry import EmployeeRegistry

            self._registry = EmployeeRegistry()
        return self._registry

    @property
    def output_settings(self) -> OutputSettings:
        report = self.settings.report
        return OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
            style=ReportStyle(
                currency_symbol=report.currency_symbol,
                decimal_places=report.decimal_places,
                title=report.title,
            ),
        )

    def emit(self, result: ServiceResult, *, fatal: bool = True) -> None:
        """Echo *result* in the configured output mode.

        Refusals go to stderr.  A *fatal* refusal also ends the process with
        status 1; the menu loop passes ``fatal=False`` and carries on.
        """
        output = format_result(result, settings=self.output_settings)
        if result.ok:
            click.echo(output)
        else:
            click.echo(output, err=True)
            if fatal:
                raise SystemExit(1)
