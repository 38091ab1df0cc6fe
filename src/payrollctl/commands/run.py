"""Command: the interactive payroll session.

Line-oriented protocol on stdin/stdout:

1. Print the five-line menu and a ``Selection: `` prompt.
2. Read one line; it must be a single digit (``Invalid menu choice!``)
   naming a listed option (``Invalid menu option!``).
3. Options 1-3 collect id, name, and the kind-specific fields, then add
   the employee.  Option 4 prints the report.  Option 5 says goodbye and
   ends the session with exit status 0.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from payrollctl.commands._base import PayrollCommand
from payrollctl.commands._prompts import FieldPrompter
from payrollctl.domain.fields import FieldKind
from payrollctl.domain.types import MenuChoice
from payrollctl.services.payroll import PayrollService

if TYPE_CHECKING:
    from collections.abc import Callable

    from payrollctl.commands._context import AppContext

MENU_LINES = (
    "Payroll System Menu",
    "1. Add Full-time Employee",
    "2. Add Part-time Employee",
    "3. Add Contractual Employee",
    "4. Generate Report",
    "5. Exit",
)
SELECTION_PROMPT = "Selection: "
INVALID_OPTION = "Invalid menu option!"
FAREWELL = "Exiting system..."


class PayrollSession:
    """Menu loop over one in-memory registry."""

    def __init__(self, app: AppContext) -> None:
        self._app = app
        self._service = PayrollService(app.registry)
        validation = app.settings.validation
        self._prompter = FieldPrompter(
            id_grammar=validation.id_grammar,
            max_count=validation.max_count,
            is_id_unique=self._service.is_id_unique,
        )
        self._handlers: dict[MenuChoice, Callable[[], None]] = {
            MenuChoice.ADD_FULL_TIME: self.add_full_time,
            MenuChoice.ADD_PART_TIME: self.add_part_time,
            MenuChoice.ADD_CONTRACTUAL: self.add_contractual,
            MenuChoice.REPORT: self.report,
        }

    def run(self) -> None:
        """Loop until the operator picks Exit."""
        while True:
            for line in MENU_LINES:
                click.echo(line)

            selection = self._prompter.read(FieldKind.MENU, SELECTION_PROMPT)
            if not selection.ok:
                click.echo(selection.message)
                continue

            try:
                choice = MenuChoice(selection.value)
            except ValueError:
                click.echo(INVALID_OPTION)
                continue

            if choice is MenuChoice.EXIT:
                click.echo(FAREWELL)
                return
            self._handlers[choice]()

    def add_full_time(self) -> None:
        employee_id = self._prompter.ask_id()
        name = self._prompter.ask_name()
        salary = self._prompter.ask_amount("Monthly Salary: $")
        result = self._service.add_full_time(employee_id, name, monthly_salary=salary)
        self._app.emit(result, fatal=False)

    def add_part_time(self) -> None:
        employee_id = self._prompter.ask_id()
        name = self._prompter.ask_name()
        rate = self._prompter.ask_amount("Hourly Rate: $")
        hours = self._prompter.ask_count("Hours Worked: ")
        result = self._service.add_part_time(
            employee_id, name, hourly_rate=rate, hours_worked=hours
        )
        self._app.emit(result, fatal=False)

    def add_contractual(self) -> None:
        employee_id = self._prompter.ask_id()
        name = self._prompter.ask_name()
        rate = self._prompter.ask_amount("Payment Per Project: $")
        projects = self._prompter.ask_count("Projects Completed: ")
        result = self._service.add_contractual(
            employee_id, name, payment_per_project=rate, projects_completed=projects
        )
        self._app.emit(result, fatal=False)

    def report(self) -> None:
        self._app.emit(self._service.report(), fatal=False)


@click.command(
    "run",
    cls=PayrollCommand,
    examples="""\
  payrollctl run
  payrollctl --verbose run
  payrollctl --json run
  PAYROLLCTL_VALIDATION__ID_GRAMMAR=numeric payrollctl run""",
)
@click.pass_obj
def run(app: AppContext) -> None:
    """Start the interactive payroll session."""
    PayrollSession(app).run()
