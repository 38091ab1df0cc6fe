"""Human-readable text for payroll results.

:func:`render_result` picks a renderer by ``result.op`` (``add_employee``
or ``payroll_report``); the report then picks one block renderer per
employee by its ``kind`` tag.  Line layout is fixed: operators and
scripts compare it byte for byte.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from rich.text import Text

from payrollctl.output.console import create_console, get_output, style_for_kind

if TYPE_CHECKING:
    from rich.console import Console

    from payrollctl.services.result import ServiceResult

EMPTY_REPORT = "No employees in system!"

# Amounts at or above this print in exponent form.
_MAX_FIXED = 1e15


@dataclass(frozen=True)
class ReportStyle:
    """How money and the report header are presented."""

    currency_symbol: str = "$"
    decimal_places: int = 2
    title: str = "Employee Payroll Report ---"


# ── Public API ────────────────────────────────────────────────────────


def render_result(
    result: ServiceResult,
    *,
    verbose: bool = False,
    style: ReportStyle | None = None,
) -> str:
    """Render *result* as report or confirmation text.

    The last newline is removed because ``click.echo`` adds one back;
    the blank line that ends every block survives.
    """
    console = create_console()
    style = style or ReportStyle()

    if result.ok:
        _OP_RENDERERS[result.op](result, console, verbose=verbose, style=style)
    else:
        _render_error(result, console, verbose=verbose, style=style)

    text = get_output(console)
    return text[:-1] if text.endswith("\n") else text


def render_quiet(result: ServiceResult) -> str:
    """One-line form for ``--quiet``: employee IDs, or a status line."""
    if not result.ok:
        msg = result.error.message if result.error else ""
        return f"ERROR: {result.op} — {msg}"

    if result.op == "payroll_report":
        items = result.data["items"]
        if not items:
            return EMPTY_REPORT
        return "\n".join(str(item["id"]) for item in items)

    return f"OK: {result.op}"


def format_amount(value: float, decimal_places: int | None = 2) -> str:
    """Money text without trailing zeros: ``5000``, ``1200.5``.

    *decimal_places* rounds computed amounts such as salaries to currency
    precision.  ``None`` prints the value as entered (``0.125``), up to 15
    significant digits.  Magnitudes from 1e15 up use exponent form.
    """
    if decimal_places is None or not math.isfinite(value) or abs(value) >= _MAX_FIXED:
        return f"{value:.15g}"
    text = f"{value:.{decimal_places}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


# ── Helpers ───────────────────────────────────────────────────────────


def _money(value: float, style: ReportStyle, *, entered: bool = False) -> Text:
    places = None if entered else style.decimal_places
    return Text(
        f"{style.currency_symbol}{format_amount(value, places)}",
        style="payroll.money",
    )


def _line(console: Console, label: str, value: Text | str) -> None:
    """Print one ``Label: value`` line."""
    if isinstance(value, str):
        value = Text(value)
    console.print(Text(f"{label}: ", style="payroll.key"), value, sep="")


def _headline(console: Console, item: dict[str, Any]) -> None:
    console.print(
        Text("Employee: ", style=style_for_kind(item["kind"])),
        Text(item["name"], style="payroll.name"),
        Text(" (ID: "),
        Text(str(item["id"]), style="payroll.id"),
        Text(")"),
        sep="",
    )


def _render_error(
    result: ServiceResult,
    console: Console,
    *,
    verbose: bool = False,
    style: ReportStyle,
) -> None:
    err = result.error
    msg = err.message if err else ""
    label = Text("ERROR", style="payroll.error")
    op = Text(f"  {result.op}", style="payroll.op")
    sep = Text(" — ")
    console.print(label, op, sep, Text(msg), sep="")

    if verbose and err:
        for key, value in err.detail.items():
            console.print(f"  {key}: {value}", markup=False, style="payroll.key")


# ── Per-kind report blocks ────────────────────────────────────────────


def _render_full_time(console: Console, item: dict[str, Any], style: ReportStyle) -> None:
    _headline(console, item)
    _line(console, "Fixed Monthly Salary", _money(item["monthly_salary"], style, entered=True))


def _render_part_time(console: Console, item: dict[str, Any], style: ReportStyle) -> None:
    _headline(console, item)
    _line(console, "Hourly Rate", _money(item["hourly_rate"], style, entered=True))
    _line(console, "Hours Worked", str(item["hours_worked"]))
    _line(console, "Total Salary", _money(item["salary"], style))


def _render_contractual(console: Console, item: dict[str, Any], style: ReportStyle) -> None:
    _headline(console, item)
    payment = _money(item["payment_per_project"], style, entered=True)
    _line(console, "Contract Payment Per Project", payment)
    _line(console, "Projects Completed", str(item["projects_completed"]))
    _line(console, "Total Salary", _money(item["salary"], style))


_KIND_RENDERERS: dict[str, Any] = {
    "full_time": _render_full_time,
    "part_time": _render_part_time,
    "contractual": _render_contractual,
}


# ── Operation renderers ───────────────────────────────────────────────


def _render_added(
    result: ServiceResult,
    console: Console,
    *,
    verbose: bool = False,
    style: ReportStyle,
) -> None:
    """Render add_employee confirmation."""
    console.print(Text("Employee added!", style="payroll.ok"))
    if verbose:
        _line(console, "  id", Text(str(result.data.get("id", "")), style="payroll.id"))
        _line(console, "  kind", str(result.data.get("kind", "")))
    console.print()


def _render_report(
    result: ServiceResult,
    console: Console,
    *,
    verbose: bool = False,
    style: ReportStyle,
) -> None:
    """Render payroll_report as one block per employee, in order."""
    items = result.data["items"]
    if not items:
        console.print(EMPTY_REPORT, markup=False)
        console.print()
        return

    console.print()
    console.print(Text(style.title, style="payroll.title"))
    for item in items:
        _KIND_RENDERERS[item["kind"]](console, item, style)
        console.print()

    if verbose:
        _line(console, "Employees", str(result.data.get("count", len(items))))
        _line(console, "Total Payroll", _money(result.data.get("total_payroll", 0.0), style))
        console.print()


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Any] = {
    "add_employee": _render_added,
    "payroll_report": _render_report,
}
