"""Rich consoles for payroll output.

Reports and confirmations are rendered into an in-memory buffer and then
echoed by click, so the session owns every write to stdout.  Styles are
named ``payroll.*``; on a pipe or under CliRunner they render as plain text.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

PAYROLL_THEME = Theme(
    {
        "payroll.ok": "bold green",
        "payroll.error": "bold red",
        "payroll.op": "bold cyan",
        "payroll.key": "dim",
        "payroll.id": "bold blue",
        "payroll.name": "bold",
        "payroll.title": "bold underline",
        "payroll.money": "green",
        "payroll.kind.full_time": "green",
        "payroll.kind.part_time": "yellow",
        "payroll.kind.contractual": "magenta",
    }
)

_KIND_STYLES: dict[str, str] = {
    "full_time": "payroll.kind.full_time",
    "part_time": "payroll.kind.part_time",
    "contractual": "payroll.kind.contractual",
}


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Return a buffered console using :data:`PAYROLL_THEME`.

    Lines are never wrapped, so a long employee name stays on its
    ``Employee:`` line whatever the *width*.  *no_color* strips styling.
    """
    return Console(
        file=StringIO(),
        theme=PAYROLL_THEME,
        no_color=no_color,
        highlight=False,
        soft_wrap=True,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Return everything printed to a console from :func:`create_console`."""
    buffer = console.file
    if not isinstance(buffer, StringIO):
        msg = "console was not created by create_console()"
        raise TypeError(msg)
    return buffer.getvalue()


def style_for_kind(kind: str) -> str:
    """Return the Rich style name for an employment kind."""
    return _KIND_STYLES.get(kind, "")
