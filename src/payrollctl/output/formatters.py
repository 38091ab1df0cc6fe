"""Rich/JSON output helpers.

The CLI renders ServiceResult for humans (Rich output, colors) or
machines (--json).  The formatter layer adapts ServiceResult to the
requested output mode.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from payrollctl.output.renderers import ReportStyle, render_quiet, render_result

if TYPE_CHECKING:
    from payrollctl.services.result import ServiceResult


@dataclass(frozen=True)
class OutputSettings:
    """Output mode flags plus report presentation."""

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    style: ReportStyle = field(default_factory=ReportStyle)


def format_result(
    result: ServiceResult,
    *,
    settings: OutputSettings | None = None,
) -> str:
    """Format a ServiceResult for display: JSON, quiet, or Rich text."""
    settings = settings or OutputSettings()
    if settings.json_output:
        return result.model_dump_json(indent=2)
    if settings.quiet:
        return render_quiet(result)
    return render_result(result, verbose=settings.verbose, style=settings.style)
