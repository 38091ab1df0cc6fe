"""Click command classes that take an ``examples=`` block.

Any command built with ``examples="..."`` gains an eager ``--examples``
flag that prints the block and exits before the command body runs, so
``payrollctl run --examples`` never opens the interactive session.
"""

from __future__ import annotations

from typing import Any

import click


def _print_examples(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
    if not value or ctx.resilient_parsing:
        return
    command = ctx.command
    click.echo(f"Examples for '{ctx.command_path}':\n")
    click.echo(getattr(command, "examples", "") or "")
    ctx.exit(0)


def _examples_option() -> click.Option:
    return click.Option(
        ["--examples"],
        is_flag=True,
        expose_value=False,
        is_eager=True,
        callback=_print_examples,
        help="Show usage examples.",
    )


class _ExamplesMixin:
    """Store ``examples`` and register ``--examples`` when there are any."""

    params: list[click.Parameter]

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            self.params.append(_examples_option())


class PayrollCommand(_ExamplesMixin, click.Command):
    """A payrollctl subcommand."""


class PayrollGroup(_ExamplesMixin, click.Group):
    """The payrollctl root group; subcommands default to PayrollCommand."""

    command_class = PayrollCommand
