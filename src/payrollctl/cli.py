"""``payrollctl`` entry point: global output and config flags, then the session."""

from __future__ import annotations

import click

from payrollctl import __version__
from payrollctl.commands import register_commands
from payrollctl.commands._base import PayrollGroup
from payrollctl.commands._context import AppContext
from payrollctl.config.settings import PayrollSettings


@click.group(
    cls=PayrollGroup,
    invoke_without_command=True,
    examples="""\
  payrollctl
  payrollctl run
  payrollctl -c ./payrollctl.toml
  payrollctl --log-json -v""",
)
@click.version_option(version=__version__, prog_name="payrollctl")
@click.option(
    "--json", "json_output", is_flag=True, help="Print each result as a JSON document."
)
@click.option("-q", "--quiet", is_flag=True, help="Print only IDs and status lines.")
@click.option("-v", "--verbose", is_flag=True, help="Show report totals and debug logs.")
@click.option("--log-json", is_flag=True, help="Write logs to stderr as JSON lines.")
@click.option(
    "-c", "--config", "config_path", default=None, help="Read settings from this TOML file."
)
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
) -> None:
    """payrollctl — interactive employee payroll console.

    Without a subcommand, starts the interactive session.
    """
    settings = PayrollSettings.from_cli(
        config_path=config_path,
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        from payrollctl.commands.run import run

        ctx.invoke(run)


register_commands(cli)
