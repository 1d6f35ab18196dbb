"""Root CLI group for bitsctl with global flags and command registration."""

from __future__ import annotations

import click

from bitsctl import __version__
from bitsctl.commands import register_commands
from bitsctl.commands._base import BitsGroup
from bitsctl.commands._context import AppContext
from bitsctl.config.settings import BitsSettings


@click.group(
    cls=BitsGroup,
    invoke_without_command=True,
    examples="""\
  bitsctl eval input.txt
  bitsctl -q eval --hex C200B40A82
  bitsctl -v decode --hex 04005AC33890
  bitsctl --json versions input.txt""",
)
@click.version_option(version=__version__, prog_name="bitsctl")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Print only the result value.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with timing and debug logs.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
) -> None:
    """bitsctl — decode and evaluate BITS transmissions."""
    settings = BitsSettings.from_cli(
        config_path=config_path,
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
