"""humanparse command-line entry point."""

from __future__ import annotations

from typing import Any

import click

from humanparse import __version__
from humanparse.commands import register_commands
from humanparse.commands._context import AppContext
from humanparse.config.settings import HumanParseSettings

CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"], "max_content_width": 100}


@click.group(context_settings=CONTEXT_SETTINGS, invoke_without_command=True)
@click.version_option(__version__, "-V", "--version", prog_name="humanparse")
@click.option(
    "-c",
    "--config",
    "config_path",
    type=click.Path(dir_okay=False),
    metavar="FILE",
    help="Read defaults from FILE instead of the discovered humanparse.toml.",
)
@click.option("--json", "json_output", is_flag=True, help="Emit the result envelope as JSON.")
@click.option("-q", "--quiet", is_flag=True, help="Print only the parsed value.")
@click.option("-v", "--verbose", is_flag=True, help="Show extra fields, timings and debug logs.")
@click.option("--log-json", is_flag=True, help="Write logs to stderr as JSON lines.")
@click.pass_context
def cli(ctx: click.Context, config_path: str | None, **flags: Any) -> None:
    """Turn human-written sizes, durations and timestamps into exact values.

    A rejected literal exits with status 1 and an error code naming the
    reason, such as OVERFLOW or INVALID_UNIT.
    """
    ctx.obj = AppContext(HumanParseSettings.from_cli(config_path=config_path, **flags))
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
