"""Command: parse an RFC3339 timestamp."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from humanparse.commands._base import HpCommand, literal_argument

if TYPE_CHECKING:
    from humanparse.commands._context import AppContext


@click.command(
    "time",
    cls=HpCommand,
    examples="""\
  humanparse time 2006-01-02T15:04:05Z
  humanparse time "2018-09-21 16:56:44.234867232+08:00"
  humanparse time 2024-06-01 --since 2024-01-01
  humanparse --json time 1970-01-01""",
)
@literal_argument()
@click.option(
    "--since",
    default=None,
    help="Reference timestamp for the elapsed time (default: [timestamp] since or Unix epoch).",
)
@click.pass_obj
def time_cmd(app: AppContext, text: str, since: str | None) -> None:
    """Parse an RFC3339 timestamp such as "2006-01-02T15:04:05+08:00"."""
    app.emit(app.service.parse_time(text, since=since))
