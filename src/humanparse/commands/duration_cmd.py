"""Command: parse a duration literal."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from humanparse.commands._base import HpCommand, literal_argument

if TYPE_CHECKING:
    from humanparse.commands._context import AppContext


@click.command(
    "duration",
    cls=HpCommand,
    examples="""\
  humanparse duration 1h30m
  humanparse duration "1d 12h 120s"
  humanparse duration "1h 1h" --strict
  humanparse -q duration 250ms""",
)
@literal_argument()
@click.option(
    "--strict/--no-strict",
    default=None,
    help="Reject repeated units (default: [duration] strict).",
)
@click.pass_obj
def duration_cmd(app: AppContext, text: str, strict: bool | None) -> None:
    """Parse a duration such as "1h30m" or "250ms"."""
    app.emit(app.service.parse_duration(text, strict=strict))
