"""Command: parse a byte-size literal."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from humanparse.commands._base import HpCommand, literal_argument
from humanparse.domain.checked import IntType

if TYPE_CHECKING:
    from humanparse.commands._context import AppContext


@click.command(
    "bytes",
    cls=HpCommand,
    examples="""\
  humanparse bytes "1 GiB"
  humanparse bytes 512k --int-type u32
  humanparse --json bytes 10MB
  echo 4KiB | humanparse -q bytes -""",
)
@literal_argument()
@click.option(
    "--int-type",
    type=click.Choice([t.value for t in IntType]),
    default=None,
    help="Integer width the result must fit (default: [byte_size] int_type).",
)
@click.pass_obj
def bytes_cmd(app: AppContext, text: str, int_type: str | None) -> None:
    """Parse a byte size such as "1 GiB" or "10MB"."""
    width = IntType(int_type) if int_type else None
    app.emit(app.service.parse_bytes(text, int_type=width))
