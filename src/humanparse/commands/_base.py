"""Shared pieces for the parse commands.

``HpCommand`` keeps ``--help`` short and prints worked examples on
``--examples``. ``literal_argument`` declares the TEXT argument every
command takes; ``-`` reads the literal from stdin so values can be piped in.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import click

STDIN_MARKER = "-"


class HpCommand(click.Command):
    """Command with an eager ``--examples`` flag.

    The flag is only added when the command is declared with ``examples=``.
    """

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            self.params.append(
                click.Option(
                    ["--examples"],
                    is_flag=True,
                    expose_value=False,
                    is_eager=True,
                    callback=self._show_examples,
                    help="Show usage examples and exit.",
                )
            )

    def _show_examples(self, ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value or ctx.resilient_parsing:
            return
        click.echo(f"Examples for '{ctx.command_path}':\n")
        click.echo(self.examples)
        ctx.exit(0)


def _read_literal(_ctx: click.Context, _param: click.Parameter, value: str) -> str:
    if value != STDIN_MARKER:
        return value
    # One literal per invocation; only the line terminator is dropped.
    return click.get_text_stream("stdin").read().rstrip("\r\n")


def literal_argument() -> Callable[[Callable[..., Any]], Callable[..., Any]]:
    """Declare the ``TEXT`` argument (``-`` reads it from stdin)."""
    return click.argument("text", metavar="TEXT", callback=_read_literal)
