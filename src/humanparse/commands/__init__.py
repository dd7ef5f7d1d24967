"""Subcommand modules for humanparse.

Provides register_commands() which uses deferred imports to keep
``humanparse --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from humanparse.commands.bytes_cmd import bytes_cmd
    from humanparse.commands.duration_cmd import duration_cmd
    from humanparse.commands.time_cmd import time_cmd

    cli.add_command(bytes_cmd)
    cli.add_command(duration_cmd)
    cli.add_command(time_cmd)
