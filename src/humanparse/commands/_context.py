"""AppContext — the object every command receives via ``@click.pass_obj``."""

from __future__ import annotations

from functools import cached_property
from typing import TYPE_CHECKING

import click

from humanparse.config.logging import configure_logging
from humanparse.output.formatters import OutputSettings, format_result
from humanparse.services.telemetry import enable_telemetry

if TYPE_CHECKING:
    from humanparse.config.settings import HumanParseSettings
    from humanparse.services.parse import ParseService
    from humanparse.services.result import ServiceResult


class AppContext:
    """Resolved settings plus the parse service, built once per invocation.

    Construction configures logging, and telemetry when ``--verbose`` is on,
    so commands never touch either.
    """

    def __init__(self, settings: HumanParseSettings) -> None:
        self.settings = settings
        configure_logging(verbose=settings.verbose, log_json=settings.log_json)
        if settings.verbose:
            enable_telemetry()

    @cached_property
    def service(self) -> ParseService:
        from humanparse.services.parse import ParseService

        return ParseService(self.settings)

    @cached_property
    def output(self) -> OutputSettings:
        return OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )

    def emit(self, result: ServiceResult) -> None:
        """Print *result* and set the exit status.

        A parsed value goes to stdout. In ``--quiet`` mode its warnings go
        to stderr, since the value line has no room for them. A rejected
        literal is printed to stderr and exits with status 1.
        """
        text = format_result(result, settings=self.output)
        if not result.ok:
            click.echo(text, err=True)
            raise SystemExit(1)

        click.echo(text)
        if self.output.quiet and not self.output.json_output:
            for warning in result.warnings:
                click.echo(f"WARNING: {warning}", err=True)
