"""AppContext — shared state for a single ``cal`` invocation.

Created once by the CLI. Configures logging, owns the CalendarService,
and provides centralized result emission (stdout/stderr routing + exit
codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from ptcal.domain.types import ErrorKind
from ptcal.output.formatters import OutputSettings, format_result
from ptcal.services.calendar import CalendarService

if TYPE_CHECKING:
    from ptcal.config.settings import CalSettings
    from ptcal.services.clock import Clock
    from ptcal.services.result import ServiceResult

EXIT_INVALID_ARGUMENT = 1
EXIT_USAGE = 2


class AppContext:
    """Shared context for the root command."""

    def __init__(self, settings: CalSettings, clock: Clock | None = None) -> None:
        self.settings = settings
        self.service = CalendarService(clock)

        # Configure structured logging
        from ptcal.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
        * Failure: writes only to stderr, exits with code 1 (2 for usage).
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            highlight_today=self.settings.highlight_today,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            return
        click.echo(output, err=True)
        if result.error is not None and result.error.code == ErrorKind.USAGE:
            raise SystemExit(EXIT_USAGE)
        raise SystemExit(EXIT_INVALID_ARGUMENT)
