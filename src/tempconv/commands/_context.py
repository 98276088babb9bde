"""AppContext: per-invocation state for the tempconv CLI.

Created once by the root command.  Configures logging and telemetry
from the resolved settings and centralizes result emission
(stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from tempconv.config.logging import configure_logging
from tempconv.output.formatters import OutputSettings, format_result
from tempconv.services.telemetry import disable_telemetry, enable_telemetry

if TYPE_CHECKING:
    from tempconv.config.settings import TempSettings
    from tempconv.services.result import ServiceResult


class AppContext:
    """Shared state for a single CLI invocation."""

    def __init__(self, settings: TempSettings) -> None:
        self.settings = settings

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

        if settings.verbose:
            enable_telemetry()
        else:
            disable_telemetry()

    @property
    def output_settings(self) -> OutputSettings:
        return OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
            precision=self.settings.display.precision,
        )

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
        * Failure: writes to stderr, exits with code 1.
        """
        settings = self.output_settings
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
