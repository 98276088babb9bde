"""Root CLI command for tempconv: flags, argument parsing, and emission."""

from __future__ import annotations

import math
from typing import Any

import click

from tempconv import __version__
from tempconv.commands._base import TempCommand
from tempconv.commands._context import AppContext
from tempconv.config.settings import TempSettings
from tempconv.domain.types import Scale
from tempconv.services.convert import ConversionService


class FiniteFloat(click.ParamType):
    """A float that rejects ``inf`` and ``nan``."""

    name = "float"

    def convert(self, value: Any, param: click.Parameter | None, ctx: click.Context | None) -> float:
        number = click.FLOAT.convert(value, param, ctx)
        if not math.isfinite(number):
            self.fail(f"{value!r} is not a finite number.", param, ctx)
        return number


@click.command(
    "tempconv",
    cls=TempCommand,
    examples="""\
  tempconv celsius 100
  tempconv fahrenheit -40
  tempconv celsius 36.6 --build-info
  tempconv --json fahrenheit 451
  tempconv -q celsius 0""",
)
@click.version_option(version=__version__, prog_name="tempconv")
@click.argument("kind", type=click.Choice([str(s) for s in Scale], case_sensitive=False))
@click.argument("value", type=FiniteFloat())
@click.option("-b", "--build-info", is_flag=True, help="Show build information.")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Print only the converted number.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug info.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
def cli(
    kind: str,
    value: float,
    build_info: bool,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
) -> None:
    """Convert a temperature between Celsius and Fahrenheit.

    KIND is the scale VALUE is given in: ``celsius`` converts to
    Fahrenheit, ``fahrenheit`` converts to Celsius.
    """
    settings = TempSettings.from_cli(
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
    )
    app = AppContext(settings)
    svc = ConversionService()

    result = svc.convert(value, Scale(kind))

    if build_info:
        info = svc.build_info()
        if settings.json_output:
            result = result.model_copy(update={"data": {**result.data, "build": info.data}})
        elif not settings.quiet:
            app.emit(info)
            click.echo()

    app.emit(result)


def main() -> None:
    """Console-script entry point."""
    cli()
