"""Output mode selection and temperature formatting.

The CLI renders ServiceResult for humans (Rich) or machines (--json).
The formatter layer adapts ServiceResult to the requested output mode.
"""

from __future__ import annotations

from decimal import Decimal
from typing import TYPE_CHECKING

from pydantic import BaseModel

from tempconv.domain.types import Scale

if TYPE_CHECKING:
    from tempconv.services.result import ServiceResult


class OutputSettings(BaseModel):
    """Output-mode flags resolved from TempSettings."""

    model_config = {"frozen": True}

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    precision: int = 2


def format_input(value: float) -> str:
    """Format a user-supplied value in positional notation, shortest form.

    ``20.0`` prints as ``20``, ``36.6`` as ``36.6`` and ``1e-07`` as
    ``0.0000001``; exponent notation is never used.
    """
    text = format(Decimal(repr(value)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def format_temperature(value: float, scale: Scale | str, *, precision: int | None = None) -> str:
    """Format *value* with the degree symbol of *scale*.

    With *precision* None the value is shown as typed by the user;
    otherwise it is fixed to that many decimal places.
    """
    symbol = Scale(scale).symbol
    if precision is None:
        return f"{format_input(value)}{symbol}"
    return f"{value:.{precision}f}{symbol}"


def format_result(
    result: ServiceResult,
    *,
    settings: OutputSettings | None = None,
) -> str:
    """Format a ServiceResult for display.

    Args:
        result: The service result to format.
        settings: Output mode flags; defaults to human output.
    """
    if settings is None:
        settings = OutputSettings()

    if settings.json_output:
        return result.model_dump_json(indent=2)

    from tempconv.output.renderers import render_quiet, render_result

    if settings.quiet:
        return render_quiet(result, precision=settings.precision)
    return render_result(result, verbose=settings.verbose, precision=settings.precision)
