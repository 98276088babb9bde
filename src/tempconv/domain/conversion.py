"""Celsius/Fahrenheit conversion with absolute-zero validation.

Each function validates in its own input scale before converting, so the
boundary check is exact in the units the caller supplied.

INVARIANT: results are never rounded or clamped here. A value below
absolute zero raises :class:`BelowAbsoluteZero`; everything else converts.
"""

from __future__ import annotations

from tempconv.domain.types import (
    ABSOLUTE_ZERO_CELSIUS,
    ABSOLUTE_ZERO_FAHRENHEIT,
    Scale,
)


class BelowAbsoluteZero(ValueError):
    """Raised when a temperature lies below absolute zero in its scale."""

    def __init__(self, value: float, scale: Scale) -> None:
        self.value = value
        self.scale = scale
        super().__init__(
            f"Temperature {value}{scale.symbol} is below absolute zero "
            f"({scale.absolute_zero}{scale.symbol})"
        )


def celsius_to_fahrenheit(celsius: float) -> float:
    """Convert Celsius to Fahrenheit.

    Raises:
        BelowAbsoluteZero: If *celsius* is below -273.15.

    >>> celsius_to_fahrenheit(0.0)
    32.0
    """
    if celsius < ABSOLUTE_ZERO_CELSIUS:
        raise BelowAbsoluteZero(celsius, Scale.CELSIUS)
    return celsius * 9 / 5 + 32


def fahrenheit_to_celsius(fahrenheit: float) -> float:
    """Convert Fahrenheit to Celsius.

    Raises:
        BelowAbsoluteZero: If *fahrenheit* is below -459.67.

    >>> fahrenheit_to_celsius(32.0)
    0.0
    """
    if fahrenheit < ABSOLUTE_ZERO_FAHRENHEIT:
        raise BelowAbsoluteZero(fahrenheit, Scale.FAHRENHEIT)
    return (fahrenheit - 32) * 5 / 9


def convert(value: float, source: Scale | str) -> float:
    """Convert *value* from *source* into the opposite scale.

    Raises:
        ValueError: If *source* names no known scale.
    """
    if Scale(source) is Scale.CELSIUS:
        return celsius_to_fahrenheit(value)
    return fahrenheit_to_celsius(value)
