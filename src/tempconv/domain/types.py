"""Temperature scales and their fixed properties."""

from __future__ import annotations

from enum import StrEnum

ABSOLUTE_ZERO_CELSIUS = -273.15
ABSOLUTE_ZERO_FAHRENHEIT = -459.67


class Scale(StrEnum):
    """Temperature scale of an input value (the conversion kind)."""

    CELSIUS = "celsius"
    FAHRENHEIT = "fahrenheit"

    @property
    def symbol(self) -> str:
        return _SYMBOLS[self]

    @property
    def absolute_zero(self) -> float:
        return _ABSOLUTE_ZERO[self]

    @property
    def opposite(self) -> Scale:
        """The scale a value in this scale converts into."""
        if self is Scale.CELSIUS:
            return Scale.FAHRENHEIT
        return Scale.CELSIUS


_SYMBOLS: dict[Scale, str] = {
    Scale.CELSIUS: "°C",
    Scale.FAHRENHEIT: "°F",
}

_ABSOLUTE_ZERO: dict[Scale, float] = {
    Scale.CELSIUS: ABSOLUTE_ZERO_CELSIUS,
    Scale.FAHRENHEIT: ABSOLUTE_ZERO_FAHRENHEIT,
}
