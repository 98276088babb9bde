"""Tests for the Celsius/Fahrenheit conversion functions."""

from __future__ import annotations

import threading

import pytest

from tempconv.domain.conversion import (
    BelowAbsoluteZero,
    celsius_to_fahrenheit,
    convert,
    fahrenheit_to_celsius,
)
from tempconv.domain.types import (
    ABSOLUTE_ZERO_CELSIUS,
    ABSOLUTE_ZERO_FAHRENHEIT,
    Scale,
)

VALID_CELSIUS = [-273.15, -273.0, -100.5, -40.0, -0.5, 0.0, 1e-9, 21.5, 36.6, 100.0, 5778.0, 1e12]
INVALID_CELSIUS = [-273.16, -273.1500001, -300.0, -1000.0, -1e12]
VALID_FAHRENHEIT = [-459.67, -459.0, -40.0, 0.0, 32.0, 98.6, 212.0, 451.0, 1e12]
INVALID_FAHRENHEIT = [-459.68, -459.6700001, -500.0, -1e12]


class TestCelsiusToFahrenheit:
    def test_freezing(self) -> None:
        assert celsius_to_fahrenheit(0.0) == 32.0

    def test_boiling(self) -> None:
        assert celsius_to_fahrenheit(100.0) == 212.0

    def test_fixed_point(self) -> None:
        assert celsius_to_fahrenheit(-40.0) == -40.0

    def test_absolute_zero_is_accepted(self) -> None:
        assert celsius_to_fahrenheit(-273.15) == pytest.approx(-459.67, abs=0.01)

    def test_below_absolute_zero(self) -> None:
        with pytest.raises(BelowAbsoluteZero):
            celsius_to_fahrenheit(-300.0)

    @pytest.mark.parametrize("celsius", VALID_CELSIUS)
    def test_valid_inputs_follow_formula(self, celsius: float) -> None:
        assert celsius_to_fahrenheit(celsius) == celsius * 9 / 5 + 32

    @pytest.mark.parametrize("celsius", INVALID_CELSIUS)
    def test_invalid_inputs_rejected(self, celsius: float) -> None:
        with pytest.raises(BelowAbsoluteZero) as exc_info:
            celsius_to_fahrenheit(celsius)
        assert exc_info.value.value == celsius
        assert exc_info.value.scale is Scale.CELSIUS


class TestFahrenheitToCelsius:
    def test_freezing(self) -> None:
        assert fahrenheit_to_celsius(32.0) == 0.0

    def test_boiling(self) -> None:
        assert fahrenheit_to_celsius(212.0) == 100.0

    def test_fixed_point(self) -> None:
        assert fahrenheit_to_celsius(-40.0) == -40.0

    def test_absolute_zero_is_accepted(self) -> None:
        assert fahrenheit_to_celsius(-459.67) == pytest.approx(-273.15, abs=0.01)

    def test_below_absolute_zero(self) -> None:
        with pytest.raises(BelowAbsoluteZero):
            fahrenheit_to_celsius(-500.0)

    @pytest.mark.parametrize("fahrenheit", VALID_FAHRENHEIT)
    def test_valid_inputs_follow_formula(self, fahrenheit: float) -> None:
        assert fahrenheit_to_celsius(fahrenheit) == (fahrenheit - 32) * 5 / 9

    @pytest.mark.parametrize("fahrenheit", INVALID_FAHRENHEIT)
    def test_invalid_inputs_rejected(self, fahrenheit: float) -> None:
        with pytest.raises(BelowAbsoluteZero) as exc_info:
            fahrenheit_to_celsius(fahrenheit)
        assert exc_info.value.scale is Scale.FAHRENHEIT


class TestConsistency:
    def test_thresholds_agree(self) -> None:
        """Both absolute-zero constants describe the same temperature."""
        assert ABSOLUTE_ZERO_CELSIUS * 9 / 5 + 32 == pytest.approx(
            ABSOLUTE_ZERO_FAHRENHEIT, abs=0.01
        )
        assert (ABSOLUTE_ZERO_FAHRENHEIT - 32) * 5 / 9 == pytest.approx(
            ABSOLUTE_ZERO_CELSIUS, abs=0.01
        )

    @pytest.mark.parametrize("celsius", VALID_CELSIUS)
    def test_round_trip(self, celsius: float) -> None:
        back = fahrenheit_to_celsius(celsius_to_fahrenheit(celsius))
        assert back == pytest.approx(celsius, rel=1e-9, abs=1e-9)

    def test_error_is_a_value_error(self) -> None:
        with pytest.raises(ValueError, match="below absolute zero"):
            celsius_to_fahrenheit(-274.0)

    def test_error_message_names_threshold_in_input_scale(self) -> None:
        with pytest.raises(BelowAbsoluteZero, match=r"\(-459\.67°F\)"):
            fahrenheit_to_celsius(-460.0)

    def test_concurrent_calls(self) -> None:
        results: list[float] = []
        lock = threading.Lock()

        def worker() -> None:
            for _ in range(200):
                value = celsius_to_fahrenheit(37.0)
                with lock:
                    results.append(value)

        threads = [threading.Thread(target=worker) for _ in range(4)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        assert len(results) == 800
        assert set(results) == {celsius_to_fahrenheit(37.0)}


class TestConvertDispatch:
    def test_celsius_kind(self) -> None:
        assert convert(100.0, Scale.CELSIUS) == 212.0

    def test_fahrenheit_kind(self) -> None:
        assert convert(212.0, Scale.FAHRENHEIT) == 100.0

    def test_plain_string_kind(self) -> None:
        assert convert(100.0, "celsius") == 212.0
        assert convert(212.0, "fahrenheit") == 100.0

    def test_unknown_kind_rejected(self) -> None:
        with pytest.raises(ValueError):
            convert(100.0, "kelvin")

    def test_validates_in_source_scale(self) -> None:
        # -300 is valid Fahrenheit but not valid Celsius
        assert convert(-300.0, Scale.FAHRENHEIT) == pytest.approx(-184.444, abs=0.001)
        with pytest.raises(BelowAbsoluteZero):
            convert(-300.0, Scale.CELSIUS)
