"""ConversionService: temperature conversion and build metadata.

Wraps the pure domain functions and turns a :class:`BelowAbsoluteZero`
rejection into a failed ServiceResult. Any other exception propagates.
"""

from __future__ import annotations

import logging

from tempconv import _build
from tempconv.domain.conversion import BelowAbsoluteZero, convert
from tempconv.domain.types import Scale
from tempconv.services.result import ServiceResult
from tempconv.services.telemetry import trace_span, traced

logger = logging.getLogger(__name__)

BELOW_ABSOLUTE_ZERO = "BELOW_ABSOLUTE_ZERO"


class ConversionService:
    """Converts temperature values between Celsius and Fahrenheit."""

    @traced
    def convert(self, value: float, source: Scale | str) -> ServiceResult:
        """Convert *value* from the *source* scale into the other one.

        On failure the error message names the absolute-zero threshold in
        the input's own scale, e.g. ``(-273.15°C)``.
        """
        scale = Scale(source)
        with trace_span("domain.convert") as span:
            if span:
                span.annotate("scale", str(scale))
            try:
                output = convert(value, scale)
            except BelowAbsoluteZero as exc:
                logger.debug("Rejected %s%s below absolute zero", value, scale.symbol)
                return ServiceResult.failure(
                    "convert",
                    BELOW_ABSOLUTE_ZERO,
                    f"Temperature is below absolute zero ({scale.absolute_zero}{scale.symbol})",
                    kind=type(exc).__name__,
                    value=exc.value,
                    scale=str(exc.scale),
                    absolute_zero=scale.absolute_zero,
                )

        return ServiceResult.success(
            "convert",
            input=value,
            input_scale=str(scale),
            output=output,
            output_scale=str(scale.opposite),
        )

    @traced
    def build_info(self) -> ServiceResult:
        """Report the build timestamp and profile stamped at packaging time."""
        return ServiceResult.success(
            "build_info",
            timestamp=_build.BUILD_TIMESTAMP,
            profile=_build.BUILD_PROFILE,
        )
