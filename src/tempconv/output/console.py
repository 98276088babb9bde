"""Rich Console factory and theme for tempconv output.

Creates Console instances that render to a StringIO buffer, preserving
the ``format_result() -> str`` contract.  In non-TTY environments
(tests, pipes) Rich automatically disables color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

TEMP_THEME = Theme(
    {
        "temp.error": "bold red",
        "temp.key": "dim",
        "temp.celsius": "cyan",
        "temp.fahrenheit": "magenta",
    }
)

_SCALE_STYLES: dict[str, str] = {
    "celsius": "temp.celsius",
    "fahrenheit": "temp.fahrenheit",
}


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes.
        width: Override terminal width (useful for consistent test output).
    """
    return Console(
        file=StringIO(),
        theme=TEMP_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_scale(scale: str) -> str:
    """Return the Rich style name for a temperature scale."""
    return _SCALE_STYLES.get(scale, "")
