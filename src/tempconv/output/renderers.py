"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO).  The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from rich.text import Text

from tempconv.output.console import create_console, get_output, style_for_scale
from tempconv.output.formatters import format_temperature

if TYPE_CHECKING:
    from rich.console import Console

    from tempconv.services.result import ServiceResult

_Renderer = Callable[..., None]


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False, precision: int = 2) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console()

    if result.ok:
        _OP_RENDERERS[result.op](result, console, precision=precision)
    else:
        _render_error(result, console, verbose=verbose)

    if verbose:
        _render_meta(console, result)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult, *, precision: int = 2) -> str:
    """Render minimal output for ``--quiet`` mode: the bare converted number."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"Error: {msg}"
    return f"{result.data['output']:.{precision}f}"


# ── Helpers ───────────────────────────────────────────────────────────


def _render_meta(console: Console, result: ServiceResult) -> None:
    """Print meta block including telemetry span tree."""
    if not result.meta:
        return

    console.print()
    console.print(Text("  meta:", style="dim"))

    for k, v in result.meta.items():
        if k == "telemetry":
            _render_telemetry_tree(console, v, indent=4)
        else:
            console.print(Text(f"    {k}: {v}"))


def _render_telemetry_tree(
    console: Console,
    span_data: dict[str, Any],
    indent: int = 4,
) -> None:
    """Render a hierarchical span tree, one line per span."""
    line = Text(" " * indent)
    line.append(f"{span_data.get('duration_ms', 0.0):>8.3f}ms", style="dim")
    line.append(f"  {span_data.get('name', '?')}")
    annotations = span_data.get("annotations") or {}
    if annotations:
        line.append(f"  ({', '.join(f'{k}={v}' for k, v in annotations.items())})")
    console.print(line)

    for child in span_data.get("children", []):
        _render_telemetry_tree(console, child, indent=indent + 4)


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    console.print(Text.assemble(("Error", "temp.error"), f": {msg}"))

    if err is None:
        return
    console.print(Text(f"Details: {err.detail.get('kind', err.code)}"))

    if verbose:
        for k, v in err.detail.items():
            if k != "kind":
                console.print(Text(f"  {k}: {v}", style="temp.key"))


# ── Operation renderers ───────────────────────────────────────────────


def _render_convert(result: ServiceResult, console: Console, *, precision: int = 2) -> None:
    """Render ``<input> <in-unit> = <output> <out-unit>``."""
    d = result.data
    source = Text(format_temperature(d["input"], d["input_scale"]))
    source.stylize(style_for_scale(d["input_scale"]))
    target = Text(format_temperature(d["output"], d["output_scale"], precision=precision))
    target.stylize(style_for_scale(d["output_scale"]))
    console.print(Text.assemble(source, " = ", target))


def _render_build_info(result: ServiceResult, console: Console, *, precision: int = 2) -> None:
    console.print(Text(f"Build timestamp: {result.data.get('timestamp', 'unknown')}"))
    console.print(Text(f"Build profile: {result.data.get('profile', 'unknown')}"))


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, _Renderer] = {
    "convert": _render_convert,
    "build_info": _render_build_info,
}
