"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO).  The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from katactl.output.console import create_console, get_output, style_for_shape

if TYPE_CHECKING:
    from rich.console import Console

    from katactl.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode.

    Ops with a single headline value print just that value.
    """
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    key = _HEADLINE_KEYS.get(result.op)
    if key is not None and key in result.data:
        return str(result.data[key])
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────

_HEADLINE_KEYS: dict[str, str] = {
    "area": "area",
    "area_batch": "total_area",
    "sum_array": "total",
    "count_words": "occurrences",
    "validate_keys": "valid",
    "car_age": "age",
}


def _status_line(console: Console, result: ServiceResult) -> None:
    """Print the OK status line."""
    label = Text("OK", style="kata.ok")
    op = Text(f"  {result.op}", style="kata.op")
    console.print(label, op, end="")
    console.print()


def _field(console: Console, key: str, value: Any, *, style: str = "") -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}:", style="kata.key")
    if isinstance(value, (dict, list)):
        value = json.dumps(value, separators=(",", ":"))
    v = Text(str(value), style=style)
    console.print(k, v, end="")
    console.print()


def _render_meta(console: Console, result: ServiceResult) -> None:
    """Print meta block including telemetry span tree (verbose only)."""
    if not result.meta:
        return

    console.print()
    console.print(Text("  meta:", style="dim"))

    for k, v in result.meta.items():
        if k == "telemetry":
            _render_telemetry_tree(console, v, indent=4)
        else:
            console.print(f"    {k}: {v}")


def _render_telemetry_tree(
    console: Console,
    span_data: dict[str, Any],
    indent: int = 4,
) -> None:
    """Render a hierarchical span tree with color-coded timing."""
    prefix = " " * indent
    name = span_data.get("name", "?")
    duration = span_data.get("duration_ms", 0.0)

    if duration > 1000:
        style = "bold red"
    elif duration > 100:
        style = "yellow"
    else:
        style = "dim"

    line = Text(prefix)
    line.append(f"{duration:>8.2f}ms", style=style)
    line.append(f"  {name}")
    annotations = span_data.get("annotations") or {}
    if annotations:
        extras = ", ".join(f"{ak}={av}" for ak, av in annotations.items())
        line.append(f"  ({extras})")
    console.print(line)

    for child in span_data.get("children", []):
        _render_telemetry_tree(console, child, indent=indent + 4)


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="kata.error")
    op = Text(f"  {result.op}", style="kata.op")
    sep = Text(" — ")
    console.print(label, op, sep, Text(msg))

    errors = result.data.get("errors")
    if errors:
        for item in errors:
            console.print(f"  [{item['index']}] {item['error']}", markup=False)

    # Partial batches still carry the rows that succeeded.
    areas = result.data.get("areas")
    if result.op == "area_batch" and areas:
        console.print(_area_table(areas))
        _field(console, "total_area", result.data.get("total_area", 0), style="kata.area")

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(f"    {k}: {v}")


# ── Area renderers ────────────────────────────────────────────────────


def _render_area(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render a single shape: tag, dimensions, then the area."""
    _status_line(console, result)
    shape = str(result.data.get("shape", ""))
    _field(console, "shape", shape, style=style_for_shape(shape))
    for key, value in result.data.items():
        if key in ("shape", "area"):
            continue
        _field(console, key, value)
    _field(console, "area", result.data.get("area"), style="kata.area")
    if verbose:
        _render_meta(console, result)


def _area_table(areas: list[dict[str, Any]]) -> Table:
    """Build a Rich Table for batch area rows."""
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("#", justify="right", style="dim")
    table.add_column("Shape")
    table.add_column("Dimensions")
    table.add_column("Area", justify="right", style="kata.area")

    for row in areas:
        shape = str(row.get("shape", ""))
        dims = ", ".join(
            f"{k}={v}" for k, v in row.items() if k not in ("index", "shape", "area")
        )
        table.add_row(
            str(row.get("index", "")),
            Text(shape, style=style_for_shape(shape)),
            dims,
            str(row.get("area", "")),
        )
    return table


def _render_area_batch(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    areas = result.data.get("areas", [])
    if areas:
        console.print(_area_table(areas))
    _field(console, "count", len(areas))
    _field(console, "total_area", result.data.get("total_area", 0), style="kata.area")
    if verbose:
        _render_meta(console, result)


# ── Generic fallback ──────────────────────────────────────────────────


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Fallback renderer: status line + all data as key-value pairs."""
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)
    if verbose:
        _render_meta(console, result)


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Any] = {
    "area": _render_area,
    "area_batch": _render_area_batch,
}
