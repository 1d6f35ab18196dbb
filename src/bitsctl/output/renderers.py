"""Operation-specific Rich renderers for ServiceResult.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from rich.text import Text
from rich.tree import Tree

from bitsctl.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from bitsctl.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich."""
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode: just the answer."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    d = result.data
    if result.op == "evaluate":
        return str(d["value"])
    if result.op == "version_sum":
        return str(d["version_sum"])
    if result.op == "decode":
        return expression(d["tree"])
    return f"OK: {result.op}"


def expression(node: dict[str, Any]) -> str:
    """Render a decoded tree dict as a one-line expression, e.g. ``sum(1, 2)``."""
    if node["type"] == "literal":
        return str(node["value"])
    args = ", ".join(expression(child) for child in node["children"])
    return f"{node['type']}({args})"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    label = Text("OK", style="bits.ok")
    op = Text(f"  {result.op}", style="bits.op")
    console.print(label, op, end="")
    console.print()


def _field(console: Console, key: str, value: Any, *, style: str = "") -> None:
    line = Text(f"  {key}: ", style="bits.key")
    line.append(str(value), style=style)
    console.print(line)


def _render_meta(console: Console, result: ServiceResult) -> None:
    """Print meta block including the telemetry span tree (verbose only)."""
    if not result.meta:
        return

    console.print()
    console.print(Text("  meta:", style="dim"))
    for k, v in result.meta.items():
        if k == "telemetry":
            _render_span(console, v, indent=4)
        else:
            console.print(Text(f"    {k}: {v}"))


def _render_span(console: Console, span: dict[str, Any], indent: int) -> None:
    line = Text(" " * indent)
    line.append(f"{span.get('duration_ms', 0.0):>8.3f}ms", style="dim")
    line.append(f"  {span.get('name', '?')}")
    annotations = span.get("annotations") or {}
    if annotations:
        line.append("  (" + ", ".join(f"{k}={v}" for k, v in annotations.items()) + ")")
    console.print(line)
    for child in span.get("children", []):
        _render_span(console, child, indent + 4)


def _packet_label(node: dict[str, Any]) -> Text:
    label = Text(f"v{node['version']} ", style="bits.version")
    if node["type"] == "literal":
        label.append("literal ", style="bits.literal")
        label.append(str(node["value"]), style="bits.value")
    else:
        label.append(node["type"], style="bits.operator")
    return label


def _add_children(branch: Tree, node: dict[str, Any]) -> None:
    for child in node.get("children", []):
        _add_children(branch.add(_packet_label(child)), child)


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="bits.error")
    op = Text(f"  {result.op}", style="bits.op")
    console.print(label, op, Text(" — "), Text(msg))
    if err is None:
        return

    _field(console, "code", err.code)
    if verbose and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(Text(f"    {k}: {v!r}"))


# ── Operation renderers ───────────────────────────────────────────────


def _render_evaluate(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    d = result.data
    _status_line(console, result)
    _field(console, "value", d["value"], style="bits.value")
    if verbose:
        for key in ("packets", "bits_consumed", "trailing_bits"):
            if key in d:
                _field(console, key, d[key])
        _render_meta(console, result)


def _render_decode(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    d = result.data
    _status_line(console, result)
    for key in ("packets", "depth", "bits_consumed", "trailing_bits"):
        if key in d:
            _field(console, key, d[key])
    console.print()

    root = d["tree"]
    tree = Tree(_packet_label(root), guide_style="dim")
    _add_children(tree, root)
    console.print(tree)
    if verbose:
        _render_meta(console, result)


def _render_version_sum(
    result: ServiceResult, console: Console, *, verbose: bool = False
) -> None:
    d = result.data
    _status_line(console, result)
    _field(console, "version_sum", d["version_sum"], style="bits.value")
    _field(console, "packets", d["packets"])
    if verbose:
        _render_meta(console, result)


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Fallback renderer: status line + all data as key-value pairs."""
    _status_line(console, result)
    for key, value in result.data.items():
        if isinstance(value, (dict, list)):
            _field(console, key, json.dumps(value, separators=(",", ":")))
        else:
            _field(console, key, value)
    if verbose:
        _render_meta(console, result)


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Any] = {
    "evaluate": _render_evaluate,
    "decode": _render_decode,
    "version_sum": _render_version_sum,
}
