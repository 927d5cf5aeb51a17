"""Operation-specific Rich renderers for ServiceResult.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

import json as _json
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from orderctl.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from orderctl.services.result import ServiceResult

Renderer = Callable[..., None]


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
    """Render minimal output for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} - {msg}"
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    console.print(Text("OK", style="order.ok"), Text(f"  {result.op}", style="order.op"))


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="order.key")
    if key.endswith("_id"):
        v = Text(str(value), style="order.id")
    elif key == "total":
        v = Text(str(value), style="order.money")
    else:
        v = Text(str(value))
    console.print(k, v, sep="")


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    console.print(
        Text("ERROR", style="order.error"),
        Text(f"  {result.op}", style="order.op"),
        Text(" - "),
        Text(msg),
        sep="",
    )
    if err:
        console.print(Text(f"  code: {err.code}", style="order.key"))
    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(Text(f"    {k}: {v}"))


# ── Operation renderers ───────────────────────────────────────────────


def _render_process_order(
    result: ServiceResult, console: Console, *, verbose: bool = False
) -> None:
    """Render a processed order: header fields, line items, total."""
    data = result.data
    _status_line(console, result)
    for key in ("order_id", "customer_id", "customer_name", "delivery_address"):
        if key in data:
            _field(console, key, data[key])

    items = data.get("line_items") or []
    if items and verbose:
        table = Table(show_header=True, header_style="bold", box=None, padding=(0, 2))
        table.add_column("Product", style="order.id")
        table.add_column("Price", justify="right")
        for item in items:
            table.add_row(str(item["product_id"]), str(item["price"]))
        console.print(table)
    elif items:
        _field(console, "products", ", ".join(str(item["product_id"]) for item in items))

    _field(console, "total", data.get("total"))
    if "message" in data:
        console.print(Text(f"  {data['message']}"))


def _render_order_info(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    _field(console, "order_id", result.data.get("order_id"))
    console.print(Text(f"  {result.data.get('info', '')}"))


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Fallback renderer: status line + all data as key-value pairs."""
    _status_line(console, result)
    for key, value in result.data.items():
        if isinstance(value, (dict, list)):
            _field(console, key, _json.dumps(value, separators=(",", ":"), default=str))
        else:
            _field(console, key, value)


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Renderer] = {
    "process_order": _render_process_order,
    "order_info": _render_order_info,
}
