"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO). The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import UTC, datetime
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from usage_tracker.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from usage_tracker.services.result import ServiceResult


class _TimeFormat:
    """Converts stored ISO timestamps into display strings."""

    def __init__(self, *, utc: bool, fmt: str) -> None:
        self.utc = utc
        self.fmt = fmt

    def __call__(self, iso: str) -> str:
        ts = datetime.fromisoformat(iso)
        ts = ts.astimezone(UTC) if self.utc else ts.astimezone()
        return ts.strftime(self.fmt)


_Renderer = Callable[["ServiceResult", "Console", _TimeFormat], None]


# ── Public API ────────────────────────────────────────────────────────


def render_result(
    result: ServiceResult,
    *,
    utc: bool = False,
    time_format: str = "%Y-%m-%d %H:%M:%S %Z",
) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console()
    fmt = _TimeFormat(utc=utc, fmt=time_format)

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, fmt)
    else:
        _render_error(result, console)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult, *, utc: bool = False) -> str:
    """Render minimal, script-friendly output for ``--quiet`` mode.

    Timestamps stay ISO 8601 but follow the display timezone.
    """
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    if result.op == "list":
        return "\n".join(item["name"] for item in result.data.get("items", []))
    if result.op == "show":
        return "\n".join(_iso_in_zone(iso, utc=utc) for iso in result.data.get("usages", []))
    if result.op == "need":
        predicted = result.data.get("predicted")
        return "unknown" if predicted is None else str(predicted)

    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    """Print the OK status line."""
    console.print(Text("OK", style="ut.ok"), Text(f"  {result.op}", style="ut.op"))


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="ut.key")
    if key == "name":
        v = Text(str(value), style="ut.name")
    elif key.endswith("count") or key == "removed":
        v = Text(str(value), style="ut.count")
    else:
        v = Text(str(value))
    console.print(k + v)


def _iso_in_zone(iso: str, *, utc: bool) -> str:
    ts = datetime.fromisoformat(iso)
    return (ts.astimezone(UTC) if utc else ts.astimezone()).isoformat()


def _plural(count: int, word: str) -> str:
    return f"{count} {word}" if count == 1 else f"{count} {word}s"


# ── Renderers ─────────────────────────────────────────────────────────


def _render_generic(result: ServiceResult, console: Console, fmt: _TimeFormat) -> None:
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)


def _render_use(result: ServiceResult, console: Console, fmt: _TimeFormat) -> None:
    _status_line(console, result)
    _field(console, "name", result.data["name"])
    console.print(
        Text("  used at: ", style="ut.key") + Text(fmt(result.data["used_at"]), style="ut.time")
    )
    _field(console, "usage_count", result.data["usage_count"])


def _render_list(result: ServiceResult, console: Console, fmt: _TimeFormat) -> None:
    items: list[dict[str, Any]] = result.data.get("items", [])
    if not items:
        console.print(Text("No things are tracked yet.", style="ut.key"))
        return

    table = Table(show_edge=False, pad_edge=False, box=None)
    table.add_column("#", justify="right", style="ut.key")
    table.add_column("Name", style="ut.name")
    table.add_column("Usages", justify="right", style="ut.count")
    for pos, item in enumerate(items):
        table.add_row(str(pos), Text(item["name"]), str(item["usage_count"]))
    console.print(table)

    for item in items:
        usages = item.get("usages")
        if not usages:
            continue
        console.print()
        console.print(Text(item["name"], style="ut.name"))
        for iso in usages:
            console.print(Text("   used at: ", style="ut.key") + Text(fmt(iso), style="ut.time"))


def _render_show(result: ServiceResult, console: Console, fmt: _TimeFormat) -> None:
    name = result.data["name"]
    usages: list[str] = result.data.get("usages", [])
    header = Text(name, style="ut.name") + Text(
        f"  ({_plural(len(usages), 'usage')})", style="ut.key"
    )
    console.print(header)
    for iso in usages:
        console.print(Text(f"  {fmt(iso)}", style="ut.time"))


def _render_need(result: ServiceResult, console: Console, fmt: _TimeFormat) -> None:
    data = result.data
    span = _plural(data["magnitude"], data["unit"])
    name = Text(data["name"], style="ut.name")
    predicted = data.get("predicted")
    if predicted is None:
        console.print(
            name
            + Text(": not enough data to estimate ", style="ut.unknown")
            + Text(f"for {span} (needs two usages at different times)")
        )
        return
    console.print(
        name
        + Text(": ")
        + Text(str(predicted), style="ut.count")
        + Text(f" needed for {span}")
    )


def _render_error(result: ServiceResult, console: Console) -> None:
    msg = result.error.message if result.error else "Unknown error"
    console.print(
        Text("ERROR", style="ut.error") + Text(f"  {result.op}", style="ut.op") + Text(f" — {msg}")
    )


_OP_RENDERERS: dict[str, _Renderer] = {
    "use": _render_use,
    "list": _render_list,
    "show": _render_show,
    "need": _render_need,
}
