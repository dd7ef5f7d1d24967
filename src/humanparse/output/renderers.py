"""Rich rendering of ServiceResult for people.

Everything is printed into a StringIO-backed Console and returned as a
string. Rich drops ANSI codes when the target is not a terminal, which is
the case under Click's CliRunner and in pipes.
"""

from __future__ import annotations

from collections.abc import Callable
from io import StringIO
from typing import TYPE_CHECKING, Any

from rich.console import Console
from rich.table import Table
from rich.text import Text
from rich.theme import Theme
from rich.tree import Tree

if TYPE_CHECKING:
    from humanparse.services.result import ServiceResult

THEME = Theme(
    {
        "hp.ok": "bold green",
        "hp.error": "bold red",
        "hp.warning": "bold yellow",
        "hp.op": "bold cyan",
        "hp.key": "dim",
        "hp.input": "bold",
        "hp.value": "bold magenta",
    }
)

MISSING = "—"

_Renderer = Callable[[Console, "ServiceResult", bool], None]


def _console(width: int = 120) -> Console:
    return Console(file=StringIO(), theme=THEME, highlight=False, width=width)


def _text(console: Console) -> str:
    assert isinstance(console.file, StringIO)
    return console.file.getvalue().rstrip("\n")


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render *result* as styled text.

    Parse ops get a dedicated layout, anything else a key/value list.
    Verbose mode adds secondary fields and the telemetry tree.
    """
    console = _console()
    if not result.ok:
        _render_error(console, result, verbose)
        return _text(console)

    console.print(Text("OK", style="hp.ok"), Text(result.op, style="hp.op"), sep="  ")
    _OP_RENDERERS.get(result.op, _render_fields)(console, result, verbose)
    for warning in result.warnings:
        console.print(Text("  warning:", style="hp.warning"), warning)
    if verbose and result.meta:
        _render_meta(console, result.meta)
    return _text(console)


def render_quiet(result: ServiceResult) -> str:
    """One line for ``--quiet``: the value, or the error message."""
    if not result.ok:
        message = result.error.message if result.error else "unknown error"
        return f"ERROR: {result.op} — {message}"
    if result.value is None:
        return f"OK: {result.op}"
    return str(result.value)


def _line(console: Console, key: str, value: Any, style: str = "") -> None:
    console.print(Text(f"  {key}:", style="hp.key"), Text(str(value), style=style))


def _render_error(console: Console, result: ServiceResult, verbose: bool) -> None:
    err = result.error
    head = [Text("ERROR", style="hp.error"), Text(result.op, style="hp.op")]
    if err is None:
        console.print(*head, "unknown error", sep="  ")
        return
    console.print(*head, Text(err.code, style="hp.error"), err.message, sep="  ")
    if verbose:
        for key, value in err.detail.items():
            console.print(f"    {key}: {value!r}")


def _render_bytes(console: Console, result: ServiceResult, verbose: bool) -> None:
    _line(console, "input", repr(result.data.get("input")), "hp.input")
    _line(console, "value", f"{result.value} bytes", "hp.value")
    if verbose:
        _line(console, "int_type", result.data.get("int_type"))


def _render_duration(console: Console, result: ServiceResult, verbose: bool) -> None:
    _line(console, "input", repr(result.data.get("input")), "hp.input")
    _line(console, "value", f"{result.value} ns", "hp.value")
    _line(console, "seconds", result.data.get("seconds"))
    _line(console, "nanos", result.data.get("nanos"))


def _seconds_nanos(measure: dict[str, Any] | None) -> tuple[str, str]:
    if measure is None:
        return MISSING, MISSING
    return str(measure["seconds"]), f"{measure['nanos']:09d}"


def _render_time(console: Console, result: ServiceResult, verbose: bool) -> None:
    d = result.data
    _line(console, "input", repr(d.get("input")), "hp.input")
    if result.value is not None:
        _line(console, "value", result.value, "hp.value")

    table = Table(pad_edge=False)
    table.add_column("Measure", style="hp.key")
    table.add_column("Seconds", justify="right")
    table.add_column("Nanos", justify="right")
    table.add_row("unix", *_seconds_nanos(d.get("unix")))
    table.add_row("elapsed", *_seconds_nanos(d.get("elapsed")))
    if verbose:
        table.add_row("axis", *_seconds_nanos({"seconds": d["seconds"], "nanos": d["nanos"]}))
    console.print()
    console.print(table)


def _render_fields(console: Console, result: ServiceResult, verbose: bool) -> None:
    for key, value in result.data.items():
        _line(console, key, value)


def _span_tree(span: dict[str, Any], tree: Tree | None = None) -> Tree:
    ms = span.get("duration_ms", 0.0)
    style = "bold red" if ms > 100 else "yellow" if ms > 10 else "dim"
    label = Text.assemble((f"{ms:.3f}ms", style), "  ", span.get("name", "?"))
    annotations = span.get("annotations")
    if annotations:
        label.append("  (" + ", ".join(f"{k}={v}" for k, v in annotations.items()) + ")")
    node = Tree(label) if tree is None else tree.add(label)
    for child in span.get("children", []):
        _span_tree(child, node)
    return node


def _render_meta(console: Console, meta: dict[str, Any]) -> None:
    console.print()
    console.print(Text("  meta:", style="dim"))
    for key, value in meta.items():
        if key == "telemetry":
            console.print(_span_tree(value))
        else:
            console.print(f"    {key}: {value}")


_OP_RENDERERS: dict[str, _Renderer] = {
    "parse_bytes": _render_bytes,
    "parse_duration": _render_duration,
    "parse_time": _render_time,
}
