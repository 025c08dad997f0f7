"""Rich renderers for ServiceResult in verbose mode.

Each renderer writes to a Rich Console (backed by StringIO).  The caller
extracts the rendered text via ``get_output(console)``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from soliddemo.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from soliddemo.services.result import ServiceResult


def render_verbose(result: ServiceResult) -> str:
    """Render demo lines followed by the result's values.

    ``lines`` and ``sections`` are omitted from the value block since the
    lines are already printed above it.
    """
    console = create_console()
    for line in result.lines:
        console.print(Text(line), soft_wrap=True)

    console.print()
    console.print(Text("OK", style="demo.ok"), Text(f"  {result.op}", style="demo.op"))
    for key, value in result.data.items():
        if key in ("lines", "sections"):
            continue
        if isinstance(value, list) and value and isinstance(value[0], dict):
            _table(console, key, value)
        else:
            _field(console, key, value)
    for warning in result.warnings:
        console.print(Text(f"  warning: {warning}", style="demo.error"))
    return get_output(console).rstrip("\n")


def render_error(result: ServiceResult) -> str:
    console = create_console()
    msg = result.error.message if result.error else "Unknown error"
    console.print(Text("ERROR", style="demo.error"), Text(f"  {result.op} — {msg}"))
    return get_output(console).rstrip("\n")


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    style = "demo.number" if isinstance(value, (int, float)) else "demo.value"
    shown = f"{value:.2f}" if isinstance(value, float) else str(value)
    console.print(Text(f"  {key}: ", style="demo.key"), Text(shown, style=style), sep="")


def _table(console: Console, title: str, rows: list[dict[str, Any]]) -> None:
    table = Table(title=title, title_justify="left", show_edge=False, pad_edge=False)
    columns = list(rows[0])
    for column in columns:
        table.add_column(column)
    for row in rows:
        table.add_row(*(Text(str(row.get(column, ""))) for column in columns))
    console.print(table)
