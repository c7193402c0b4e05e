"""
Output Rendering.

Fixed-order "Label: value" blocks for single records and rich tables for
collections. Command output goes to stdout; errors go to stderr.
"""

import json
from collections.abc import Sequence
from typing import Any

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

console = Console()
err_console = Console(stderr=True)

# (header, attribute) pairs
Columns = Sequence[tuple[str, str]]


def format_value(value: Any) -> str:
    """Render a field value the way the API spells it."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (dict, list)):
        return to_json(value)
    return str(value)


def to_json(value: Any) -> str:
    """Compact JSON, key order as served."""
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False)


def print_fields(fields: Sequence[tuple[str, Any]]) -> None:
    """Print one "Label: value" line per field, in the given order."""
    for label, value in fields:
        typer.echo(f"{label}: {format_value(value)}")


def print_block(label: str, body: str) -> None:
    """Print a label line followed by a verbatim body."""
    typer.echo(f"{label}:")
    typer.echo(body)


def print_table(items: Sequence[Any], columns: Columns) -> None:
    """
    Print items as a table with one column per (header, attribute) pair.

    Prints nothing at all for an empty sequence. Cells are never wrapped:
    the table is rendered at its natural width even on narrow terminals.
    """
    if not items:
        return

    rows = [[format_value(getattr(item, attr)) for _, attr in columns] for item in items]
    widths = [
        max([len(header)] + [len(row[i]) for row in rows])
        for i, (header, _) in enumerate(columns)
    ]

    table = Table(box=None, show_edge=False, pad_edge=False, header_style="bold")
    for header, _ in columns:
        table.add_column(header, no_wrap=True)

    for row in rows:
        table.add_row(*(escape(cell) for cell in row))

    natural_width = sum(widths) + 2 * (len(columns) - 1)
    Console(width=max(console.width, natural_width)).print(table)


def print_message(message: str) -> None:
    typer.echo(message)


def print_error(message: str) -> None:
    err_console.print(f"[red]Error:[/red] {escape(message)}", soft_wrap=True)
