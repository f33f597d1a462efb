"""
CLI-specific formatting functions for human-readable output.

This module handles presentation formatting for the CLI:
- JSON and YAML output
- Rich tables for listings and route results
"""

import json
from typing import Any, Dict, List

import yaml
from rich.console import Console
from rich.table import Table

LIST_KEYS = ("algorithms", "constraints", "delivery_types")


def format_output(data: Any, format_type: str) -> str:
    """Format data according to the specified format type."""
    if format_type == "yaml":
        return yaml.safe_dump(data, default_flow_style=False, sort_keys=False)
    elif format_type == "table":
        return format_table_output(data)
    else:
        # Default to JSON
        return json.dumps(data, indent=2, default=str)


def format_table_output(data: Any) -> str:
    """Format data as a table."""
    if isinstance(data, dict):
        for key in LIST_KEYS:
            if key in data:
                return _render(_rows_table(data[key]))
        return _render(_key_value_table(data))
    # Fallback to JSON for unknown data structures
    return json.dumps(data, indent=2, default=str)


def _rows_table(rows: List[Dict[str, Any]]) -> Table:
    table = Table(show_header=True, header_style="bold magenta")
    if not rows:
        table.add_column("Result")
        table.add_row("No entries found.")
        return table

    columns = list(rows[0].keys())
    for column in columns:
        table.add_column(column.replace("_", " ").title(), style="cyan" if column == "name" else None)
    for row in rows:
        table.add_row(*[_cell(row.get(column)) for column in columns])
    return table


def _key_value_table(data: Dict[str, Any]) -> Table:
    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Field", style="cyan")
    table.add_column("Value", style="green")
    for key, value in data.items():
        table.add_row(key, _cell(value))
    return table


def _cell(value: Any) -> str:
    if value is None:
        return "-"
    if isinstance(value, dict):
        return " ".join(f"{k}={_cell(v)}" for k, v in value.items())
    if isinstance(value, (list, tuple)):
        return ", ".join(_cell(v) for v in value) or "-"
    return str(value)


def _render(table: Table) -> str:
    # Capture Rich output as string
    console = Console(width=120, legacy_windows=False, force_terminal=False)
    with console.capture() as capture:
        console.print(table)
    return capture.get()
