"""
CLI formatting functions.

This module handles presentation formatting for the CLI:
- JSON and YAML dumps
- Rich tables for lists of products, factories and combinations
"""

import json
from typing import Any, Dict, List

import yaml
from rich.console import Console
from rich.table import Table


def format_output(data: Any, format_type: str) -> str:
    """Format data according to the specified format type."""
    if format_type == "yaml":
        return yaml.safe_dump(data, default_flow_style=False, sort_keys=False).rstrip()
    elif format_type == "table":
        return format_table_output(data)
    else:
        # Default to JSON
        return json.dumps(data, indent=2, default=str)


def format_table_output(data: Any) -> str:
    """Format every list found in the data as a table."""
    if not isinstance(data, dict):
        return json.dumps(data, indent=2, default=str)

    sections = []
    for title, rows in data.items():
        if isinstance(rows, list):
            sections.append(format_rows_table(title, rows))
        else:
            sections.append(f"{title}: {rows}")
    return "\n".join(sections).rstrip()


def format_rows_table(title: str, rows: List[Any]) -> str:
    """Render a list of dictionaries (or plain values) as a Rich table."""
    if not rows:
        return f"No {title} found."

    table = Table(title=title.capitalize(), show_header=True, header_style="bold magenta")
    if all(isinstance(row, dict) for row in rows):
        columns = _collect_columns(rows)
        for column in columns:
            table.add_column(column.replace("_", " ").title())
        for row in rows:
            table.add_row(*(str(row.get(column, "")) for column in columns))
    else:
        table.add_column(title.capitalize())
        for row in rows:
            table.add_row(str(row))

    # Capture Rich output as string
    console = Console(width=120, legacy_windows=False, force_terminal=False)
    with console.capture() as capture:
        console.print(table)
    return capture.get()


def _collect_columns(rows: List[Dict[str, Any]]) -> List[str]:
    columns: List[str] = []
    for row in rows:
        for key in row:
            if key not in columns:
                columns.append(key)
    return columns
