"""
CLI-specific formatting functions for human-readable output.

This module handles presentation formatting for the CLI, including:
- Rich tables for catalogue listings and run summaries
- List formatting for detailed views
- JSON and YAML serialization
"""

import json
from typing import Any, Dict, List

import yaml
from rich.console import Console
from rich.table import Table

OUTPUT_FORMATS = ["json", "yaml", "table", "list"]


def format_output(data: Any, format_type: str) -> str:
    """Format data according to the specified format type."""
    if format_type == "yaml":
        return yaml.safe_dump(data, default_flow_style=False, sort_keys=False)
    elif format_type == "table":
        return format_table_output(data)
    elif format_type == "list":
        return format_list_output(data)
    else:
        return json.dumps(data, indent=2, default=str)


def format_table_output(data: Any) -> str:
    """Format data as a table."""
    if isinstance(data, dict) and "demos" in data:
        return format_demos_table(data["demos"])
    elif isinstance(data, dict) and "results" in data:
        return format_results_table(data["results"])
    elif isinstance(data, dict) and "demo" in data:
        return format_demos_table([data["demo"]])
    else:
        # Fallback to JSON for unknown data structures
        return json.dumps(data, indent=2, default=str)


def format_list_output(data: Any) -> str:
    """Format data as a detailed list."""
    if isinstance(data, dict) and "demos" in data:
        return format_demos_list(data["demos"])
    elif isinstance(data, dict) and "demo" in data:
        return format_demos_list([data["demo"]])
    else:
        return json.dumps(data, indent=2, default=str)


def _render(table: Table) -> str:
    console = Console(width=120, legacy_windows=False, force_terminal=False)
    with console.capture() as capture:
        console.print(table)
    return capture.get()


def format_demos_table(demos: List[Dict]) -> str:
    """Format catalogue entries as a rich table."""
    if not demos:
        return "No demos found."

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Name", style="cyan")
    table.add_column("Title", style="green")
    table.add_column("Category", style="blue")
    table.add_column("Summary")
    for demo in demos:
        table.add_row(
            demo.get("name", "N/A"),
            demo.get("title", "N/A"),
            demo.get("category", "N/A"),
            demo.get("summary", ""),
        )
    return _render(table)


def format_demos_list(demos: List[Dict]) -> str:
    """Format catalogue entries as a detailed list."""
    if not demos:
        return "No demos found."

    lines = []
    for i, demo in enumerate(demos):
        if i > 0:
            lines.append("")  # Blank line between demos
        lines.append(f"Demo: {demo.get('name', 'N/A')}")
        lines.append(f"  Title: {demo.get('title', 'N/A')}")
        lines.append(f"  Category: {demo.get('category', 'N/A')}")
        lines.append(f"  Summary: {demo.get('summary', '')}")
    return "\n".join(lines)


def format_results_table(results: List[Dict]) -> str:
    """Format run results as a rich table."""
    if not results:
        return "No demos were run."

    table = Table(show_header=True, header_style="bold magenta", title="Run Summary")
    table.add_column("Demo", style="cyan")
    table.add_column("Category", style="blue")
    table.add_column("Status")
    table.add_column("Lines", justify="right")
    table.add_column("Duration (ms)", justify="right")
    for result in results:
        status = result.get("status", "N/A")
        if result.get("error"):
            status = f"{status}: {result['error']}"
        table.add_row(
            result.get("name", "N/A"),
            result.get("category", "N/A"),
            status,
            str(result.get("lines", 0)),
            f"{result.get('duration_ms', 0.0):.1f}",
        )
    return _render(table)
