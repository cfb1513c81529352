"""
CLI Output Utilities

Machine mode prints JSON to stdout; human mode renders rich tables.
"""

import json
from typing import Any, Dict, List, Sequence

import typer
from rich.console import Console
from rich.table import Table

from phpsolver.cli.config import CLIConfig

_console = Console()


def emit(payload: Dict[str, Any]) -> None:
    """Print a result payload as JSON."""
    typer.echo(json.dumps(payload, indent=2, sort_keys=True))


def emit_table(title: str, columns: Sequence[str], rows: List[Sequence[Any]]) -> None:
    """Render rows as a rich table."""
    table = Table(title=title)
    for i, column in enumerate(columns):
        table.add_column(column, style="cyan" if i == 0 else None)
    for row in rows:
        table.add_row(*(str(cell) for cell in row))
    _console.print(table)


def emit_error(message: str) -> None:
    """Report an error on stderr in either mode."""
    if CLIConfig.is_machine_mode():
        typer.echo(json.dumps({"error": message}), err=True)
    else:
        Console(stderr=True).print(f"[bold red]Error:[/bold red] {message}")
