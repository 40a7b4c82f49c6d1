"""Console output utilities."""

from __future__ import annotations

import typer
from rich.console import Console
from rich.markup import escape

__all__ = [
    "USAGE",
    "error_console",
    "print_error",
    "print_match",
    "print_usage",
]

USAGE = "usage: best [-fdwpecrsi] argument"

error_console = Console(stderr=True)


def print_match(value: str) -> None:
    """Print the winning candidate to stdout exactly as read."""
    typer.echo(value)


def print_error(message: str) -> None:
    """Print an error message to stderr."""
    error_console.print(
        f"[red]✗[/red] {escape(message)}", markup=True, highlight=False
    )


def print_usage() -> None:
    """Print the one-line usage summary to stderr."""
    error_console.print(USAGE, markup=False, highlight=False)
