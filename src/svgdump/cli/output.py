"""Console output helpers for the CLI.

Dump output is written verbatim to stdout. Diagnostics go through a Rich
console bound to stderr so they never mix with the dump.
"""

import typer
from rich.console import Console
from rich.markup import escape

console = Console()
error_console = Console(stderr=True, emoji=False)


def print_line(line: str) -> None:
    """Write one line of dump output to stdout without any markup processing."""
    typer.echo(line)


def print_version(version: str) -> None:
    """Print application name and version."""
    console.print(f"[bold]svgdump[/bold] v{version}", soft_wrap=True)


def print_error(message: str) -> None:
    """Print a single-line error message to stderr.

    Args:
        message: Error description
    """
    error_console.print(f"[bold red]Error:[/bold red] {escape(message)}", soft_wrap=True)
