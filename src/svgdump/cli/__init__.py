"""Command-line interface for svgdump.

This module provides the CLI using Typer, with Rich used for
diagnostics on stderr.
"""

from svgdump.cli.app import app, cli, main

__all__ = ["app", "cli", "main"]
