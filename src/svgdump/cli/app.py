"""CLI application entry point for svgdump.

This module provides the main CLI interface using Typer.
"""

from pathlib import Path
from typing import Annotated

import typer

from svgdump import __version__
from svgdump.cli.output import print_error, print_line, print_version
from svgdump.config import LoggingConfig, ReaderConfig, SvgDumpSettings
from svgdump.core import SvgDumper, parse_glyph_selection
from svgdump.exceptions import InputError, SvgDumpError
from svgdump.utils import DumpLogger, configure_logging

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")

# Create the Typer app
app = typer.Typer(
    name="svgdump",
    help="Dump the SVG documents stored in an OpenType font's SVG table.",
    add_completion=False,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        print_version(__version__)
        raise typer.Exit()


@app.command()
def dump(
    font: Annotated[
        Path,
        typer.Argument(
            help="Path to an SVGinOT font file",
            show_default=False,
        ),
    ],
    glyph_id: Annotated[
        str | None,
        typer.Argument(
            help="Glyph id whose SVG document to print, or 'all' for every document",
            show_default=False,
        ),
    ] = None,
    font_number: Annotated[
        int,
        typer.Option(
            "--font-number",
            "-n",
            help="Font index inside a TTC/OTC collection",
            min=0,
        ),
    ] = 0,
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            help="Write detailed logs to file",
        ),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option(
            "--log-level",
            help="Logging level (DEBUG|INFO|WARNING|ERROR)",
        ),
    ] = "WARNING",
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Print SHA-256 digests of the SVG documents in FONT, or dump documents.

    Without GLYPH_ID, prints one line per document record:

        <start glyph> → <end glyph>: <sha256 of stored bytes>

    With GLYPH_ID, prints the SVG document of the first record covering that
    glyph. With 'all', prints every document in table order. Compressed
    documents are expanded.

    Example:
        svgdump EmojiOne.otf 42
    """
    try:
        if log_level.upper() not in LOG_LEVELS:
            raise InputError(log_level, f"log level must be one of {', '.join(LOG_LEVELS)}")

        selection = parse_glyph_selection(glyph_id) if glyph_id is not None else None

        settings = SvgDumpSettings(
            reader=ReaderConfig(font_number=font_number),
            logging=LoggingConfig(log_file=log_file, log_level=log_level),
        )

        logger = configure_logging(
            log_file=settings.logging.log_file,
            console_level=settings.logging.log_level,
            file_level=settings.logging.file_log_level,
        )
        dump_logger = DumpLogger(logger.bind(font=str(font)))

        dumper = SvgDumper.from_font(font, settings.reader, dump_logger)

        if selection is None:
            lines = dumper.digest_lines()
        else:
            lines = dumper.dump_lines(selection)

        for line in lines:
            print_line(line)

        dump_logger.log_summary()

    except SvgDumpError as e:
        print_error(str(e))
        raise typer.Exit(code=1)
    except OSError as e:
        print_error(str(e))
        raise typer.Exit(code=1)


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
