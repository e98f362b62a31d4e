"""Logging utilities for svgdump."""

import logging
import sys
from dataclasses import dataclass
from pathlib import Path

import structlog

_HANDLER_NAME = "svgdump"


@dataclass
class DumpStats:
    """Statistics from a dump run."""

    records_visited: int = 0
    documents_materialized: int = 0
    documents_decompressed: int = 0
    digests_computed: int = 0


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "WARNING",
    file_level: str = "DEBUG",
) -> structlog.stdlib.BoundLogger:
    """Configure dual-output structured logging.

    Console output goes to stderr so that stdout only carries dump output.

    Args:
        log_file: Path to log file (no file logging if None)
        console_level: Logging level for console output
        file_level: Logging level for file output

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)
    for handler in list(root_logger.handlers):
        if handler.get_name() == _HANDLER_NAME:
            root_logger.removeHandler(handler)
            handler.close()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.set_name(_HANDLER_NAME)
    console_handler.setLevel(getattr(logging, console_level.upper()))
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    root_logger.addHandler(console_handler)

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.set_name(_HANDLER_NAME)
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        root_logger.addHandler(file_handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger("svgdump")
    logger.debug(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=console_level,
    )

    return logger


class DumpLogger:
    """Logger for tracking dump progress and statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger) -> None:
        self._logger = logger
        self._stats = DumpStats()

    def log_table_parsed(self, version: int, record_count: int, size: int) -> None:
        """Log SVG table header details."""
        self._logger.debug(
            "SVG table parsed",
            version=version,
            records=record_count,
            size=size,
        )

    def log_record(self, start_glyph_id: int, end_glyph_id: int, length: int) -> None:
        """Log a visited document record."""
        self._logger.debug(
            "Document record",
            start=start_glyph_id,
            end=end_glyph_id,
            length=length,
        )
        self._stats.records_visited += 1

    def log_materialized(self, start_glyph_id: int, compressed: bool) -> None:
        """Log a document turned into text."""
        self._logger.debug(
            "Document materialized",
            start=start_glyph_id,
            compressed=compressed,
        )
        self._stats.documents_materialized += 1
        if compressed:
            self._stats.documents_decompressed += 1

    def log_digest(self, start_glyph_id: int, digest: str) -> None:
        """Log a computed document digest."""
        self._logger.debug("Document digest", start=start_glyph_id, sha256=digest)
        self._stats.digests_computed += 1

    def log_no_match(self, glyph_id: int) -> None:
        """Log a glyph id no record covers."""
        self._logger.info("No SVG document for glyph", glyph_id=glyph_id)

    def log_summary(self) -> None:
        """Log final run statistics."""
        self._logger.debug(
            "Dump complete",
            records=self._stats.records_visited,
            materialized=self._stats.documents_materialized,
            decompressed=self._stats.documents_decompressed,
            digests=self._stats.digests_computed,
        )

    @property
    def stats(self) -> DumpStats:
        """Get current dump statistics."""
        return self._stats
