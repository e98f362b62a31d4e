"""Dump orchestration for the SVG table.

This module drives the table reader and the document materializer for the
two output modes:

- Digest summary: one ``start → end: sha256`` line per record
- Document dump: the SVG text of one glyph's document, or of every record

Output is produced as a generator of lines so callers can stream it.
"""

from collections.abc import Iterator
from pathlib import Path

from svgdump.config import ReaderConfig
from svgdump.core.digest import document_digest
from svgdump.core.materializer import looks_like_gzip, materialize_document
from svgdump.core.table import SvgTable
from svgdump.domain import ALL_TOKEN, MAX_GLYPH_ID, DocumentRecord, GlyphSelection
from svgdump.exceptions import InputError
from svgdump.io import FontReader
from svgdump.utils import DumpLogger


def parse_glyph_selection(value: str) -> GlyphSelection:
    """Parse a glyph-id argument.

    Args:
        value: Either the literal ``all`` or a decimal glyph id

    Returns:
        GlyphSelection for the argument

    Raises:
        InputError: If the value is not ``all`` or a glyph id in 0..65535
    """
    if value == ALL_TOKEN:
        return GlyphSelection()

    digits = value[1:] if value.startswith("+") else value
    if not digits.isascii() or not digits.isdigit():
        raise InputError(value, f"expected '{ALL_TOKEN}' or a glyph id")

    glyph_id = int(digits)
    if glyph_id > MAX_GLYPH_ID:
        raise InputError(value, f"glyph id must be between 0 and {MAX_GLYPH_ID}")

    return GlyphSelection(glyph_id=glyph_id)


def format_digest_line(record: DocumentRecord, digest: str) -> str:
    """Format one digest summary line."""
    return f"{record.start_glyph_id} → {record.end_glyph_id}: {digest}"


class SvgDumper:
    """Produces digest summaries and document dumps for an SVG table.

    Example:
        dumper = SvgDumper.from_font(Path("emoji.otf"))
        for line in dumper.digest_lines():
            print(line)
    """

    def __init__(self, table: SvgTable, logger: DumpLogger | None = None) -> None:
        """Initialize the dumper.

        Args:
            table: Parsed SVG table
            logger: Optional logger collecting run statistics
        """
        self._table = table
        self._logger = logger

    @classmethod
    def from_font(
        cls,
        font_path: Path,
        config: ReaderConfig | None = None,
        logger: DumpLogger | None = None,
    ) -> "SvgDumper":
        """Read a font file and build a dumper over its SVG table.

        Args:
            font_path: Path to the font file
            config: Font and table selection settings
            logger: Optional logger collecting run statistics

        Returns:
            SvgDumper over the font's SVG table
        """
        config = config or ReaderConfig()
        with FontReader(font_path, font_number=config.font_number) as reader:
            data = reader.read_table_data(config.table_tag)

        table = SvgTable.parse(data)
        if logger is not None:
            logger.log_table_parsed(table.version, len(table), len(data))
        return cls(table, logger)

    @property
    def table(self) -> SvgTable:
        """The SVG table being dumped."""
        return self._table

    def digest_lines(self) -> Iterator[str]:
        """Yield one digest line per record, in storage order.

        Yields:
            ``"<start> → <end>: <sha256 hex>"`` for each record
        """
        for record in self._iter_records():
            digest = document_digest(self._table.document(record))
            if self._logger is not None:
                self._logger.log_digest(record.start_glyph_id, digest)
            yield format_digest_line(record, digest)

    def dump_lines(self, selection: GlyphSelection) -> Iterator[str]:
        """Yield document text for the selected glyph or for every record.

        For a single glyph id, only the first record covering it is dumped.
        No output is produced if no record covers it.

        Args:
            selection: Glyph id to dump, or all records

        Yields:
            SVG document text
        """
        for record in self._iter_records():
            if selection.is_all:
                yield self.materialize(record)
            elif record.contains(selection.glyph_id):
                yield self.materialize(record)
                return

        if not selection.is_all and self._logger is not None:
            self._logger.log_no_match(selection.glyph_id)

    def materialize(self, record: DocumentRecord) -> str:
        """Return the SVG text of a record's document."""
        data = self._table.document(record)
        text = materialize_document(data)
        if self._logger is not None:
            self._logger.log_materialized(record.start_glyph_id, looks_like_gzip(data))
        return text

    def _iter_records(self) -> Iterator[DocumentRecord]:
        for record in self._table:
            if self._logger is not None:
                self._logger.log_record(
                    record.start_glyph_id, record.end_glyph_id, record.length
                )
            yield record
