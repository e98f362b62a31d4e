"""SVG table parsing.

This module reads the binary layout of the OpenType ``SVG `` table:

    SVG header (10 bytes)
        uint16  version
        Offset32 svgDocumentListOffset    (from start of table)
        uint32  reserved

    SVG document list (at svgDocumentListOffset)
        uint16  numEntries
        SVGDocumentRecord[numEntries]     (12 bytes each)
            uint16  startGlyphID
            uint16  endGlyphID
            Offset32 svgDocOffset         (from start of document list)
            uint32  svgDocLength

The table keeps the raw buffer and hands out DocumentRecord values holding
absolute offsets into it. Records are decoded lazily, in storage order, each
time the table is iterated.
"""

import struct
from collections.abc import Iterator

from svgdump.domain import DocumentRecord
from svgdump.exceptions import TableParseError

HEADER = struct.Struct(">HLL")
ENTRY_COUNT = struct.Struct(">H")
DOCUMENT_RECORD = struct.Struct(">HHLL")


class SvgTable:
    """Parsed view of an SVG table buffer.

    The header and the extent of the record array are validated on
    construction. Individual records are validated as they are read, so a
    single bad record only fails once iteration reaches it.

    Example:
        table = SvgTable.parse(font.getTableData("SVG "))
        for record in table:
            print(record.start_glyph_id, len(table.document(record)))
    """

    def __init__(self, data: bytes) -> None:
        """Parse the SVG table header.

        Args:
            data: Raw SVG table bytes

        Raises:
            TableParseError: If the header or record array is truncated
        """
        self._data = data

        if len(data) < HEADER.size:
            raise TableParseError(
                f"truncated header: table is {len(data)} bytes, need {HEADER.size}"
            )
        self.version, self.document_list_offset, _reserved = HEADER.unpack_from(data, 0)

        if self.document_list_offset + ENTRY_COUNT.size > len(data):
            raise TableParseError(
                f"document list offset {self.document_list_offset} "
                f"exceeds table length {len(data)}"
            )
        (self._count,) = ENTRY_COUNT.unpack_from(data, self.document_list_offset)

        self._records_offset = self.document_list_offset + ENTRY_COUNT.size
        records_end = self._records_offset + self._count * DOCUMENT_RECORD.size
        if records_end > len(data):
            raise TableParseError(
                f"{self._count} document records need {records_end} bytes, "
                f"table is {len(data)}"
            )

    @classmethod
    def parse(cls, data: bytes) -> "SvgTable":
        """Parse raw SVG table bytes.

        Args:
            data: Raw SVG table bytes

        Returns:
            SvgTable over the given buffer
        """
        return cls(data)

    @property
    def data(self) -> bytes:
        """The underlying table buffer."""
        return self._data

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[DocumentRecord]:
        return self.records()

    def records(self) -> Iterator[DocumentRecord]:
        """Iterate over document records in storage order.

        Each call starts a fresh pass over the buffer.

        Yields:
            DocumentRecord for each entry of the document list

        Raises:
            TableParseError: If a record is inconsistent or out of bounds
        """
        for index in range(self._count):
            yield self._read_record(index)

    def document(self, record: DocumentRecord) -> bytes:
        """Return the stored (possibly compressed) bytes of a record's document."""
        return record.document(self._data)

    def _read_record(self, index: int) -> DocumentRecord:
        position = self._records_offset + index * DOCUMENT_RECORD.size
        start, end, doc_offset, doc_length = DOCUMENT_RECORD.unpack_from(self._data, position)

        if end < start:
            raise TableParseError(
                f"record {index}: end glyph {end} is before start glyph {start}"
            )

        offset = self.document_list_offset + doc_offset
        if offset + doc_length > len(self._data):
            raise TableParseError(
                f"record {index}: document at offset {offset} with length {doc_length} "
                f"exceeds table length {len(self._data)}"
            )

        return DocumentRecord(
            start_glyph_id=start,
            end_glyph_id=end,
            offset=offset,
            length=doc_length,
        )
