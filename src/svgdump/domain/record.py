"""Document record types for the SVG table.

This module defines the domain model for one entry of the SVG document list:
a closed glyph-id range mapped to a byte range inside the table.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class DocumentRecord:
    """One (glyph range, document range) entry of the SVG document list.

    The record does not own the document bytes. It stores the absolute offset
    and length of the document inside the SVG table buffer; the table resolves
    them on demand. Several records may point at the same bytes.

    Attributes:
        start_glyph_id: First glyph id covered (inclusive)
        end_glyph_id: Last glyph id covered (inclusive)
        offset: Absolute offset of the document in the SVG table buffer
        length: Length of the stored document in bytes
    """

    start_glyph_id: int
    end_glyph_id: int
    offset: int
    length: int

    @property
    def end(self) -> int:
        """Exclusive end offset of the document in the table buffer."""
        return self.offset + self.length

    def contains(self, glyph_id: int) -> bool:
        """Check whether a glyph id falls in this record's closed interval.

        Args:
            glyph_id: Glyph id to test

        Returns:
            True if start_glyph_id <= glyph_id <= end_glyph_id
        """
        return self.start_glyph_id <= glyph_id <= self.end_glyph_id

    def document(self, buffer: bytes) -> bytes:
        """Resolve the stored document bytes against the table buffer."""
        return buffer[self.offset:self.end]
