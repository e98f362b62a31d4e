"""Domain models for svgdump.

Key classes:
- DocumentRecord: A glyph-id range mapped to a document byte range
- GlyphSelection: Which glyph (or all) a dump should print
"""

from svgdump.domain.record import DocumentRecord
from svgdump.domain.selection import ALL_TOKEN, MAX_GLYPH_ID, GlyphSelection

__all__: list[str] = [
    "ALL_TOKEN",
    "MAX_GLYPH_ID",
    "DocumentRecord",
    "GlyphSelection",
]
