"""Font I/O layer for svgdump.

This module handles reading font files using fonttools. It is the only
place that knows about the font container format; everything above it
works on raw table bytes.

Key classes:
- FontReader: Load fonts and fetch raw table data
"""

from svgdump.io.reader import FontReader

__all__ = [
    "FontReader",
]
