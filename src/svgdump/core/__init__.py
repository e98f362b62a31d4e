"""Core SVG table algorithms for svgdump.

This module contains:

- SVG table parsing (header validation, lazy record iteration)
- Document materialization (gzip sniffing, decompression, UTF-8 decoding)
- Document digests
- Dump orchestration for the digest and document modes

Key functions:
- looks_like_gzip: Sniff the gzip magic prefix
- materialize_document: Turn stored document bytes into SVG text
- document_digest: SHA-256 of stored document bytes
- parse_glyph_selection: Parse the glyph-id argument

Key classes:
- SvgTable: Parsed view of an SVG table buffer
- SvgDumper: Produces digest and document output lines
"""

from svgdump.core.digest import document_digest
from svgdump.core.dumper import SvgDumper, format_digest_line, parse_glyph_selection
from svgdump.core.materializer import (
    GZIP_MAGIC,
    decompress_document,
    looks_like_gzip,
    materialize_document,
)
from svgdump.core.table import SvgTable

__all__ = [
    "GZIP_MAGIC",
    "SvgDumper",
    "SvgTable",
    "decompress_document",
    "document_digest",
    "format_digest_line",
    "looks_like_gzip",
    "materialize_document",
    "parse_glyph_selection",
]
