"""Shared fixtures for building SVG tables and font files."""

import gzip
import struct
from collections.abc import Callable, Sequence
from pathlib import Path

import pytest
from fontTools.ttLib import TTFont
from fontTools.ttLib.tables.DefaultTable import DefaultTable

SVG_DOC = b'<svg xmlns="http://www.w3.org/2000/svg"><rect id="glyph1" width="10" height="10"/></svg>'

DocSpec = tuple[int, int, bytes]


def build_svg_table(docs: Sequence[DocSpec], version: int = 0) -> bytes:
    """Build raw SVG table bytes.

    Identical document payloads are stored once and shared between records.
    """
    header_size = 10
    list_header_size = 2 + 12 * len(docs)

    payload = bytearray()
    offsets: dict[bytes, int] = {}
    records = bytearray()
    for start, end, data in docs:
        if data not in offsets:
            offsets[data] = list_header_size + len(payload)
            payload += data
        records += struct.pack(">HHLL", start, end, offsets[data], len(data))

    header = struct.pack(">HLL", version, header_size, 0)
    return header + struct.pack(">H", len(docs)) + bytes(records) + bytes(payload)


def gzip_bytes(data: bytes) -> bytes:
    """Gzip-compress bytes with a fixed timestamp."""
    return gzip.compress(data, mtime=0)


@pytest.fixture
def svg_table_factory() -> Callable[..., bytes]:
    """Factory building raw SVG table bytes from (start, end, bytes) specs."""
    return build_svg_table


@pytest.fixture
def font_factory(tmp_path: Path) -> Callable[..., Path]:
    """Factory writing a font file containing the given raw tables."""

    def _make(tables: dict[str, bytes], name: str = "test.ttf") -> Path:
        font = TTFont()
        for tag, data in tables.items():
            table = DefaultTable(tag)
            table.data = data
            font[tag] = table
        path = tmp_path / name
        font.save(str(path))
        return path

    return _make


@pytest.fixture
def svg_font(font_factory: Callable[..., Path]) -> Path:
    """Font with a single uncompressed document covering glyphs 10..12."""
    return font_factory({"SVG ": build_svg_table([(10, 12, b"<svg/>")])})


@pytest.fixture
def mixed_svg_table() -> bytes:
    """SVG table with unsorted ranges, a compressed and a shared document."""
    return build_svg_table(
        [
            (20, 20, b"<svg id='b'/>"),
            (1, 3, gzip_bytes(SVG_DOC)),
            (7, 7, b"<svg id='b'/>"),
        ]
    )


@pytest.fixture
def svg_doc() -> bytes:
    """Plain SVG document bytes."""
    return SVG_DOC


@pytest.fixture
def gzip_compress() -> Callable[[bytes], bytes]:
    """Deterministic gzip compression helper."""
    return gzip_bytes
