"""Unit tests for the Font I/O layer."""

from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest
from fontTools.ttLib import TTFont
from fontTools.ttLib.ttCollection import TTCollection

from svgdump.exceptions import (
    ContainerParseError,
    FontReadError,
    TableNotFoundError,
)
from svgdump.io.reader import FontReader


class TestFontReader:
    """Tests for FontReader class."""

    def test_init(self):
        """Test FontReader initialization."""
        path = Path("test.ttf")
        reader = FontReader(path)
        assert reader._font_path == path
        assert reader._font_number == 0
        assert reader._font is None

    def test_load_nonexistent_file(self, tmp_path):
        """Test loading a nonexistent file raises FontReadError."""
        reader = FontReader(tmp_path / "nonexistent.ttf")
        with pytest.raises(FontReadError, match="nonexistent.ttf"):
            reader.load()

    def test_load_directory(self, tmp_path):
        """Test loading a directory raises FontReadError."""
        with pytest.raises(FontReadError):
            FontReader(tmp_path).load()

    def test_load_not_a_font(self, tmp_path):
        """Test loading garbage raises ContainerParseError."""
        path = tmp_path / "garbage.ttf"
        path.write_bytes(b"this is not a font file at all")
        with pytest.raises(ContainerParseError, match="garbage.ttf"):
            FontReader(path).load()

    def test_load_empty_file(self, tmp_path):
        """Test loading an empty file raises ContainerParseError."""
        path = tmp_path / "empty.ttf"
        path.write_bytes(b"")
        with pytest.raises(ContainerParseError):
            FontReader(path).load()

    def test_read_before_load(self):
        """Test reading tables before loading raises RuntimeError."""
        reader = FontReader(Path("test.ttf"))
        with pytest.raises(RuntimeError, match="Font not loaded"):
            reader.read_table_data("SVG ")

    def test_read_table_data(self, font_factory, svg_table_factory):
        """Test the SVG table bytes come back exactly as stored."""
        data = svg_table_factory([(1, 2, b"<svg/>"), (3, 3, b"<svg id='x'/>")])
        path = font_factory({"SVG ": data, "cvt ": b"\x00\x01"})
        with FontReader(path) as reader:
            assert reader.read_table_data("SVG ") == data
            assert reader.read_table_data("cvt ") == b"\x00\x01"

    def test_missing_table(self, font_factory):
        """Test a font without an SVG table raises TableNotFoundError."""
        path = font_factory({"cvt ": b"\x00\x01"})
        with FontReader(path) as reader:
            with pytest.raises(TableNotFoundError, match="no 'SVG ' table") as exc_info:
                reader.read_table_data("SVG ")
        assert exc_info.value.tag == "SVG "
        assert isinstance(exc_info.value, ContainerParseError)

    def test_collection_face(self, font_factory, svg_table_factory, tmp_path):
        """Test selecting a face inside a font collection."""
        first = svg_table_factory([(1, 1, b"<svg id='one'/>")])
        second = svg_table_factory([(2, 2, b"<svg id='two'/>")])
        collection = TTCollection()
        collection.fonts = [
            TTFont(str(font_factory({"SVG ": first}, name="a.ttf"))),
            TTFont(str(font_factory({"SVG ": second}, name="b.ttf"))),
        ]
        path = tmp_path / "pair.ttc"
        collection.save(str(path))

        with FontReader(path, font_number=1) as reader:
            assert reader.read_table_data("SVG ") == second

        with pytest.raises(ContainerParseError):
            FontReader(path, font_number=5).load()

    @patch("svgdump.io.reader.TTFont")
    def test_context_manager(self, mock_ttfont, tmp_path):
        """Test FontReader as context manager."""
        mock_font = MagicMock()
        mock_ttfont.return_value = mock_font
        path = tmp_path / "test.ttf"
        path.write_bytes(b"\x00")

        with FontReader(path) as reader:
            assert reader._font is not None

        mock_font.close.assert_called_once()
        assert reader._font is None
