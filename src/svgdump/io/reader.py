"""Font reader for locating raw tables in font files.

This module provides the FontReader class, which loads a font file into
memory and hands out raw table bytes through fontTools without decompiling
them.
"""

import struct
from io import BytesIO
from pathlib import Path

from fontTools.ttLib import TTFont, TTLibError

from svgdump.exceptions import (
    ContainerParseError,
    FontReadError,
    TableNotFoundError,
)


class FontReader:
    """Loads TTF/OTF fonts and returns raw table data.

    The whole file is read into one buffer and opened lazily, so table
    lookups return the exact bytes declared in the table directory.

    Example:
        with FontReader(Path("font.otf")) as reader:
            data = reader.read_table_data("SVG ")
    """

    def __init__(self, font_path: Path, font_number: int = 0) -> None:
        """Initialize the font reader.

        Args:
            font_path: Path to the font file
            font_number: Face index when the file is a font collection
        """
        self._font_path = font_path
        self._font_number = font_number
        self._font: TTFont | None = None

    def load(self) -> None:
        """Load the font file.

        Raises:
            FontReadError: If the file cannot be read
            ContainerParseError: If fontTools cannot parse the font container
        """
        try:
            buffer = self._font_path.read_bytes()
        except OSError as e:
            raise FontReadError(str(self._font_path), e.strerror or str(e)) from e

        try:
            self._font = TTFont(BytesIO(buffer), lazy=True, fontNumber=self._font_number)
        except (TTLibError, struct.error) as e:
            raise ContainerParseError(str(self._font_path), str(e)) from e

    def read_table_data(self, tag: str) -> bytes:
        """Return the raw bytes of a table.

        Args:
            tag: Four-character table tag

        Returns:
            Table bytes exactly as stored in the font

        Raises:
            TableNotFoundError: If the font has no such table
            ContainerParseError: If the table data cannot be read
            RuntimeError: If font has not been loaded yet
        """
        font = self._require_font()

        if tag not in font:
            raise TableNotFoundError(str(self._font_path), tag)

        try:
            return font.getTableData(tag)
        except (TTLibError, struct.error) as e:
            raise ContainerParseError(str(self._font_path), str(e)) from e

    def close(self) -> None:
        """Close the font and free resources."""
        if self._font is not None:
            self._font.close()
            self._font = None

    def _require_font(self) -> TTFont:
        if self._font is None:
            raise RuntimeError("Font not loaded. Call load() first.")
        return self._font

    def __enter__(self) -> "FontReader":
        """Context manager entry."""
        self.load()
        return self

    def __exit__(self, _exc_type: object, _exc_val: object, _exc_tb: object) -> None:
        """Context manager exit."""
        self.close()
