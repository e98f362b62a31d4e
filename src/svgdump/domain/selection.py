"""Glyph selection for document dumps."""

from dataclasses import dataclass

MAX_GLYPH_ID = 0xFFFF
ALL_TOKEN = "all"


@dataclass(frozen=True, slots=True)
class GlyphSelection:
    """Which documents a dump should print.

    Attributes:
        glyph_id: Glyph id to look up, or None to dump every record
    """

    glyph_id: int | None = None

    @property
    def is_all(self) -> bool:
        """True if every record should be dumped."""
        return self.glyph_id is None
