"""svgdump - Inspect the SVG table of OpenType fonts.

svgdump is a CLI tool that reads the "SVG in OpenType" table of a font file,
lists the glyph ranges it maps to SVG documents, and prints those documents,
transparently expanding gzip-compressed ones.

Example:
    $ svgdump EmojiOne.otf

This prints one line per document record with the glyph range and the SHA-256
of the stored document bytes. Passing a glyph id (or ``all``) prints the SVG
markup instead:

    $ svgdump EmojiOne.otf 42
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
