"""Exception hierarchy for svgdump."""


class SvgDumpError(Exception):
    """Base exception for all svgdump errors."""

    pass


class InputError(SvgDumpError):
    """Invalid command-line input."""

    def __init__(self, value: str, reason: str) -> None:
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid argument '{value}': {reason}")


class FontReadError(SvgDumpError):
    """Error reading a font file from disk."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to read font '{path}': {reason}")


class ContainerParseError(SvgDumpError):
    """The font container could not be parsed."""

    def __init__(self, path: str, details: str) -> None:
        self.path = path
        self.details = details
        super().__init__(f"Invalid font file '{path}': {details}")


class TableNotFoundError(ContainerParseError):
    """Requested table is not present in the font."""

    def __init__(self, path: str, tag: str) -> None:
        self.tag = tag
        super().__init__(path, f"no '{tag}' table")


class TableParseError(SvgDumpError):
    """The SVG table is malformed."""

    def __init__(self, message: str) -> None:
        super().__init__(f"Malformed SVG table: {message}")


class DocumentError(SvgDumpError):
    """Errors turning stored document bytes into SVG text."""

    pass


class DecompressError(DocumentError):
    """A gzip-compressed document could not be decompressed."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Failed to decompress SVG document: {reason}")


class EncodingError(DocumentError):
    """Document bytes are not valid UTF-8."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"SVG document is not valid UTF-8: {reason}")
