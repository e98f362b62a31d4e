"""Turn stored SVG documents into text.

Documents in the SVG table are either plain UTF-8 markup or a gzip stream
whose payload is UTF-8 markup. Compression is detected by sniffing the
first three bytes only.
"""

import zlib

from svgdump.exceptions import DecompressError, EncodingError

# gzip ID1, ID2 and the deflate compression method
GZIP_MAGIC = b"\x1f\x8b\x08"

# zlib window bits selecting the gzip header and trailer
_GZIP_WBITS = 16 + zlib.MAX_WBITS


def looks_like_gzip(data: bytes) -> bool:
    """Check whether document bytes start with the gzip magic prefix."""
    return data[:len(GZIP_MAGIC)] == GZIP_MAGIC


def decompress_document(data: bytes) -> bytes:
    """Decompress a gzip-wrapped document.

    Only the first gzip member is decoded; bytes stored after it are ignored.

    Args:
        data: Stored document bytes starting with the gzip magic

    Returns:
        Decompressed bytes

    Raises:
        DecompressError: If the stream is truncated or corrupt
    """
    decompressor = zlib.decompressobj(wbits=_GZIP_WBITS)
    try:
        output = bytearray(decompressor.decompress(data))
        output += decompressor.flush()
    except zlib.error as e:
        raise DecompressError(str(e)) from e

    if not decompressor.eof:
        raise DecompressError("truncated gzip stream")

    return bytes(output)


def materialize_document(data: bytes) -> str:
    """Return the SVG text of a stored document.

    Args:
        data: Stored document bytes, plain or gzip-compressed

    Returns:
        Decoded SVG markup

    Raises:
        DecompressError: If a gzip document cannot be decompressed
        EncodingError: If the (decompressed) bytes are not valid UTF-8
    """
    if looks_like_gzip(data):
        data = decompress_document(data)

    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as e:
        raise EncodingError(str(e)) from e
