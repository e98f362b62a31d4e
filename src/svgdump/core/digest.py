"""Content digests for stored SVG documents."""

import hashlib


def document_digest(data: bytes) -> str:
    """Return the lowercase hex SHA-256 of stored document bytes.

    The digest covers the bytes as stored in the table, so a compressed
    document hashes its gzip stream, not the decompressed markup.
    """
    return hashlib.sha256(data).hexdigest()
