"""Text decoding utilities for StarDict files."""

from typing import Optional

DEFAULT_ENCODING = "utf-8"


def decode_headword(data: bytes, encoding: Optional[str] = None) -> str:
    """
    Decode a headword's bytes to text.

    StarDict stores all strings as UTF-8. Bytes that do not decode are
    replaced rather than raising, so a single bad headword cannot abort
    the parse of an otherwise valid index.

    Args:
        data: Headword bytes, without the NUL terminator
        encoding: Optional encoding override, defaults to UTF-8

    Returns:
        Decoded headword
    """
    if not data:
        return ""

    return data.decode(encoding or DEFAULT_ENCODING, errors="replace")
