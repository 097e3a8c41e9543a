"""Text versus binary content sniffing."""

from __future__ import annotations

import os
from typing import BinaryIO

SNIFF_BYTES = 1024

# The upper half of the byte range is accepted wholesale.
_TEXT_CHARS = bytes(
    {7, 8, 9, 10, 11, 12, 13, 27} | set(range(0x20, 0x7F)) | set(range(0x80, 0x100))
)


def is_text(stream: BinaryIO) -> bool:
    """Return True when the first kilobyte of ``stream`` looks like text.

    An empty stream counts as text.
    """
    return not stream.read(SNIFF_BYTES).translate(None, _TEXT_CHARS)


def file_is_text(path: str | os.PathLike[str]) -> bool:
    """Open ``path`` and sniff its leading bytes with :func:`is_text`."""
    with open(path, "rb") as fh:
        return is_text(fh)


__all__ = ["SNIFF_BYTES", "is_text", "file_is_text"]
