"""Tag constants and the disjoint tag groups used in classification results."""

from __future__ import annotations

DIRECTORY = "directory"
SYMLINK = "symlink"
SOCKET = "socket"
FILE = "file"
EXECUTABLE = "executable"
NON_EXECUTABLE = "non-executable"
TEXT = "text"
BINARY = "binary"

TYPE_TAGS = frozenset({DIRECTORY, FILE, SYMLINK, SOCKET})
MODE_TAGS = frozenset({EXECUTABLE, NON_EXECUTABLE})
ENCODING_TAGS = frozenset({BINARY, TEXT})


def is_type_tag(tag: str) -> bool:
    return tag in TYPE_TAGS


def is_mode_tag(tag: str) -> bool:
    return tag in MODE_TAGS


def is_encoding_tag(tag: str) -> bool:
    return tag in ENCODING_TAGS


__all__ = [
    "DIRECTORY",
    "SYMLINK",
    "SOCKET",
    "FILE",
    "EXECUTABLE",
    "NON_EXECUTABLE",
    "TEXT",
    "BINARY",
    "TYPE_TAGS",
    "MODE_TAGS",
    "ENCODING_TAGS",
    "is_type_tag",
    "is_mode_tag",
    "is_encoding_tag",
]
