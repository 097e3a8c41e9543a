"""Shebang line parsing."""

from __future__ import annotations

import os
import stat
import sys
from typing import BinaryIO, Tuple

ShebangCommand = Tuple[str, ...]

MAX_SHEBANG_BYTES = 1024
_ENV = "/usr/bin/env"
_WHITESPACE = " \t\n\r\x0b\x0c"


def _is_printable(text: str) -> bool:
    return all(ch == "\t" or " " <= ch <= "~" for ch in text)


def parse_shebang(stream: BinaryIO) -> ShebangCommand:
    """Return the interpreter command named by a ``#!`` first line.

    ``/usr/bin/env`` and ``/usr/bin/env -S`` are unwrapped; every other word is
    kept literally. Lines that are not valid UTF-8, that carry non-ASCII or
    control characters, or that name no command give an empty tuple.

    Args:
        stream: Binary stream positioned at the start of the file.

    Returns:
        ShebangCommand: The command words, or ``()`` when there is no usable shebang.
    """
    line = stream.readline(MAX_SHEBANG_BYTES)
    if line.endswith(b"\n"):
        line = line[:-1]
    if line.endswith(b"\r"):
        line = line[:-1]

    try:
        decoded = line.decode("utf-8")
    except UnicodeDecodeError:
        return ()

    if not decoded.startswith("#!"):
        return ()

    command_line = decoded[2:].strip(_WHITESPACE)
    if not _is_printable(command_line):
        return ()

    parts = command_line.split()
    if not parts:
        return ()

    if parts[0] != _ENV:
        return tuple(parts)
    if len(parts) > 1 and parts[1] == "-S":
        return tuple(parts[2:])
    return tuple(parts[1:])


def parse_shebang_from_file(path: str | os.PathLike[str]) -> ShebangCommand:
    """Parse the shebang of an executable file.

    On POSIX, files without an execute bit return ``()`` without being opened.
    A missing path raises :class:`OSError`.
    """
    mode = os.stat(path).st_mode
    if sys.platform != "win32" and not stat.S_IMODE(mode) & 0o111:
        return ()
    with open(path, "rb") as fh:
        return parse_shebang(fh)


__all__ = ["MAX_SHEBANG_BYTES", "ShebangCommand", "parse_shebang", "parse_shebang_from_file"]
