"""Executable-bit detection across platforms."""

from __future__ import annotations

import os
import sys

_EXECUTE_BITS = 0o111
_WINDOWS_EXECUTABLE_EXTENSIONS = frozenset({"exe", "bat", "cmd"})


def is_executable(path: str | os.PathLike[str], mode: int) -> bool:
    """Return whether a regular file should be tagged executable.

    POSIX platforms inspect the permission bits of ``mode``. Windows has no
    execute bit, so the extension is checked instead.
    """
    if sys.platform == "win32":
        _, ext = os.path.splitext(os.fspath(path))
        return ext[1:].lower() in _WINDOWS_EXECUTABLE_EXTENSIONS
    return bool(mode & _EXECUTE_BITS)
