"""Errors raised while identifying filesystem entries."""

from __future__ import annotations


class IdentifyError(Exception):
    """Base exception for identification failures."""


class PathNotFoundError(IdentifyError):
    """Raised when a path cannot be stat'ed."""

    def __init__(self, path: str) -> None:
        super().__init__(f"{path} does not exist.")
        self.path = path


class InvalidPathError(IdentifyError):
    """Raised when a bytes path cannot be decoded as UTF-8."""

    def __init__(self, path: bytes) -> None:
        super().__init__(f"Path contains invalid UTF-8: {path!r}")
        self.path = path
