"""Identify files by extension, special filename, shebang, and content."""

from importlib import metadata as _metadata

from file_identify.detection import (
    FileIdentifier,
    IdentifyOptions,
    ShebangCommand,
    file_is_text,
    is_text,
    parse_shebang,
    parse_shebang_from_file,
    tags_from_filename,
    tags_from_interpreter,
    tags_from_path,
)
from file_identify.errors import IdentifyError, InvalidPathError, PathNotFoundError
from file_identify.tables import DEFAULT_TABLES, LookupTables
from file_identify.tags import (
    BINARY,
    DIRECTORY,
    ENCODING_TAGS,
    EXECUTABLE,
    FILE,
    MODE_TAGS,
    NON_EXECUTABLE,
    SOCKET,
    SYMLINK,
    TEXT,
    TYPE_TAGS,
)

__all__ = [
    "__version__",
    "BINARY",
    "DEFAULT_TABLES",
    "DIRECTORY",
    "ENCODING_TAGS",
    "EXECUTABLE",
    "FILE",
    "FileIdentifier",
    "IdentifyError",
    "IdentifyOptions",
    "InvalidPathError",
    "LookupTables",
    "MODE_TAGS",
    "NON_EXECUTABLE",
    "PathNotFoundError",
    "SOCKET",
    "SYMLINK",
    "ShebangCommand",
    "TEXT",
    "TYPE_TAGS",
    "file_is_text",
    "is_text",
    "parse_shebang",
    "parse_shebang_from_file",
    "tags_from_filename",
    "tags_from_interpreter",
    "tags_from_path",
]


def __getattr__(name: str):
    if name == "__version__":
        return _metadata.version("file-identify")
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


def __dir__():
    return sorted(list(globals().keys()) + ["__version__"])
