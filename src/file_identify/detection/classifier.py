"""File classification combining metadata, filenames, shebangs, and content.

The decision procedure is shared by every entry point: :func:`tags_from_path`
runs it with default options, while :class:`FileIdentifier` threads an
immutable :class:`IdentifyOptions` value through the same steps so callers can
skip content sniffing or shebang parsing and register their own extensions.
"""

from __future__ import annotations

import logging
import os
import stat
from types import MappingProxyType
from typing import Dict, FrozenSet, Iterable, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, field_serializer, field_validator

from file_identify.errors import InvalidPathError, PathNotFoundError
from file_identify.tables import DEFAULT_TABLES, LookupTables
from file_identify.tags import (
    BINARY,
    DIRECTORY,
    ENCODING_TAGS,
    EXECUTABLE,
    FILE,
    NON_EXECUTABLE,
    SOCKET,
    SYMLINK,
    TEXT,
)

from .content import file_is_text
from .interpreter import tags_from_interpreter
from .permissions import is_executable
from .shebang import parse_shebang_from_file

LOGGER = logging.getLogger(__name__)

PathInput = Union[str, bytes, os.PathLike]


class IdentifyOptions(BaseModel):
    """Options controlling which identification steps run.

    Attributes:
        skip_content_analysis: Do not sniff file contents for text versus binary.
        skip_shebang_analysis: Do not read shebangs of executable files.
        custom_extensions: Lowercased extension to tags, consulted before the
            built-in tables.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    skip_content_analysis: bool = False
    skip_shebang_analysis: bool = False
    custom_extensions: Optional[Mapping[str, FrozenSet[str]]] = None

    @field_validator("custom_extensions")
    @classmethod
    def _lowercase_extensions(
        cls, value: Optional[Mapping[str, FrozenSet[str]]]
    ) -> Optional[Mapping[str, FrozenSet[str]]]:
        if value is None:
            return None
        return MappingProxyType({key.lstrip(".").lower(): tags for key, tags in value.items()})

    @field_serializer("custom_extensions")
    def _dump_extensions(
        self, value: Optional[Mapping[str, FrozenSet[str]]]
    ) -> Optional[Dict[str, FrozenSet[str]]]:
        return None if value is None else dict(value)

    def __hash__(self) -> int:
        custom = self.custom_extensions
        return hash(
            (
                self.skip_content_analysis,
                self.skip_shebang_analysis,
                None if custom is None else frozenset(custom.items()),
            )
        )


def _extension(filename: str) -> str:
    _, ext = os.path.splitext(filename)
    return ext[1:].lower()


def _is_utf8(value: str) -> bool:
    try:
        value.encode("utf-8")
    except UnicodeEncodeError:
        return False
    return True


def _coerce_path(path: PathInput) -> str:
    raw = os.fspath(path)
    if isinstance(raw, bytes):
        try:
            return raw.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise InvalidPathError(raw) from exc
    return raw


def tags_from_filename(filename: str, tables: LookupTables = DEFAULT_TABLES) -> set[str]:
    """Identify a file from its name alone, without touching the filesystem.

    Special names such as ``Dockerfile`` or ``setup.cfg`` are matched first,
    trying the whole name and then each dot-separated part. The lowercased
    extension then adds its own tags.

    Args:
        filename: Filename to inspect; any directory components are ignored.
        tables: Lookup tables to consult.

    Returns:
        set[str]: Matching tags, empty when the name is not recognized.
    """
    filename = os.path.basename(filename)
    tags: set[str] = set()

    for part in [filename, *filename.split(".")]:
        name_tags = tables.name_tags(part)
        if name_tags:
            tags.update(name_tags)
            break

    ext = _extension(filename)
    if ext:
        tags.update(tables.extension_tags(ext) or tables.binary_check_tags(ext))

    return tags


class FileIdentifier:
    """Configurable file identifier built up through chained calls.

    Each builder method returns a new identifier, leaving the receiver
    untouched, so a configured instance can be shared freely.

    Example:
        identifier = FileIdentifier().skip_content_analysis()
        tags = identifier.identify("script.py")
    """

    def __init__(
        self,
        options: IdentifyOptions | None = None,
        *,
        tables: LookupTables = DEFAULT_TABLES,
    ) -> None:
        self._options = options if options is not None else IdentifyOptions()
        self._tables = tables

    @property
    def options(self) -> IdentifyOptions:
        """Return the options this identifier runs with."""
        return self._options

    @property
    def tables(self) -> LookupTables:
        """Return the lookup tables this identifier consults."""
        return self._tables

    def skip_content_analysis(self) -> "FileIdentifier":
        """Return an identifier that never sniffs text versus binary."""
        return self._with(skip_content_analysis=True)

    def skip_shebang_analysis(self) -> "FileIdentifier":
        """Return an identifier that never reads shebang lines."""
        return self._with(skip_shebang_analysis=True)

    def with_custom_extensions(
        self, extensions: Mapping[str, Iterable[str]]
    ) -> "FileIdentifier":
        """Return an identifier that checks ``extensions`` before the built-in tables.

        Args:
            extensions: Extension (case-insensitive, no leading dot) to tags.
        """
        frozen = {key: frozenset(tags) for key, tags in extensions.items()}
        return self._with(custom_extensions=frozen)

    def identify(self, path: PathInput) -> set[str]:
        """Identify the filesystem entry at ``path``.

        Args:
            path: Path to inspect. Symlinks are reported, not followed.

        Returns:
            set[str]: Tags describing the entry.

        Raises:
            PathNotFoundError: If the path cannot be stat'ed.
            InvalidPathError: If a bytes path is not valid UTF-8.
            OSError: If the file contents cannot be read.
        """
        path_str = _coerce_path(path)
        try:
            mode = os.lstat(path_str).st_mode
        except OSError as exc:
            raise PathNotFoundError(path_str) from exc

        if stat.S_ISDIR(mode):
            LOGGER.debug("%s: directory", path_str)
            return {DIRECTORY}
        if stat.S_ISLNK(mode):
            LOGGER.debug("%s: symlink", path_str)
            return {SYMLINK}
        if stat.S_ISSOCK(mode):
            LOGGER.debug("%s: socket", path_str)
            return {SOCKET}

        tags = {FILE}
        executable = is_executable(path_str, mode)
        tags.add(EXECUTABLE if executable else NON_EXECUTABLE)

        tags.update(self._filename_and_shebang_tags(path_str, executable))

        if not self._options.skip_content_analysis and not tags & ENCODING_TAGS:
            encoding = TEXT if file_is_text(path_str) else BINARY
            LOGGER.debug("%s: content sniffed as %s", path_str, encoding)
            tags.add(encoding)

        return tags

    def _filename_and_shebang_tags(self, path: str, executable: bool) -> set[str]:
        filename = os.path.basename(path)
        if not filename or not _is_utf8(filename):
            LOGGER.debug("%s: skipping filename analysis", path)
            return set()

        custom = self._options.custom_extensions
        if custom is not None:
            ext = _extension(filename)
            if ext and ext in custom:
                LOGGER.debug("%s: matched custom extension %r", path, ext)
                return set(custom[ext])

        tags = tags_from_filename(filename, self._tables)
        if tags:
            LOGGER.debug("%s: matched by filename", path)
            return tags

        if not executable or self._options.skip_shebang_analysis:
            return set()

        try:
            command = parse_shebang_from_file(path)
        except OSError as exc:
            LOGGER.debug("%s: could not read shebang: %s", path, exc)
            return set()
        if not command:
            return set()
        LOGGER.debug("%s: resolving shebang interpreter %r", path, command[0])
        return tags_from_interpreter(command[0], self._tables)

    def _with(self, **changes: object) -> "FileIdentifier":
        data = self._options.model_dump()
        data.update(changes)
        return FileIdentifier(IdentifyOptions.model_validate(data), tables=self._tables)


_DEFAULT_IDENTIFIER = FileIdentifier()


def tags_from_path(path: PathInput) -> set[str]:
    """Identify the filesystem entry at ``path`` with every step enabled.

    Raises:
        PathNotFoundError: If the path cannot be stat'ed.
        InvalidPathError: If a bytes path is not valid UTF-8.
        OSError: If the file contents cannot be read.
    """
    return _DEFAULT_IDENTIFIER.identify(path)


__all__ = [
    "IdentifyOptions",
    "FileIdentifier",
    "tags_from_path",
    "tags_from_filename",
]
