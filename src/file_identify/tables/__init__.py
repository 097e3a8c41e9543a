"""Read-only lookup tables consulted by the classifier."""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterable, Mapping

from .extensions import EXTENSIONS, EXTENSIONS_NEED_BINARY_CHECK, NAMES
from .interpreters import INTERPRETERS

_EMPTY: frozenset[str] = frozenset()


def _freeze(mapping: Mapping[str, Iterable[str]]) -> Mapping[str, frozenset[str]]:
    return MappingProxyType({key: frozenset(tags) for key, tags in mapping.items()})


@dataclass(frozen=True, slots=True)
class LookupTables:
    """Immutable bundle of the extension, name, and interpreter mappings.

    Attributes:
        extensions: Lowercased extension to tags, each carrying an encoding tag.
        extensions_need_binary_check: Lowercased extension to tags whose encoding
            must be sniffed from content.
        names: Special filename or filename part to tags.
        interpreters: Interpreter basename to tags.
    """

    extensions: Mapping[str, frozenset[str]]
    extensions_need_binary_check: Mapping[str, frozenset[str]]
    names: Mapping[str, frozenset[str]]
    interpreters: Mapping[str, frozenset[str]]

    @classmethod
    def from_mappings(
        cls,
        *,
        extensions: Mapping[str, Iterable[str]] | None = None,
        extensions_need_binary_check: Mapping[str, Iterable[str]] | None = None,
        names: Mapping[str, Iterable[str]] | None = None,
        interpreters: Mapping[str, Iterable[str]] | None = None,
    ) -> "LookupTables":
        """Build a table bundle from arbitrary mappings, freezing every entry."""
        return cls(
            extensions=_freeze(extensions or {}),
            extensions_need_binary_check=_freeze(extensions_need_binary_check or {}),
            names=_freeze(names or {}),
            interpreters=_freeze(interpreters or {}),
        )

    def extension_tags(self, extension: str) -> frozenset[str]:
        return self.extensions.get(extension, _EMPTY)

    def binary_check_tags(self, extension: str) -> frozenset[str]:
        return self.extensions_need_binary_check.get(extension, _EMPTY)

    def name_tags(self, name: str) -> frozenset[str]:
        return self.names.get(name, _EMPTY)

    def interpreter_tags(self, interpreter: str) -> frozenset[str]:
        return self.interpreters.get(interpreter, _EMPTY)


DEFAULT_TABLES = LookupTables.from_mappings(
    extensions=EXTENSIONS,
    extensions_need_binary_check=EXTENSIONS_NEED_BINARY_CHECK,
    names=NAMES,
    interpreters=INTERPRETERS,
)

__all__ = [
    "LookupTables",
    "DEFAULT_TABLES",
    "EXTENSIONS",
    "EXTENSIONS_NEED_BINARY_CHECK",
    "NAMES",
    "INTERPRETERS",
]
