"""Resolve shebang interpreter tokens to tags."""

from __future__ import annotations

from file_identify.tables import DEFAULT_TABLES, LookupTables


def tags_from_interpreter(interpreter: str, tables: LookupTables = DEFAULT_TABLES) -> set[str]:
    """Return the tags for an interpreter name or path.

    Version suffixes are dropped one dotted segment at a time, so
    ``/usr/bin/python3.11.2`` resolves through ``python3.11`` to ``python3``.

    Args:
        interpreter: Interpreter token, usually the first word of a shebang.
        tables: Lookup tables to consult.

    Returns:
        set[str]: Tags for the first matching name, or an empty set.
    """
    current = interpreter.rsplit("/", 1)[-1]
    while current:
        tags = tables.interpreter_tags(current)
        if tags:
            return set(tags)
        current, dot, _ = current.rpartition(".")
        if not dot:
            break
    return set()


__all__ = ["tags_from_interpreter"]
