"""Shared utilities — small, dependency-free helpers.

Rules
-----
* No business logic.
* No I/O.
* Importable by any layer.
"""

from __future__ import annotations

from collections.abc import Hashable, Iterable
from typing import Any, TypeVar

_T = TypeVar("_T", bound=Hashable)


def unique_in_order(items: Iterable[_T]) -> list[_T]:
    """Return *items* without duplicates, keeping the first occurrence."""
    seen: set[_T] = set()
    result: list[_T] = []
    for item in items:
        if item not in seen:
            seen.add(item)
            result.append(item)
    return result


def split_csv(value: str) -> tuple[str, ...]:
    """Split a comma-separated option value, dropping blank entries.

    An empty string yields an empty tuple, which callers treat as an
    explicit "none selected" answer.
    """
    return tuple(part.strip() for part in value.split(",") if part.strip())


def as_entries(value: Any) -> tuple[Any, ...]:
    """Coerce a list-valued answer into a tuple.

    ``None`` and empty values become ``()``; a bare string is one entry,
    not a sequence of characters.
    """
    if not value:
        return ()
    if isinstance(value, str):
        return (value,)
    return tuple(value)
