"""CLI console helpers with optional Rich support.

This module avoids module-level imports of optional UI dependencies so
bootstrap paths (``--help``, ``--version``) and the ``context`` command
keep working even when Rich is not installed.
"""

from __future__ import annotations

import sys
from typing import Any

from agent_scaffold.exceptions import EnvironmentError


def _load_rich_console_class() -> type[Any]:
    """Return ``rich.console.Console`` or raise ``EnvironmentError``."""
    try:
        from rich.console import Console
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "rich is not installed. Install with: pip install rich",
        ) from exc
    return Console


def get_rich_console() -> Any:
    """Create a Rich console instance targeting stderr.

    stdout is reserved for machine-readable output (``init --json``).
    """
    console_class = _load_rich_console_class()
    return console_class(stderr=True)


def escape(value: object) -> str:
    """Return *value* as text with Rich markup brackets escaped.

    Used for every user- or filesystem-supplied value interpolated into a
    markup string, so that e.g. a language named ``[red]`` is printed
    verbatim instead of being consumed as a style tag.  Without Rich the
    plain-stderr fallback never interprets markup, so the text is
    returned unchanged.
    """
    text = str(value)
    try:
        from rich.markup import escape as rich_escape
    except ModuleNotFoundError:
        return text
    return rich_escape(text)


class _ConsoleProxy:
    """Minimal ``print``-compatible proxy with plain-stderr fallback."""

    def print(self, *objects: object) -> None:
        """Render with Rich when available, else plain stderr print."""
        try:
            rich_console = get_rich_console()
        except EnvironmentError:
            print(*objects, file=sys.stderr)
            return
        rich_console.print(*objects)


console = _ConsoleProxy()
