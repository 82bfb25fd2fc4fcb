"""Protocols (interfaces) consumed by the core layer.

These define the contracts that terminal adapters must satisfy.  Core
code depends ONLY on these protocols — never on concrete prompt
libraries — preserving the dependency inversion principle.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from agent_scaffold.core.models import PromptChoice


class Prompter(Protocol):
    """Contract for interactive question backends.

    Every method blocks until the user answers and returns ``None`` when
    the user aborts the prompt (Ctrl+C / Esc).  Implementations must not
    raise on abort — the flow turns ``None`` into a cancellation.
    """

    def select(
        self,
        message: str,
        choices: Sequence[PromptChoice],
        *,
        default: str | None = None,
    ) -> str | None:
        """Ask for exactly one of *choices* and return its ``value``."""
        ...  # pragma: no cover

    def checkbox(
        self,
        message: str,
        choices: Sequence[PromptChoice],
    ) -> list[str] | None:
        """Ask for any subset of *choices* and return their values.

        An empty list is a valid answer.
        """
        ...  # pragma: no cover

    def confirm(self, message: str, *, default: bool = False) -> bool | None:
        """Ask a yes/no question."""
        ...  # pragma: no cover
