"""Domain models for agent-scaffold.

Input and output models are **frozen** dataclasses — immutable value
objects with no behaviour beyond data access and conversion.  The one
exception is :class:`UserAnswers`, which the prompt flow fills in step
by step before handing it to the resolver.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any

from agent_scaffold.utils import as_entries


# ---------------------------------------------------------------------------
# Detection input
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ProjectInfo:
    """What the project detector found in the working directory."""

    detected_language: str = "common"
    """Language id (e.g. ``python``), or ``common`` when undetermined."""

    detected_framework: str = "none"
    """Framework id (e.g. ``django``), or ``none``."""


# ---------------------------------------------------------------------------
# Pre-supplied answers
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class PromptOptions:
    """Answers fixed before the interactive session starts.

    A field left as ``None`` means "not supplied, ask the user".  An empty
    tuple is a real answer ("none selected") and suppresses the prompt.
    """

    language: str | None = None
    framework: str | None = None
    commands: tuple[str, ...] | None = None
    hooks: tuple[str, ...] | None = None
    mcps: tuple[str, ...] | None = None
    analytics: bool | None = None


# ---------------------------------------------------------------------------
# Collected answers
# ---------------------------------------------------------------------------

@dataclass(slots=True)
class UserAnswers:
    """Answers collected by the interactive flow (or built by hand).

    Missing collections default to empty and ``confirm`` defaults to
    ``False`` so that partial answers can be passed straight to the
    resolver.
    """

    language: str | None = None
    framework: str | None = None
    commands: Sequence[str] = ()
    hooks: Sequence[str] = ()
    mcps: Sequence[str] = ()
    analytics: bool = False
    confirm: bool = False

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> UserAnswers:
        """Build answers from a plain dict, tolerating missing keys."""
        return cls(
            language=data.get("language"),
            framework=data.get("framework"),
            commands=as_entries(data.get("commands")),
            hooks=as_entries(data.get("hooks")),
            mcps=as_entries(data.get("mcps")),
            analytics=bool(data.get("analytics", False)),
            confirm=bool(data.get("confirm", False)),
        )


# ---------------------------------------------------------------------------
# Resolved output
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class TemplateConfig:
    """Validated, normalized configuration handed to the template renderer."""

    language: str
    """Canonical language id."""

    framework: str
    """Canonical framework id, ``none`` when no framework was chosen."""

    commands: tuple[str, ...]
    """Slash commands to generate, in the order they were given."""

    hooks: tuple[str, ...]
    """Hook ids, deduplicated, in schema declaration order."""

    mcps: tuple[str, ...]
    """MCP server ids, deduplicated, in schema declaration order."""

    analytics: bool
    """Whether usage analytics are enabled."""

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-serialisable representation."""
        return {
            "language": self.language,
            "framework": self.framework,
            "commands": list(self.commands),
            "hooks": list(self.hooks),
            "mcps": list(self.mcps),
            "analytics": self.analytics,
        }


# ---------------------------------------------------------------------------
# Prompt choices
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class PromptChoice:
    """A single selectable entry offered to the :class:`Prompter`."""

    value: str
    title: str
    description: str = field(default="", compare=False)
