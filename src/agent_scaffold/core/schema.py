"""Answer schema — the legal values for every configurable dimension.

The schema is static, read-only data.  Lookups are case-insensitive and
whitespace-tolerant; every ``find_*`` helper returns the schema's
canonical definition, or ``None`` when the value is unknown.

Nothing here performs validation policy — :mod:`agent_scaffold.core.resolver`
decides which lookups are errors and in which order they are checked.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass


NO_FRAMEWORK: str = "none"
"""Framework id that is compatible with every language."""


# ---------------------------------------------------------------------------
# Definitions
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Scope:
    """Where an integration applies.  Empty sets mean "any"."""

    languages: frozenset[str] = frozenset()
    frameworks: frozenset[str] = frozenset()

    def allows(self, language: str, framework: str) -> bool:
        if self.languages and language not in self.languages:
            return False
        if self.frameworks and framework not in self.frameworks:
            return False
        return True


@dataclass(frozen=True, slots=True)
class LanguageDefinition:
    id: str
    name: str
    frameworks: tuple[str, ...] = ()
    commands: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class HookDefinition:
    id: str
    description: str


@dataclass(frozen=True, slots=True)
class McpDefinition:
    id: str
    description: str
    scope: Scope = Scope()


def _key(value: str) -> str:
    return value.strip().casefold()


# ---------------------------------------------------------------------------
# Schema
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class AnswerSchema:
    """Legal languages, frameworks, commands, hooks and MCP servers."""

    languages: tuple[LanguageDefinition, ...]
    hooks: tuple[HookDefinition, ...]
    mcps: tuple[McpDefinition, ...]
    common_commands: tuple[str, ...] = ()

    # -- languages / frameworks -------------------------------------------

    def find_language(self, value: str | None) -> LanguageDefinition | None:
        if not isinstance(value, str) or not value:
            return None
        key = _key(value)
        return next((lang for lang in self.languages if lang.id == key), None)

    def frameworks_for(self, language: str | None) -> tuple[str, ...]:
        """Frameworks declared for *language* (empty when unknown)."""
        definition = self.find_language(language)
        return definition.frameworks if definition else ()

    def find_framework(self, language: str | None, value: str | None) -> str | None:
        """Return the canonical framework id if compatible with *language*.

        An empty value or ``none`` is always compatible.
        """
        if value is None:
            return NO_FRAMEWORK
        if not isinstance(value, str):
            return None
        if not value.strip() or _key(value) == NO_FRAMEWORK:
            return NO_FRAMEWORK
        key = _key(value)
        return next((fw for fw in self.frameworks_for(language) if fw == key), None)

    def commands_for(self, language: str | None) -> tuple[str, ...]:
        """Suggested slash commands: common ones, then language-specific."""
        definition = self.find_language(language)
        specific = definition.commands if definition else ()
        return self.common_commands + tuple(
            cmd for cmd in specific if cmd not in self.common_commands
        )

    # -- hooks ------------------------------------------------------------

    def find_hook(self, value: str) -> HookDefinition | None:
        if not isinstance(value, str):
            return None
        key = _key(value)
        return next((hook for hook in self.hooks if hook.id.casefold() == key), None)

    # -- mcps -------------------------------------------------------------

    def find_mcp(self, value: str) -> McpDefinition | None:
        if not isinstance(value, str):
            return None
        key = _key(value)
        return next((mcp for mcp in self.mcps if mcp.id == key), None)

    def mcps_for(self, language: str, framework: str) -> tuple[McpDefinition, ...]:
        """MCP servers whose scope allows *language* / *framework*."""
        return tuple(mcp for mcp in self.mcps if mcp.scope.allows(language, framework))

    # -- ordering ---------------------------------------------------------

    def order_hooks(self, hook_ids: Iterable[str]) -> tuple[str, ...]:
        wanted = set(hook_ids)
        return tuple(hook.id for hook in self.hooks if hook.id in wanted)

    def order_mcps(self, mcp_ids: Iterable[str]) -> tuple[str, ...]:
        wanted = set(mcp_ids)
        return tuple(mcp.id for mcp in self.mcps if mcp.id in wanted)


# ---------------------------------------------------------------------------
# Built-in schema
# ---------------------------------------------------------------------------

def _langs(*ids: str) -> frozenset[str]:
    return frozenset(ids)


DEFAULT_SCHEMA: AnswerSchema = AnswerSchema(
    languages=(
        LanguageDefinition("common", "Common (language-agnostic)"),
        LanguageDefinition(
            "javascript-typescript",
            "JavaScript / TypeScript",
            frameworks=("react", "vue", "angular", "node"),
            commands=("test", "lint", "typescript-migrate", "npm-scripts"),
        ),
        LanguageDefinition(
            "python",
            "Python",
            frameworks=("django", "flask", "fastapi"),
            commands=("test", "lint", "type-check"),
        ),
        LanguageDefinition(
            "ruby",
            "Ruby",
            frameworks=("rails", "sinatra"),
            commands=("test", "rubocop"),
        ),
        LanguageDefinition(
            "rust",
            "Rust",
            commands=("test", "clippy", "cargo-check"),
        ),
        LanguageDefinition(
            "go",
            "Go",
            frameworks=("gin",),
            commands=("test", "vet", "mod-tidy"),
        ),
        LanguageDefinition(
            "elixir",
            "Elixir",
            frameworks=("phoenix",),
            commands=("test", "credo", "mix-format"),
        ),
    ),
    hooks=(
        HookDefinition("preToolUse", "Run before the assistant invokes a tool"),
        HookDefinition("postToolUse", "Run after a tool invocation completes"),
        HookDefinition("userPromptSubmit", "Run when the user submits a prompt"),
        HookDefinition("notification", "Run when the assistant sends a notification"),
        HookDefinition("stop", "Run when the assistant finishes responding"),
        HookDefinition("subagentStop", "Run when a subagent finishes responding"),
        HookDefinition("preCompact", "Run before the conversation is compacted"),
        HookDefinition("sessionStart", "Run when a new session starts"),
    ),
    mcps=(
        McpDefinition("filesystem", "Scoped read/write access to project files"),
        McpDefinition("github", "Issues, pull requests and repository metadata"),
        McpDefinition("memory", "Persistent knowledge graph across sessions"),
        McpDefinition("fetch", "Retrieve and convert web pages"),
        McpDefinition(
            "typescript-lsp",
            "TypeScript language server",
            Scope(languages=_langs("javascript-typescript")),
        ),
        McpDefinition(
            "python-lsp",
            "Python language server",
            Scope(languages=_langs("python")),
        ),
        McpDefinition(
            "django-orm",
            "Inspect Django models and migrations",
            Scope(languages=_langs("python"), frameworks=frozenset({"django"})),
        ),
        McpDefinition(
            "rails-console",
            "Query the Rails application console",
            Scope(languages=_langs("ruby"), frameworks=frozenset({"rails"})),
        ),
        McpDefinition(
            "rust-analyzer",
            "Rust language server",
            Scope(languages=_langs("rust")),
        ),
        McpDefinition(
            "gopls",
            "Go language server",
            Scope(languages=_langs("go")),
        ),
        McpDefinition(
            "elixir-ls",
            "Elixir language server",
            Scope(languages=_langs("elixir")),
        ),
        McpDefinition(
            "phoenix-server",
            "Phoenix routes, channels and live views",
            Scope(languages=_langs("elixir"), frameworks=frozenset({"phoenix"})),
        ),
    ),
    common_commands=("code-review", "refactor", "explain-code"),
)
