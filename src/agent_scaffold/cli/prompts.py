"""Interactive prompts and config summary for the CLI layer.

This module is responsible for:

* Implementing the :class:`~agent_scaffold.core.protocols.Prompter`
  protocol on top of questionary.
* Rendering a Rich table summarising the resolved
  :class:`~agent_scaffold.core.models.TemplateConfig`.

All display-related logic lives here — no validation, no file writing.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from agent_scaffold.cli.console import console
from agent_scaffold.core.models import PromptChoice, TemplateConfig
from agent_scaffold.exceptions import EnvironmentError


def _import_questionary() -> Any:
    """Import questionary lazily for interactive prompts."""
    try:
        import questionary
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "questionary is not installed. Install with: pip install questionary",
        ) from exc
    return questionary


def _import_rich_table() -> type[Any]:
    """Import rich table lazily for summary rendering."""
    try:
        from rich.table import Table
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "rich is not installed. Install with: pip install rich",
        ) from exc
    return Table


# ---------------------------------------------------------------------------
# Presentation helpers (pure transforms — no I/O themselves)
# ---------------------------------------------------------------------------

def _choice_title(choice: PromptChoice) -> str:
    """Single-line label: ``"title — description"`` or just the title."""
    if choice.description:
        return f"{choice.title} — {choice.description}"
    return choice.title


def _format_list(values: Sequence[str]) -> str:
    """Comma-join *values*, or ``"—"`` when empty."""
    return ", ".join(values) if values else "—"


# ---------------------------------------------------------------------------
# Prompter implementation
# ---------------------------------------------------------------------------

class QuestionaryPrompter:
    """Terminal :class:`Prompter` backed by questionary.

    questionary's ``ask()`` returns ``None`` on Ctrl+C / Esc, which is
    exactly the abort signal the prompt flow expects.
    """

    def __init__(self) -> None:
        self._q: Any = _import_questionary()

    def select(
        self,
        message: str,
        choices: Sequence[PromptChoice],
        *,
        default: str | None = None,
    ) -> str | None:
        q_choices = [
            self._q.Choice(title=_choice_title(choice), value=choice.value)
            for choice in choices
        ]
        values = {choice.value for choice in choices}
        result: str | None = self._q.select(
            message,
            choices=q_choices,
            default=default if default in values else None,
            use_arrow_keys=True,
            use_shortcuts=False,
        ).ask()
        return result

    def checkbox(
        self,
        message: str,
        choices: Sequence[PromptChoice],
    ) -> list[str] | None:
        q_choices = [
            self._q.Choice(title=_choice_title(choice), value=choice.value)
            for choice in choices
        ]
        result: list[str] | None = self._q.checkbox(message, choices=q_choices).ask()
        return result

    def confirm(self, message: str, *, default: bool = False) -> bool | None:
        result: bool | None = self._q.confirm(message, default=default).ask()
        return result


# ---------------------------------------------------------------------------
# Rich summary
# ---------------------------------------------------------------------------

def display_config_summary(config: TemplateConfig) -> None:
    """Print a Rich table describing the resolved configuration."""
    table_class = _import_rich_table()

    table = table_class(
        title="Template configuration",
        show_header=True,
        header_style="bold magenta",
        border_style="dim",
    )
    table.add_column("Setting", style="bold", min_width=10)
    table.add_column("Value", min_width=20)

    table.add_row("Language", config.language)
    table.add_row("Framework", config.framework)
    table.add_row("Commands", _format_list(config.commands))
    table.add_row("Hooks", _format_list(config.hooks))
    table.add_row("MCP servers", _format_list(config.mcps))
    table.add_row("Analytics", "enabled" if config.analytics else "disabled")

    console.print()
    console.print(table)
    console.print()
