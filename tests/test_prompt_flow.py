"""Tests for the interactive prompt flow (core/prompt_flow.py).

A scripted :class:`Prompter` stands in for the terminal: it returns
queued answers in order and records every question it was asked, so the
tests can check ordering, filtering, skipping and cancellation.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

import pytest

from agent_scaffold.core.models import ProjectInfo, PromptChoice, PromptOptions, UserAnswers
from agent_scaffold.core.prompt_flow import FlowState, InteractivePromptFlow
from agent_scaffold.core.resolver import resolve_config
from agent_scaffold.core.schema import AnswerSchema, LanguageDefinition, McpDefinition, Scope
from agent_scaffold.exceptions import UserCancelled


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

class ScriptedPrompter:
    """Prompter returning pre-recorded answers, one per call."""

    def __init__(self, *answers: Any) -> None:
        self._answers = list(answers)
        self.calls: list[tuple[str, str, list[str], Any]] = []

    def _next(self, kind: str, message: str, choices: Sequence[PromptChoice], default: Any) -> Any:
        self.calls.append((kind, message, [c.value for c in choices], default))
        if not self._answers:
            raise AssertionError(f"unexpected {kind} prompt: {message}")
        return self._answers.pop(0)

    def select(
        self,
        message: str,
        choices: Sequence[PromptChoice],
        *,
        default: str | None = None,
    ) -> str | None:
        return self._next("select", message, choices, default)

    def checkbox(self, message: str, choices: Sequence[PromptChoice]) -> list[str] | None:
        return self._next("checkbox", message, choices, None)

    def confirm(self, message: str, *, default: bool = False) -> bool | None:
        return self._next("confirm", message, (), default)

    @property
    def kinds(self) -> list[str]:
        return [call[0] for call in self.calls]


def _run(
    prompter: ScriptedPrompter,
    options: PromptOptions | None = None,
    info: ProjectInfo | None = None,
) -> UserAnswers:
    flow = InteractivePromptFlow(prompter)
    return flow.run(info or ProjectInfo(), options)


# ---------------------------------------------------------------------------
# Full interactive run
# ---------------------------------------------------------------------------

class TestFullFlow:
    def test_asks_every_step_in_order(self) -> None:
        prompter = ScriptedPrompter(
            "elixir",
            "phoenix",
            ["test"],
            ["preToolUse", "postToolUse"],
            ["elixir-ls", "phoenix-server"],
            False,
            True,
        )
        answers = _run(prompter)

        assert prompter.kinds == [
            "select",
            "select",
            "checkbox",
            "checkbox",
            "checkbox",
            "confirm",
            "confirm",
        ]
        assert answers == UserAnswers(
            language="elixir",
            framework="phoenix",
            commands=("test",),
            hooks=("preToolUse", "postToolUse"),
            mcps=("elixir-ls", "phoenix-server"),
            analytics=False,
            confirm=True,
        )

    def test_result_resolves(self) -> None:
        prompter = ScriptedPrompter("python", "django", [], ["stop"], ["django-orm"], True, True)
        config = resolve_config(_run(prompter))
        assert config.mcps == ("django-orm",)
        assert config.analytics is True

    def test_framework_choices_filtered_by_language(self) -> None:
        prompter = ScriptedPrompter("ruby", "rails", [], [], [], False, True)
        _run(prompter)
        _, _, choices, _ = prompter.calls[1]
        assert choices == ["none", "rails", "sinatra"]

    def test_mcp_choices_filtered_by_framework(self) -> None:
        prompter = ScriptedPrompter("elixir", "none", [], [], [], False, True)
        _run(prompter)
        _, _, mcp_choices, _ = prompter.calls[4]
        assert "elixir-ls" in mcp_choices
        assert "phoenix-server" not in mcp_choices
        assert "gopls" not in mcp_choices

    def test_command_choices_depend_on_language(self) -> None:
        prompter = ScriptedPrompter("rust", [], [], [], False, True)
        _run(prompter)
        _, _, commands, _ = prompter.calls[1]
        assert "clippy" in commands
        assert "code-review" in commands

    def test_confirm_question_summarises_answers(self) -> None:
        prompter = ScriptedPrompter("elixir", "phoenix", [], ["stop"], [], False, True)
        _run(prompter)
        _, message, _, default = prompter.calls[-1]
        assert "elixir/phoenix" in message
        assert "1 hook(s)" in message
        assert default is True


# ---------------------------------------------------------------------------
# Skipping
# ---------------------------------------------------------------------------

class TestSkipping:
    def test_language_without_frameworks_skips_framework_prompt(self) -> None:
        prompter = ScriptedPrompter("rust", [], [], [], False, True)
        answers = _run(prompter)
        assert answers.framework == "none"
        assert prompter.kinds.count("select") == 1

    @pytest.mark.parametrize(
        "options, skipped_message",
        [
            (PromptOptions(language="go"), "language for"),
            (PromptOptions(framework="gin"), "framework (optional)"),
            (PromptOptions(commands=("test",)), "slash commands"),
            (PromptOptions(hooks=()), "automation hooks"),
            (PromptOptions(mcps=("gopls",)), "MCP servers to"),
            (PromptOptions(analytics=True), "analytics"),
        ],
    )
    def test_option_suppresses_its_prompt(
        self, options: PromptOptions, skipped_message: str,
    ) -> None:
        script = {
            "language for": "go",
            "framework (optional)": "gin",
            "slash commands": [],
            "automation hooks": [],
            "MCP servers to": [],
            "analytics": False,
        }
        del script[skipped_message]
        prompter = ScriptedPrompter(*script.values(), True)
        _run(prompter, options)
        messages = [call[1] for call in prompter.calls]
        assert not any(skipped_message in m for m in messages)

    def test_all_options_leave_only_confirm(self) -> None:
        options = PromptOptions(
            language="elixir",
            framework="phoenix",
            commands=(),
            hooks=("preToolUse",),
            mcps=("elixir-ls",),
            analytics=False,
        )
        prompter = ScriptedPrompter(True)
        answers = _run(prompter, options)
        assert prompter.kinds == ["confirm"]
        assert answers.hooks == ("preToolUse",)
        assert answers.confirm is True

    def test_options_are_not_validated_by_flow(self) -> None:
        options = PromptOptions(
            language="cobol", framework="none", commands=(), hooks=(), mcps=(), analytics=False,
        )
        answers = _run(ScriptedPrompter(True), options)
        assert answers.language == "cobol"

    def test_unknown_language_option_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        options = PromptOptions(
            language="cobol", framework="none", commands=(), hooks=(), mcps=(), analytics=False,
        )
        with caplog.at_level("WARNING", logger="agent_scaffold.core.prompt_flow"):
            _run(ScriptedPrompter(True), options)
        assert "'cobol' is not a known language" in caplog.text

    def test_known_language_option_is_not_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        options = PromptOptions(
            language="Elixir", framework="none", commands=(), hooks=(), mcps=(), analytics=False,
        )
        with caplog.at_level("WARNING", logger="agent_scaffold.core.prompt_flow"):
            _run(ScriptedPrompter(True), options)
        assert "not a known language" not in caplog.text

    def test_empty_choice_sets_skip_prompts(self) -> None:
        schema = AnswerSchema(
            languages=(LanguageDefinition("x", "X"),),
            hooks=(),
            mcps=(McpDefinition("y-only", "Y", Scope(languages=frozenset({"y"}))),),
        )
        prompter = ScriptedPrompter(False, True)
        flow = InteractivePromptFlow(prompter, schema)

        answers = flow.run(ProjectInfo(), PromptOptions(language="x", hooks=()))

        assert prompter.kinds == ["confirm", "confirm"]
        assert answers.framework == "none"
        assert answers.commands == ()
        assert answers.mcps == ()


# ---------------------------------------------------------------------------
# Detection defaults
# ---------------------------------------------------------------------------

class TestDetectionDefaults:
    def test_detected_language_is_default(self) -> None:
        prompter = ScriptedPrompter("python", "django", [], [], [], False, True)
        _run(prompter, info=ProjectInfo("python", "django"))
        assert prompter.calls[0][3] == "python"
        assert prompter.calls[1][3] == "django"

    def test_detection_never_skips_prompt(self) -> None:
        prompter = ScriptedPrompter("python", "none", [], [], [], False, True)
        _run(prompter, info=ProjectInfo("python", "flask"))
        assert prompter.kinds[:2] == ["select", "select"]

    def test_undetected_language_has_no_default(self) -> None:
        prompter = ScriptedPrompter("go", "gin", [], [], [], False, True)
        _run(prompter, info=ProjectInfo("cobol", "none"))
        assert prompter.calls[0][3] is None

    def test_detected_framework_from_other_language_ignored(self) -> None:
        prompter = ScriptedPrompter("go", "gin", [], [], [], False, True)
        _run(prompter, info=ProjectInfo("python", "django"))
        assert prompter.calls[1][3] == "none"


# ---------------------------------------------------------------------------
# Cancellation
# ---------------------------------------------------------------------------

class TestCancellation:
    @pytest.mark.parametrize("abort_at", range(7))
    def test_abort_at_any_step_cancels(self, abort_at: int) -> None:
        script: list[Any] = ["elixir", "phoenix", [], [], [], False, True]
        script[abort_at] = None
        prompter = ScriptedPrompter(*script)

        with pytest.raises(UserCancelled) as exc_info:
            _run(prompter)

        assert exc_info.value.interrupted is True
        assert len(prompter.calls) == abort_at + 1

    def test_declining_confirmation_cancels(self) -> None:
        prompter = ScriptedPrompter("elixir", "phoenix", [], [], [], False, False)
        with pytest.raises(UserCancelled) as exc_info:
            _run(prompter)
        assert exc_info.value.interrupted is False


class TestFlowState:
    def test_states(self) -> None:
        assert [s.name for s in FlowState] == [
            "ASK_LANGUAGE",
            "ASK_FRAMEWORK",
            "ASK_COMMANDS",
            "ASK_HOOKS",
            "ASK_MCPS",
            "ASK_ANALYTICS",
            "ASK_CONFIRM",
            "DONE",
            "CANCELLED",
        ]
