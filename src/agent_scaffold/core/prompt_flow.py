"""Interactive prompt flow — collects :class:`UserAnswers` step by step.

The flow is an explicit state machine::

    ASK_LANGUAGE → ASK_FRAMEWORK → ASK_COMMANDS → ASK_HOOKS
        → ASK_MCPS → ASK_ANALYTICS → ASK_CONFIRM → DONE

Any step may transition to ``CANCELLED`` instead.  Each step either
takes its answer from :class:`PromptOptions` (and asks nothing) or asks
the injected :class:`~agent_scaffold.core.protocols.Prompter`.  Later
steps filter their choices on earlier answers, so steps never run out
of order.

Guarantees
----------
* No I/O of its own — all terminal interaction goes through the prompter.
* Never validates answers; that is the resolver's job.
* Cancellation raises :class:`~agent_scaffold.exceptions.UserCancelled`
  and the partially built answers are discarded.
"""

from __future__ import annotations

import enum
import logging
from collections.abc import Callable

from agent_scaffold.core.models import ProjectInfo, PromptChoice, PromptOptions, UserAnswers
from agent_scaffold.core.protocols import Prompter
from agent_scaffold.core.schema import DEFAULT_SCHEMA, NO_FRAMEWORK, AnswerSchema
from agent_scaffold.exceptions import UserCancelled

logger = logging.getLogger(__name__)


class FlowState(enum.Enum):
    ASK_LANGUAGE = "ask_language"
    ASK_FRAMEWORK = "ask_framework"
    ASK_COMMANDS = "ask_commands"
    ASK_HOOKS = "ask_hooks"
    ASK_MCPS = "ask_mcps"
    ASK_ANALYTICS = "ask_analytics"
    ASK_CONFIRM = "ask_confirm"
    DONE = "done"
    CANCELLED = "cancelled"


_TERMINAL_STATES = frozenset({FlowState.DONE, FlowState.CANCELLED})


class InteractivePromptFlow:
    """Drive the ordered question sequence.

    Parameters
    ----------
    prompter:
        Any object satisfying the :class:`Prompter` protocol.
    schema:
        Source of the choices offered at each step.
    """

    def __init__(self, prompter: Prompter, schema: AnswerSchema = DEFAULT_SCHEMA) -> None:
        self._prompter: Prompter = prompter
        self._schema: AnswerSchema = schema
        self._steps: dict[FlowState, Callable[[_FlowContext], FlowState]] = {
            FlowState.ASK_LANGUAGE: self._ask_language,
            FlowState.ASK_FRAMEWORK: self._ask_framework,
            FlowState.ASK_COMMANDS: self._ask_commands,
            FlowState.ASK_HOOKS: self._ask_hooks,
            FlowState.ASK_MCPS: self._ask_mcps,
            FlowState.ASK_ANALYTICS: self._ask_analytics,
            FlowState.ASK_CONFIRM: self._ask_confirm,
        }

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def run(
        self,
        project_info: ProjectInfo,
        options: PromptOptions | None = None,
    ) -> UserAnswers:
        """Run every step in order and return the completed answers.

        Raises
        ------
        UserCancelled
            If the user aborts any prompt or declines the confirm step.
        """
        ctx = _FlowContext(project_info, options or PromptOptions())
        state = FlowState.ASK_LANGUAGE
        while state not in _TERMINAL_STATES:
            logger.debug("prompt flow entering %s", state.name)
            state = self._steps[state](ctx)

        if state is FlowState.CANCELLED:
            raise UserCancelled(interrupted=ctx.interrupted)
        return ctx.answers

    # ------------------------------------------------------------------
    # Steps
    # ------------------------------------------------------------------

    def _ask_language(self, ctx: _FlowContext) -> FlowState:
        if ctx.options.language is not None:
            if self._schema.find_language(ctx.options.language) is None:
                logger.warning(
                    "language option %r is not a known language; "
                    "it will be rejected at resolution",
                    ctx.options.language,
                )
            ctx.answers.language = ctx.options.language
            return FlowState.ASK_FRAMEWORK

        choices = [PromptChoice(lang.id, lang.name) for lang in self._schema.languages]
        detected = self._schema.find_language(ctx.project_info.detected_language)
        answer = self._prompter.select(
            "Select the language for your project:",
            choices,
            default=detected.id if detected else None,
        )
        if answer is None:
            return ctx.abort()
        ctx.answers.language = answer
        return FlowState.ASK_FRAMEWORK

    def _ask_framework(self, ctx: _FlowContext) -> FlowState:
        if ctx.options.framework is not None:
            ctx.answers.framework = ctx.options.framework
            return FlowState.ASK_COMMANDS

        frameworks = self._schema.frameworks_for(ctx.answers.language)
        if not frameworks:
            ctx.answers.framework = NO_FRAMEWORK
            return FlowState.ASK_COMMANDS

        choices = [PromptChoice(NO_FRAMEWORK, "None")]
        choices.extend(PromptChoice(fw, fw.capitalize()) for fw in frameworks)
        detected = ctx.project_info.detected_framework
        answer = self._prompter.select(
            "Select the framework (optional):",
            choices,
            default=detected if detected in frameworks else NO_FRAMEWORK,
        )
        if answer is None:
            return ctx.abort()
        ctx.answers.framework = answer
        return FlowState.ASK_COMMANDS

    def _ask_commands(self, ctx: _FlowContext) -> FlowState:
        if ctx.options.commands is not None:
            ctx.answers.commands = ctx.options.commands
            return FlowState.ASK_HOOKS

        commands = self._schema.commands_for(ctx.answers.language)
        if not commands:
            ctx.answers.commands = ()
            return FlowState.ASK_HOOKS

        answer = self._prompter.checkbox(
            "Select slash commands to include:",
            [PromptChoice(cmd, f"/{cmd}") for cmd in commands],
        )
        if answer is None:
            return ctx.abort()
        ctx.answers.commands = tuple(answer)
        return FlowState.ASK_HOOKS

    def _ask_hooks(self, ctx: _FlowContext) -> FlowState:
        if ctx.options.hooks is not None:
            ctx.answers.hooks = ctx.options.hooks
            return FlowState.ASK_MCPS

        answer = self._prompter.checkbox(
            "Select automation hooks to enable:",
            [PromptChoice(hook.id, hook.id, hook.description) for hook in self._schema.hooks],
        )
        if answer is None:
            return ctx.abort()
        ctx.answers.hooks = tuple(answer)
        return FlowState.ASK_MCPS

    def _ask_mcps(self, ctx: _FlowContext) -> FlowState:
        if ctx.options.mcps is not None:
            ctx.answers.mcps = ctx.options.mcps
            return FlowState.ASK_ANALYTICS

        language = (ctx.answers.language or "").strip().casefold()
        framework = (ctx.answers.framework or NO_FRAMEWORK).strip().casefold()
        available = self._schema.mcps_for(language, framework)
        if not available:
            ctx.answers.mcps = ()
            return FlowState.ASK_ANALYTICS

        answer = self._prompter.checkbox(
            "Select MCP servers to configure:",
            [PromptChoice(mcp.id, mcp.id, mcp.description) for mcp in available],
        )
        if answer is None:
            return ctx.abort()
        ctx.answers.mcps = tuple(answer)
        return FlowState.ASK_ANALYTICS

    def _ask_analytics(self, ctx: _FlowContext) -> FlowState:
        if ctx.options.analytics is not None:
            ctx.answers.analytics = ctx.options.analytics
            return FlowState.ASK_CONFIRM

        answer = self._prompter.confirm("Enable anonymous usage analytics?", default=False)
        if answer is None:
            return ctx.abort()
        ctx.answers.analytics = answer
        return FlowState.ASK_CONFIRM

    def _ask_confirm(self, ctx: _FlowContext) -> FlowState:
        answer = self._prompter.confirm(_summary_question(ctx.answers), default=True)
        if answer is None:
            return ctx.abort()
        if not answer:
            logger.debug("user declined confirmation")
            return FlowState.CANCELLED
        ctx.answers.confirm = True
        return FlowState.DONE


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

class _FlowContext:
    """Mutable per-run state: inputs plus the answers being built."""

    __slots__ = ("project_info", "options", "answers", "interrupted")

    def __init__(self, project_info: ProjectInfo, options: PromptOptions) -> None:
        self.project_info = project_info
        self.options = options
        self.answers = UserAnswers()
        self.interrupted = False

    def abort(self) -> FlowState:
        self.interrupted = True
        return FlowState.CANCELLED


def _summary_question(answers: UserAnswers) -> str:
    target = answers.language or "?"
    if answers.framework and answers.framework != NO_FRAMEWORK:
        target = f"{target}/{answers.framework}"
    return (
        f"Generate configuration for {target} with "
        f"{len(answers.commands)} command(s), {len(answers.hooks)} hook(s) "
        f"and {len(answers.mcps)} MCP server(s)?"
    )
