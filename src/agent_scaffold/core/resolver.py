"""Config resolution — turns collected answers into a :class:`TemplateConfig`.

:func:`resolve_config` is a **pure** function: no I/O, no side effects,
and the same input always yields an equal output.  Resolution is
all-or-nothing — the first failing check raises and no partial config
is ever produced.

Checks run in a fixed order:

1. ``language`` is known.
2. ``framework`` is empty/``none`` or declared for the language.
3. every ``hooks`` entry is a known hook.
4. every ``mcps`` entry is known and in scope for language/framework.
5. ``confirm`` is true.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from agent_scaffold.core.models import TemplateConfig, UserAnswers
from agent_scaffold.core.schema import DEFAULT_SCHEMA, AnswerSchema
from agent_scaffold.exceptions import (
    IncompatibleFrameworkError,
    NotConfirmedError,
    UnknownHookError,
    UnknownLanguageError,
    UnknownOrIncompatibleMcpError,
)
from agent_scaffold.utils import as_entries, unique_in_order

logger = logging.getLogger(__name__)


def resolve_config(
    answers: UserAnswers | Mapping[str, Any],
    schema: AnswerSchema = DEFAULT_SCHEMA,
) -> TemplateConfig:
    """Validate and normalize *answers*.

    Parameters
    ----------
    answers:
        A :class:`UserAnswers` or a plain mapping with the same keys.
        Missing collections are treated as empty, a missing ``analytics``
        as ``False`` and a missing ``confirm`` as ``False``.
    schema:
        The legal values to validate against.

    Raises
    ------
    UnknownLanguageError
    IncompatibleFrameworkError
    UnknownHookError
    UnknownOrIncompatibleMcpError
    NotConfirmedError
    """
    if isinstance(answers, Mapping):
        answers = UserAnswers.from_mapping(answers)

    language = _resolve_language(answers.language, schema)
    framework = _resolve_framework(language, answers.framework, schema)
    hooks = _resolve_hooks(answers.hooks, schema)
    mcps = _resolve_mcps(answers.mcps, language, framework, schema)

    if not answers.confirm:
        raise NotConfirmedError(
            "Configuration was not confirmed.",
            field="confirm",
            value=answers.confirm,
            hint="Answer 'yes' at the final prompt to generate files.",
        )

    config = TemplateConfig(
        language=language,
        framework=framework,
        commands=_normalize_commands(answers.commands),
        hooks=hooks,
        mcps=mcps,
        analytics=bool(answers.analytics),
    )
    logger.debug("resolved template config: %s", config)
    return config


# ---------------------------------------------------------------------------
# Individual checks
# ---------------------------------------------------------------------------

def _resolve_language(value: str | None, schema: AnswerSchema) -> str:
    definition = schema.find_language(value)
    if definition is None:
        raise UnknownLanguageError(
            f"Unknown language: {value!r}.",
            field="language",
            value=value if value is not None else "",
            hint="Choose one of: " + ", ".join(lang.id for lang in schema.languages),
        )
    return definition.id


def _resolve_framework(language: str, value: str | None, schema: AnswerSchema) -> str:
    framework = schema.find_framework(language, value)
    if framework is None:
        declared = schema.frameworks_for(language)
        raise IncompatibleFrameworkError(
            f"Framework {value!r} is not available for language {language!r}.",
            field="framework",
            value=value,
            hint=(
                "Choose one of: none, " + ", ".join(declared)
                if declared
                else f"{language!r} only supports framework 'none'."
            ),
        )
    return framework


def _resolve_hooks(values: Any, schema: AnswerSchema) -> tuple[str, ...]:
    resolved: list[str] = []
    for value in as_entries(values):
        hook = schema.find_hook(value)
        if hook is None:
            raise UnknownHookError(
                f"Unknown hook: {value!r}.",
                field="hooks",
                value=value,
                hint="Known hooks: " + ", ".join(h.id for h in schema.hooks),
            )
        resolved.append(hook.id)
    return schema.order_hooks(resolved)


def _resolve_mcps(
    values: Any,
    language: str,
    framework: str,
    schema: AnswerSchema,
) -> tuple[str, ...]:
    resolved: list[str] = []
    for value in as_entries(values):
        mcp = schema.find_mcp(value)
        if mcp is None or not mcp.scope.allows(language, framework):
            available = ", ".join(m.id for m in schema.mcps_for(language, framework))
            reason = "Unknown" if mcp is None else "Incompatible"
            raise UnknownOrIncompatibleMcpError(
                f"{reason} MCP server {value!r} for {language}/{framework}.",
                field="mcps",
                value=value,
                hint=f"Available MCP servers: {available}",
            )
        resolved.append(mcp.id)
    return schema.order_mcps(resolved)


def _normalize_commands(values: Any) -> tuple[str, ...]:
    cleaned = (str(cmd).strip() for cmd in as_entries(values))
    return tuple(unique_in_order(cmd for cmd in cleaned if cmd))
