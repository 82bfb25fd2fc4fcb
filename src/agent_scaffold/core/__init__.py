"""Core / service layer — pure business logic and data transformations.

Rules
-----
* No ``print()`` calls.
* No filesystem or network I/O.
* No imports from ``cli`` or ``infra``.
* All functions must be fully typed and deterministic.
"""

from agent_scaffold.core.context_document import ProjectManifest, render_context_document
from agent_scaffold.core.models import (
    ProjectInfo,
    PromptChoice,
    PromptOptions,
    TemplateConfig,
    UserAnswers,
)
from agent_scaffold.core.prompt_flow import FlowState, InteractivePromptFlow
from agent_scaffold.core.protocols import Prompter
from agent_scaffold.core.resolver import resolve_config
from agent_scaffold.core.schema import DEFAULT_SCHEMA, AnswerSchema

__all__: list[str] = [
    "DEFAULT_SCHEMA",
    "AnswerSchema",
    "FlowState",
    "InteractivePromptFlow",
    "ProjectInfo",
    "ProjectManifest",
    "PromptChoice",
    "PromptOptions",
    "Prompter",
    "TemplateConfig",
    "UserAnswers",
    "render_context_document",
    "resolve_config",
]
