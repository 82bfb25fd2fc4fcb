"""Custom exception hierarchy for agent-scaffold.

All exceptions that cross layer boundaries must inherit from
:class:`AgentScaffoldError`.  Raw ``OSError`` / ``json`` exceptions must
never propagate beyond the infrastructure layer — they are caught there
and re-raised as a typed subclass defined here.

Hierarchy
---------
AgentScaffoldError
├── UserCancelled
├── InvalidConfigError
│   ├── UnknownLanguageError
│   ├── IncompatibleFrameworkError
│   ├── UnknownHookError
│   ├── UnknownOrIncompatibleMcpError
│   └── NotConfirmedError
├── ManifestUnreadableError
├── FileSystemError
└── EnvironmentError
"""

from __future__ import annotations


class AgentScaffoldError(Exception):
    """Base exception for all agent-scaffold errors.

    Every user-visible error condition must map to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Interactive flow ------------------------------------------------------

class UserCancelled(AgentScaffoldError):
    """Raised when the user aborts a prompt or declines confirmation.

    ``interrupted`` is ``True`` when a prompt was aborted (Ctrl+C / Esc)
    and ``False`` when the user answered "no" at the confirm step.
    """

    def __init__(
        self,
        message: str = "Setup cancelled.",
        *,
        interrupted: bool = False,
        hint: str | None = None,
    ) -> None:
        super().__init__(message, hint=hint)
        self.interrupted: bool = interrupted


# --- Configuration resolution ----------------------------------------------

class InvalidConfigError(AgentScaffoldError):
    """Raised when collected answers cannot be resolved into a config.

    Carries the offending ``field`` name and ``value`` so callers can
    report them without parsing the message.
    """

    def __init__(
        self,
        message: str,
        *,
        field: str,
        value: object,
        hint: str | None = None,
    ) -> None:
        super().__init__(message, hint=hint)
        self.field: str = field
        self.value: object = value


class UnknownLanguageError(InvalidConfigError):
    """Raised when ``language`` is not declared in the answer schema."""


class IncompatibleFrameworkError(InvalidConfigError):
    """Raised when ``framework`` is not declared for the chosen language."""


class UnknownHookError(InvalidConfigError):
    """Raised when a ``hooks`` entry is not a known hook identifier."""


class UnknownOrIncompatibleMcpError(InvalidConfigError):
    """Raised when an ``mcps`` entry is unknown or out of scope."""


class NotConfirmedError(InvalidConfigError):
    """Raised when answers reach resolution without ``confirm == True``."""


# --- Introspection ---------------------------------------------------------

class ManifestUnreadableError(AgentScaffoldError):
    """Raised when the project manifest exists but cannot be parsed.

    The introspector recovers from this locally; it never reaches the
    CLI error boundary.
    """


class FileSystemError(AgentScaffoldError):
    """Raised when scanning the project tree or writing output fails."""


# --- Environment / tooling -------------------------------------------------

class EnvironmentError(AgentScaffoldError):
    """Raised when a required runtime dependency is not available."""
