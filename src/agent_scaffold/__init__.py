"""agent-scaffold — interactive setup for AI-assistant project integrations.

Detects the project, asks a short sequence of questions, and resolves the
answers into a validated template configuration.
"""

from agent_scaffold.version import __version__

__all__: list[str] = ["__version__"]
