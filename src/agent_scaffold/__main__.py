"""Allow ``python -m agent_scaffold`` invocation.

Delegates to the CLI error-boundary entry point so that
``python -m agent_scaffold`` behaves identically to the
``agent-scaffold`` console script.
"""

from __future__ import annotations

from agent_scaffold.cli.app import cli

if __name__ == "__main__":
    cli()
