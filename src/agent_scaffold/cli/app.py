"""CLI application entry point and command routing for agent-scaffold.

This module is the **sole error boundary** for the entire application.
It catches :class:`~agent_scaffold.exceptions.AgentScaffoldError`,
``KeyboardInterrupt``, and any unexpected ``Exception``, rendering
user-friendly messages via Rich and returning well-defined exit codes.

Architecture notes
------------------
* No business logic lives here — all work is delegated to the core and
  infrastructure layers.
* Human-facing output goes to stderr through the Rich console; stdout is
  reserved for ``init --json``.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from agent_scaffold.cli import exit_codes
from agent_scaffold.cli.console import console, escape
from agent_scaffold.exceptions import AgentScaffoldError, UserCancelled
from agent_scaffold.utils import split_csv
from agent_scaffold.version import __version__

LOG_FORMAT: str = "%(asctime)s [%(name)s] %(levelname)s: %(message)s"


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    * ``agent-scaffold init``     — interactive configuration
    * ``agent-scaffold context``  — write the project context document
    * ``agent-scaffold --version``
    """
    parser = argparse.ArgumentParser(
        prog="agent-scaffold",
        description="Configure an AI-assistant integration for your project.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging on stderr.",
    )
    subparsers = parser.add_subparsers(dest="command")

    init = subparsers.add_parser(
        "init",
        help="Answer a few questions and resolve a template configuration.",
    )
    _add_directory_argument(init)
    init.add_argument("--language", help="Language id; skips the language prompt.")
    init.add_argument("--framework", help="Framework id; skips the framework prompt.")
    init.add_argument(
        "--commands",
        type=split_csv,
        help="Comma-separated slash commands (empty string for none).",
    )
    init.add_argument(
        "--hooks",
        type=split_csv,
        help="Comma-separated hook ids (empty string for none).",
    )
    init.add_argument(
        "--mcps",
        type=split_csv,
        help="Comma-separated MCP server ids (empty string for none).",
    )
    init.add_argument(
        "--analytics",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Enable or disable usage analytics; skips the analytics prompt.",
    )
    init.add_argument(
        "--json",
        action="store_true",
        help="Also print the resolved configuration as JSON on stdout.",
    )

    context = subparsers.add_parser(
        "context",
        help="Summarise the project tree and manifest into GEMINI.md.",
    )
    _add_directory_argument(context)
    return parser


def _add_directory_argument(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "-d",
        "--directory",
        type=Path,
        default=Path("."),
        help="Project root (default: current directory).",
    )


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=LOG_FORMAT,
        stream=sys.stderr,
    )


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _handle_init(args: argparse.Namespace) -> int:
    """Run the interactive configuration flow.

    Flow:
    1. Detect language/framework in the project root.
    2. Ask the remaining questions (options skip their prompt).
    3. Resolve the answers into a validated TemplateConfig.
    4. Render a summary (and JSON on request).
    """
    from agent_scaffold.cli.prompts import QuestionaryPrompter, display_config_summary
    from agent_scaffold.core.models import PromptOptions
    from agent_scaffold.core.prompt_flow import InteractivePromptFlow
    from agent_scaffold.core.resolver import resolve_config
    from agent_scaffold.infra.project_detector import detect_project

    root: Path = args.directory.resolve()
    project_info = detect_project(root)
    console.print(
        f"\n[bold]Detected:[/bold] {escape(project_info.detected_language)}"
        f" / {escape(project_info.detected_framework)}\n"
    )

    options = PromptOptions(
        language=args.language,
        framework=args.framework,
        commands=args.commands,
        hooks=args.hooks,
        mcps=args.mcps,
        analytics=args.analytics,
    )
    flow = InteractivePromptFlow(QuestionaryPrompter())
    answers = flow.run(project_info, options)
    config = resolve_config(answers)

    display_config_summary(config)
    if args.json:
        print(json.dumps(config.to_dict(), indent=2))

    console.print("[bold green]Configuration ready.[/bold green]")
    return exit_codes.SUCCESS


def _handle_context(args: argparse.Namespace) -> int:
    """Write the project context document."""
    from agent_scaffold.infra.introspector import write_context_document

    path = write_context_document(args.directory.resolve())
    console.print(f"Created configuration file at {escape(path)}")
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the agent-scaffold CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.

    Returns
    -------
    int
        OS process exit code.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)

    if args.command == "init":
        return _handle_init(args)
    if args.command == "context":
        return _handle_context(args)

    parser.print_help()
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except UserCancelled as exc:
        console.print(f"\n[yellow]{escape(exc)}[/yellow] Nothing was written.")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT if exc.interrupted else exit_codes.SUCCESS)
    except AgentScaffoldError as exc:
        console.print(f"[bold red]Error:[/bold red] {escape(exc)}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {escape(exc.hint)}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {escape(exc)}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
