"""Infrastructure: project language / framework detection.

This module looks for well-known marker files in the project root and
guesses the language and framework from them.  The result only seeds
the defaults of the interactive prompts; it never skips a question.

Rules
-----
* Marker-file inspection only — no subprocess, no network.
* Unreadable marker files are skipped, never fatal.
* No ``print()`` — callers handle user-facing output.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path

from agent_scaffold.core.models import ProjectInfo

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Marker table
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class LanguageMarker:
    """Files that identify a language, and framework keywords to look for.

    ``framework_hints`` maps a substring found in any marker file to the
    framework id it implies.  The first match in declaration order wins.
    """

    language: str
    files: tuple[str, ...]
    framework_hints: tuple[tuple[str, str], ...] = ()


MARKERS: tuple[LanguageMarker, ...] = (
    LanguageMarker(
        "javascript-typescript",
        ("package.json",),
        (
            ('"react"', "react"),
            ('"vue"', "vue"),
            ('"@angular/core"', "angular"),
            ('"express"', "node"),
        ),
    ),
    LanguageMarker(
        "python",
        ("pyproject.toml", "requirements.txt", "setup.py", "Pipfile"),
        (("django", "django"), ("flask", "flask"), ("fastapi", "fastapi")),
    ),
    LanguageMarker("ruby", ("Gemfile",), (("rails", "rails"), ("sinatra", "sinatra"))),
    LanguageMarker("rust", ("Cargo.toml",)),
    LanguageMarker("go", ("go.mod",), (("gin-gonic/gin", "gin"),)),
    LanguageMarker("elixir", ("mix.exs",), ((":phoenix", "phoenix"),)),
)


# ---------------------------------------------------------------------------
# Detection logic
# ---------------------------------------------------------------------------

def detect_project(root: Path) -> ProjectInfo:
    """Probe *root* for marker files.

    Returns ``ProjectInfo("common", "none")`` when nothing matches — the
    caller decides what to do with an undetermined project.
    """
    for marker in MARKERS:
        present = [root / name for name in marker.files if (root / name).is_file()]
        if not present:
            continue
        framework = _detect_framework(marker, present)
        logger.debug(
            "detected %s/%s from %s",
            marker.language,
            framework,
            ", ".join(p.name for p in present),
        )
        return ProjectInfo(detected_language=marker.language, detected_framework=framework)

    logger.debug("no marker files found in %s", root)
    return ProjectInfo()


def _detect_framework(marker: LanguageMarker, paths: list[Path]) -> str:
    text = "\n".join(_read_marker(path) for path in paths).lower()
    for needle, framework in marker.framework_hints:
        if needle in text:
            return framework
    return "none"


def _read_marker(path: Path) -> str:
    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        logger.warning("could not read %s: %s", path, exc)
        return ""
    if path.name == "package.json":
        return _package_json_dependencies(content)
    return content


def _package_json_dependencies(content: str) -> str:
    """Reduce ``package.json`` to its dependency names, quoted."""
    try:
        data = json.loads(content)
    except json.JSONDecodeError:
        return ""
    if not isinstance(data, dict):
        return ""
    names: list[str] = []
    for key in ("dependencies", "devDependencies"):
        section = data.get(key)
        if isinstance(section, dict):
            names.extend(f'"{name}"' for name in section)
    return " ".join(names)
