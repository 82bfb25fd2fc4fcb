"""Context document rendering — the text half of project introspection.

Pure transforms only: the infra layer reads the manifest and walks the
tree, then hands plain data to :func:`render_context_document`.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any


DOCUMENT_HEADER: str = (
    "# Gemini Configuration\n\n"
    "This file contains the configuration for Gemini.\n\n"
    "## Project Structure\n\n"
    "This project appears to be a "
)


@dataclass(frozen=True, slots=True)
class ProjectManifest:
    """The parts of ``package.json`` the context document uses.

    Each collection is ``None`` when the key is absent, and an (possibly
    empty) tuple when it is present.
    """

    name: str | None = None
    dependencies: tuple[str, ...] | None = None
    dev_dependencies: tuple[str, ...] | None = None
    scripts: tuple[tuple[str, str], ...] | None = None

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> ProjectManifest:
        """Extract the manifest fields from decoded JSON.

        Keys whose value is not a JSON object are treated as absent.
        """
        name = data.get("name")
        scripts = data.get("scripts")
        return cls(
            name=str(name) if name else None,
            dependencies=_keys(data.get("dependencies")),
            dev_dependencies=_keys(data.get("devDependencies")),
            scripts=(
                tuple((str(k), str(v)) for k, v in scripts.items())
                if isinstance(scripts, Mapping)
                else None
            ),
        )


def _keys(value: object) -> tuple[str, ...] | None:
    if not isinstance(value, Mapping):
        return None
    return tuple(str(key) for key in value)


def _section(title: str, lines: Sequence[str]) -> str:
    return f"### {title}\n\n" + "\n".join(lines) + "\n\n"


def render_context_document(
    manifest: ProjectManifest | None,
    files: Sequence[str],
) -> str:
    """Render the markdown context document.

    Section order is fixed: header, project identity, dependencies, dev
    dependencies, scripts, files.  With no manifest (or no ``name``) the
    identity sentence falls back to generic text.
    """
    parts = [DOCUMENT_HEADER]

    if manifest is not None and manifest.name:
        parts.append(f"**{manifest.name}** project.\n\n")
    else:
        parts.append("project.\n\n")

    if manifest is not None:
        if manifest.dependencies is not None:
            parts.append(_section("Dependencies", [f"- {dep}" for dep in manifest.dependencies]))
        if manifest.dev_dependencies is not None:
            parts.append(
                _section("Dev Dependencies", [f"- {dep}" for dep in manifest.dev_dependencies])
            )
        if manifest.scripts is not None:
            parts.append(
                _section(
                    "Scripts",
                    [f"- **{name}**: `{command}`" for name, command in manifest.scripts],
                )
            )

    parts.append("## Files\n\n")
    parts.append("\n".join(f"- `{path}`" for path in files))
    return "".join(parts)
