"""Infrastructure layer — filesystem integration.

This layer owns every interaction with the project directory.  Raw
``OSError`` / ``json`` exceptions must be caught here and re-raised as a
:class:`~agent_scaffold.exceptions.AgentScaffoldError` subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
* Must expose clean, typed interfaces consumed by the CLI layer.
"""

from agent_scaffold.infra.introspector import (
    build_context_document,
    read_manifest,
    scan_project_files,
    write_context_document,
)
from agent_scaffold.infra.project_detector import detect_project

__all__: list[str] = [
    "build_context_document",
    "detect_project",
    "read_manifest",
    "scan_project_files",
    "write_context_document",
]
