"""Infrastructure: project introspection for the ``context`` command.

Walks the project tree, reads the optional ``package.json`` manifest,
renders the context document via
:func:`~agent_scaffold.core.context_document.render_context_document`
and writes it to a fixed file name in the project root.

Error policy
------------
* An absent or unparseable manifest is recoverable: the document falls
  back to generic text and a warning is logged.
* Any failure walking the tree or writing the output raises
  :class:`~agent_scaffold.exceptions.FileSystemError`.
* The output is written to a temporary file and moved into place, so
  a failed write never leaves a half-written document behind.
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path

from agent_scaffold.core.context_document import ProjectManifest, render_context_document
from agent_scaffold.exceptions import FileSystemError, ManifestUnreadableError

logger = logging.getLogger(__name__)

OUTPUT_FILENAME: str = "GEMINI.md"
MANIFEST_FILENAME: str = "package.json"
EXCLUDED_DIRS: frozenset[str] = frozenset({".git", ".hg", ".svn", "node_modules"})


# ---------------------------------------------------------------------------
# File scan
# ---------------------------------------------------------------------------

def scan_project_files(root: Path) -> list[str]:
    """Return every file under *root*, relative, POSIX-style and sorted.

    Directories named in :data:`EXCLUDED_DIRS` are pruned at any depth.

    Raises
    ------
    FileSystemError
        If *root* or any directory below it cannot be listed.
    """
    if not root.is_dir():
        raise FileSystemError(f"Project root is not a directory: {root}")

    def _on_error(exc: OSError) -> None:
        raise FileSystemError(
            f"Failed to scan {exc.filename or root}: {exc.strerror or exc}",
        ) from exc

    files: list[str] = []
    for dirpath, dirnames, filenames in os.walk(root, onerror=_on_error):
        dirnames[:] = [d for d in dirnames if d not in EXCLUDED_DIRS]
        base = Path(dirpath).relative_to(root)
        files.extend((base / name).as_posix() for name in filenames)

    files.sort()
    logger.debug("scanned %d files under %s", len(files), root)
    return files


# ---------------------------------------------------------------------------
# Manifest
# ---------------------------------------------------------------------------

def load_manifest(root: Path) -> ProjectManifest:
    """Parse ``package.json`` under *root*.

    Raises
    ------
    ManifestUnreadableError
        If the file is missing, unreadable, or not a JSON object.
    """
    path = root / MANIFEST_FILENAME
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError as exc:
        raise ManifestUnreadableError(f"No {MANIFEST_FILENAME} in {root}") from exc
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise ManifestUnreadableError(f"Cannot parse {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ManifestUnreadableError(f"{path} does not contain a JSON object")
    return ProjectManifest.from_json(data)


def read_manifest(root: Path) -> ProjectManifest | None:
    """Like :func:`load_manifest`, but ``None`` instead of raising."""
    try:
        return load_manifest(root)
    except ManifestUnreadableError as exc:
        logger.warning("manifest unavailable, using generic description: %s", exc)
        return None


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------

def build_context_document(root: Path) -> str:
    """Scan *root* and render its context document without writing it."""
    files = scan_project_files(root)
    return render_context_document(read_manifest(root), files)


def write_context_document(root: Path, filename: str = OUTPUT_FILENAME) -> Path:
    """Build the context document for *root* and write it to *filename*.

    An existing file is overwritten unconditionally.

    Returns
    -------
    Path
        The path of the written document.

    Raises
    ------
    FileSystemError
        If scanning or writing fails.
    """
    content = build_context_document(root)
    target = root / filename
    _atomic_write(target, content)
    logger.debug("wrote %d bytes to %s", len(content), target)
    return target


def _target_mode(target: Path) -> int:
    """Permission bits the written file should end up with.

    An existing document keeps its mode; a new one gets what ``open()``
    would have given it under the current umask.
    """
    try:
        return target.stat().st_mode & 0o777
    except FileNotFoundError:
        pass
    mask = os.umask(0)
    os.umask(mask)
    return 0o666 & ~mask


def _atomic_write(target: Path, content: str) -> None:
    tmp_name: str | None = None
    try:
        with tempfile.NamedTemporaryFile(
            "w",
            encoding="utf-8",
            dir=target.parent,
            prefix=f".{target.name}.",
            suffix=".tmp",
            delete=False,
        ) as handle:
            tmp_name = handle.name
            handle.write(content)
        # NamedTemporaryFile creates 0600.
        os.chmod(tmp_name, _target_mode(target))
        os.replace(tmp_name, target)
    except OSError as exc:
        if tmp_name is not None:
            Path(tmp_name).unlink(missing_ok=True)
        raise FileSystemError(
            f"Failed to write {target}: {exc.strerror or exc}",
            hint="Check that the project directory is writable.",
        ) from exc
