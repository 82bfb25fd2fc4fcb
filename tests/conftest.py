"""Shared pytest fixtures and configuration for the agent-scaffold test suite.

Guidelines
----------
* No real terminal interaction — prompts are scripted or questionary is mocked.
* Core tests must be pure — no side effects.
* Filesystem tests use ``tmp_path`` only.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest


@pytest.fixture
def write_manifest(tmp_path: Path):
    """Write ``package.json`` into ``tmp_path`` from a dict (or raw text)."""

    def _write(data: dict[str, Any] | str) -> Path:
        path = tmp_path / "package.json"
        text = data if isinstance(data, str) else json.dumps(data)
        path.write_text(text, encoding="utf-8")
        return path

    return _write
