"""Tests for project detection (infra/project_detector.py).

Each test builds marker files under ``tmp_path`` — no OS state.
"""

from __future__ import annotations

from pathlib import Path
from unittest.mock import patch

import pytest

from agent_scaffold.core.models import ProjectInfo
from agent_scaffold.infra.project_detector import detect_project


def _write(root: Path, name: str, content: str = "") -> None:
    (root / name).write_text(content, encoding="utf-8")


class TestDetectProject:
    def test_empty_directory_is_common(self, tmp_path: Path) -> None:
        assert detect_project(tmp_path) == ProjectInfo("common", "none")

    @pytest.mark.parametrize(
        "marker, content, expected",
        [
            ("package.json", '{"dependencies": {"react": "18"}}', ("javascript-typescript", "react")),
            ("package.json", '{"devDependencies": {"vue": "3"}}', ("javascript-typescript", "vue")),
            ("package.json", '{"dependencies": {"express": "4"}}', ("javascript-typescript", "node")),
            ("package.json", "{}", ("javascript-typescript", "none")),
            ("requirements.txt", "Django==5.0\n", ("python", "django")),
            ("pyproject.toml", 'dependencies = ["fastapi"]', ("python", "fastapi")),
            ("Gemfile", "gem 'rails'", ("ruby", "rails")),
            ("Cargo.toml", "[package]", ("rust", "none")),
            ("go.mod", "require github.com/gin-gonic/gin v1.9.1", ("go", "gin")),
            ("mix.exs", "{:phoenix, \"~> 1.7\"}", ("elixir", "phoenix")),
            ("mix.exs", "{:ecto, \"~> 3.0\"}", ("elixir", "none")),
        ],
    )
    def test_markers(
        self, tmp_path: Path, marker: str, content: str, expected: tuple[str, str],
    ) -> None:
        _write(tmp_path, marker, content)
        assert detect_project(tmp_path) == ProjectInfo(*expected)

    def test_package_json_name_does_not_imply_framework(self, tmp_path: Path) -> None:
        _write(tmp_path, "package.json", '{"name": "react-notes", "dependencies": {}}')
        assert detect_project(tmp_path).detected_framework == "none"

    def test_invalid_package_json_still_detects_language(self, tmp_path: Path) -> None:
        _write(tmp_path, "package.json", "{broken")
        assert detect_project(tmp_path) == ProjectInfo("javascript-typescript", "none")

    def test_unreadable_marker_is_skipped(self, tmp_path: Path) -> None:
        _write(tmp_path, "Gemfile", "gem 'rails'")
        with patch.object(Path, "read_text", side_effect=PermissionError("denied")):
            assert detect_project(tmp_path) == ProjectInfo("ruby", "none")

    def test_directory_named_like_marker_is_ignored(self, tmp_path: Path) -> None:
        (tmp_path / "go.mod").mkdir()
        assert detect_project(tmp_path) == ProjectInfo()
