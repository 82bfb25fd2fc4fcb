"""Tests for the answer schema (core/schema.py)."""

from __future__ import annotations

import pytest

from agent_scaffold.core.schema import DEFAULT_SCHEMA, NO_FRAMEWORK, Scope


class TestLanguages:
    @pytest.mark.parametrize("value", ["python", "Python", "  PYTHON "])
    def test_lookup_is_case_insensitive(self, value: str) -> None:
        lang = DEFAULT_SCHEMA.find_language(value)
        assert lang is not None
        assert lang.id == "python"

    @pytest.mark.parametrize("value", [None, "", "cobol", 3, ["python"]])
    def test_unknown_returns_none(self, value: object) -> None:
        assert DEFAULT_SCHEMA.find_language(value) is None

    def test_ids_are_unique(self) -> None:
        ids = [lang.id for lang in DEFAULT_SCHEMA.languages]
        assert len(ids) == len(set(ids))


class TestFrameworks:
    def test_frameworks_for_language(self) -> None:
        assert DEFAULT_SCHEMA.frameworks_for("elixir") == ("phoenix",)

    def test_frameworks_for_unknown_language_is_empty(self) -> None:
        assert DEFAULT_SCHEMA.frameworks_for("cobol") == ()

    @pytest.mark.parametrize("value", [None, "", "none", "None", " NONE "])
    def test_none_is_always_compatible(self, value: str | None) -> None:
        for lang in DEFAULT_SCHEMA.languages:
            assert DEFAULT_SCHEMA.find_framework(lang.id, value) == NO_FRAMEWORK

    def test_non_string_framework_is_incompatible(self) -> None:
        assert DEFAULT_SCHEMA.find_framework("ruby", 7) is None  # type: ignore[arg-type]

    def test_canonicalises_case(self) -> None:
        assert DEFAULT_SCHEMA.find_framework("ruby", "Rails") == "rails"

    def test_incompatible_returns_none(self) -> None:
        assert DEFAULT_SCHEMA.find_framework("python", "rails") is None

    def test_language_without_frameworks_rejects_any(self) -> None:
        assert DEFAULT_SCHEMA.find_framework("rust", "actix") is None


class TestCommands:
    def test_common_first_then_language_specific(self) -> None:
        commands = DEFAULT_SCHEMA.commands_for("python")
        assert commands[:3] == DEFAULT_SCHEMA.common_commands
        assert "type-check" in commands

    def test_unknown_language_gets_common_only(self) -> None:
        assert DEFAULT_SCHEMA.commands_for("cobol") == DEFAULT_SCHEMA.common_commands


class TestHooksAndMcps:
    def test_hook_lookup_returns_canonical_casing(self) -> None:
        hook = DEFAULT_SCHEMA.find_hook("PRETOOLUSE")
        assert hook is not None
        assert hook.id == "preToolUse"

    def test_unknown_hook(self) -> None:
        assert DEFAULT_SCHEMA.find_hook("onSave") is None

    @pytest.mark.parametrize("value", [None, 1, ["stop"]])
    def test_non_string_lookups_return_none(self, value: object) -> None:
        assert DEFAULT_SCHEMA.find_hook(value) is None  # type: ignore[arg-type]
        assert DEFAULT_SCHEMA.find_mcp(value) is None  # type: ignore[arg-type]

    def test_mcps_for_narrows_by_framework(self) -> None:
        with_phoenix = {m.id for m in DEFAULT_SCHEMA.mcps_for("elixir", "phoenix")}
        without = {m.id for m in DEFAULT_SCHEMA.mcps_for("elixir", "none")}
        assert "phoenix-server" in with_phoenix
        assert "phoenix-server" not in without
        assert "elixir-ls" in without

    def test_universal_mcps_available_everywhere(self) -> None:
        for lang in DEFAULT_SCHEMA.languages:
            ids = {m.id for m in DEFAULT_SCHEMA.mcps_for(lang.id, "none")}
            assert {"filesystem", "github", "memory", "fetch"} <= ids

    def test_ordering_follows_declaration(self) -> None:
        assert DEFAULT_SCHEMA.order_hooks(["stop", "preToolUse", "stop"]) == (
            "preToolUse",
            "stop",
        )
        assert DEFAULT_SCHEMA.order_mcps(["phoenix-server", "github"]) == (
            "github",
            "phoenix-server",
        )


class TestScope:
    def test_empty_scope_allows_everything(self) -> None:
        assert Scope().allows("anything", "whatever")

    def test_language_and_framework_must_both_match(self) -> None:
        scope = Scope(languages=frozenset({"python"}), frameworks=frozenset({"django"}))
        assert scope.allows("python", "django")
        assert not scope.allows("python", "flask")
        assert not scope.allows("ruby", "django")
