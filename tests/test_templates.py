"""Tests for placeholder substitution (core/templates.py)."""

from __future__ import annotations

from create_playwright.core.templates import execute_template


class TestExecuteTemplate:
    def test_replaces_placeholder(self) -> None:
        assert execute_template("testDir: '{{testDir}}'", {"testDir": "e2e"}) == "testDir: 'e2e'"

    def test_replaces_every_occurrence(self) -> None:
        assert execute_template("{{a}}-{{a}}", {"a": "x"}) == "x-x"

    def test_multiple_keys(self) -> None:
        result = execute_template("{{a}} {{b}}", {"a": "1", "b": "2"})
        assert result == "1 2"

    def test_unknown_placeholder_left_intact(self) -> None:
        assert execute_template("{{missing}}", {"a": "1"}) == "{{missing}}"

    def test_no_values(self) -> None:
        assert execute_template("plain {{x}}", {}) == "plain {{x}}"
