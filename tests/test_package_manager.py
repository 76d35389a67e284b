"""Tests for npm / Yarn detection (infra/package_manager.py)."""

from __future__ import annotations

from pathlib import Path

import pytest

from create_playwright.infra.package_manager import determine_package_manager


class TestDeterminePackageManager:
    def test_defaults_to_npm(self, tmp_path: Path) -> None:
        assert determine_package_manager(tmp_path, {}) == "npm"

    def test_yarn_lock_wins(self, tmp_path: Path) -> None:
        (tmp_path / "yarn.lock").write_text("", encoding="utf-8")
        env = {"npm_config_user_agent": "npm/10.2.0 node/v20.9.0 linux x64"}
        assert determine_package_manager(tmp_path, env) == "yarn"

    @pytest.mark.parametrize(
        ("user_agent", "expected"),
        [
            ("yarn/1.22.19 npm/? node/v18.17.0 darwin arm64", "yarn"),
            ("npm/10.2.0 node/v20.9.0 linux x64 workspaces/false", "npm"),
            ("pnpm/8.10.0 npm/? node/v20.9.0 linux x64", "npm"),
        ],
    )
    def test_user_agent(self, tmp_path: Path, user_agent: str, expected: str) -> None:
        env = {"npm_config_user_agent": user_agent}
        assert determine_package_manager(tmp_path, env) == expected

    def test_reads_process_environment(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        monkeypatch.setenv("npm_config_user_agent", "yarn/1.22.19")
        assert determine_package_manager(tmp_path) == "yarn"
