"""Shared pytest fixtures and configuration for the create-playwright test suite.

Guidelines
----------
* No network access and no real npm / Yarn process in any test.
* Command execution is replaced by :class:`RecordingRunner`.
* Filesystem tests work inside ``tmp_path`` only.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterator
from pathlib import Path

import pytest

from create_playwright.core.models import Command
from create_playwright.exceptions import AssetNotFoundError

FAKE_ASSETS: dict[str, str] = {
    "playwright.config.ts": "export default { testDir: '{{testDir}}' };\n",
    "playwright.config.js": "module.exports = { testDir: '{{testDir}}' };\n",
    "example.spec.ts": "// ts example\n",
    "example.spec.js": "// js example\n",
    "github-actions.yml": "install: {{installDepsCommand}}\nrun: {{runTestsCommand}}\n",
}


class FakeAssets:
    """In-memory :class:`AssetLoader`."""

    def __init__(self, assets: dict[str, str] | None = None) -> None:
        self.assets = dict(FAKE_ASSETS if assets is None else assets)

    def read(self, name: str) -> str:
        try:
            return self.assets[name]
        except KeyError as exc:
            raise AssetNotFoundError(f"missing {name}") from exc


class RecordingRunner:
    """:class:`CommandRunner` that records commands instead of running them.

    ``npm init -y`` / ``yarn init -y`` write a package.json the way npm
    does, so the rest of the flow can proceed.
    """

    def __init__(self) -> None:
        self.calls: list[tuple[Command, Path]] = []

    def run(self, command: Command, cwd: Path) -> None:
        self.calls.append((command, cwd))
        if command.command.endswith("init -y"):
            package_json = {
                "name": cwd.name,
                "version": "1.0.0",
                "scripts": {"test": 'echo "Error: no test specified" && exit 1'},
            }
            (cwd / "package.json").write_text(
                json.dumps(package_json, indent=2) + "\n", encoding="utf-8",
            )

    @property
    def commands(self) -> list[str]:
        return [command.command for command, _ in self.calls]


@pytest.fixture
def fake_assets() -> FakeAssets:
    return FakeAssets()


@pytest.fixture
def runner() -> RecordingRunner:
    return RecordingRunner()


@pytest.fixture
def tools_available(monkeypatch: pytest.MonkeyPatch) -> None:
    """Pretend npm, npx and yarn are on PATH."""
    monkeypatch.setattr(
        "create_playwright.cli.generator.require_tools",
        lambda names: {name: Path(f"/usr/bin/{name}") for name in names},
    )


@pytest.fixture(autouse=True)
def _reset_package_logger() -> Iterator[None]:
    """Undo ``configure_logging`` so caplog keeps seeing records."""
    yield
    logger = logging.getLogger("create_playwright")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
