"""Core change planner — turns answers into a file/command plan.

The planner depends on an :class:`~create_playwright.core.protocols.AssetLoader`
injected at construction time.  Everything it needs to know about the
target directory (whether ``package.json`` exists, the current
``.gitignore``) is passed in by the caller.

Guarantees
----------
* No filesystem access, no subprocesses, no ``print()``.
* Given the same inputs the returned plan is identical, including the
  order of files and commands.
"""

from __future__ import annotations

from create_playwright.core.models import ChangePlan, Command, PackageManager, PromptOptions
from create_playwright.core.options import language_to_file_extension
from create_playwright.core.package_json import PACKAGE_JSON_TEST_SCRIPT_CMD
from create_playwright.core.protocols import AssetLoader
from create_playwright.core.templates import execute_template

GITHUB_WORKFLOW_PATH: str = ".github/workflows/playwright.yml"

GITIGNORE_ENTRIES: tuple[str, ...] = ("node_modules/", "test-results/")


# ---------------------------------------------------------------------------
# Package-manager specific command lines
# ---------------------------------------------------------------------------

def command_to_run_tests(package_manager: PackageManager) -> str:
    """Return the command that runs the generated ``test:e2e`` script."""
    if package_manager == "yarn":
        return f"yarn {PACKAGE_JSON_TEST_SCRIPT_CMD}"
    return f"npm run {PACKAGE_JSON_TEST_SCRIPT_CMD}"


def command_to_install_deps(package_manager: PackageManager) -> str:
    """Return the CI command installing locked dependencies."""
    return "yarn" if package_manager == "yarn" else "npm ci"


def npx_runner(package_manager: PackageManager) -> str:
    """Return the launcher for package binaries (``npx`` or ``yarn``)."""
    return "yarn" if package_manager == "yarn" else "npx"


# ---------------------------------------------------------------------------
# .gitignore
# ---------------------------------------------------------------------------

_ANY_DEPTH = "**/"
_CONTENTS_GLOBS: tuple[str, ...] = ("/**", "/*")


def _ignored_name(line: str) -> str:
    """Reduce a .gitignore pattern to the bare name it ignores."""
    name = line.strip()
    if name.startswith(_ANY_DEPTH):
        name = name[len(_ANY_DEPTH):]
    for suffix in _CONTENTS_GLOBS:
        if name.endswith(suffix):
            name = name[: -len(suffix)]
            break
    return name.strip("/")


def _has_entry(lines: list[str], entry: str) -> bool:
    name = _ignored_name(entry)
    return any(_ignored_name(line) == name for line in lines)


def build_gitignore(existing: str | None) -> str:
    """Merge the Playwright ignore entries into *existing* contents.

    Entries already present are not added again, so running the
    scaffolder twice leaves ``.gitignore`` unchanged the second time.
    """
    kept = existing.rstrip() if existing else ""
    gitignore = kept + "\n" if kept else ""
    lines = gitignore.splitlines()
    for entry in GITIGNORE_ENTRIES:
        if not _has_entry(lines, entry):
            gitignore += entry + "\n"
    return gitignore


# ---------------------------------------------------------------------------
# Planner
# ---------------------------------------------------------------------------

class ChangePlanner:
    """Stateless service computing the :class:`ChangePlan` for a project.

    Parameters
    ----------
    assets:
        Any object satisfying the :class:`AssetLoader` protocol.
    """

    def __init__(self, assets: AssetLoader) -> None:
        self._assets: AssetLoader = assets

    def identify_changes(
        self,
        answers: PromptOptions,
        package_manager: PackageManager,
        *,
        has_package_json: bool,
        existing_gitignore: str | None = None,
    ) -> ChangePlan:
        """Compute the files to write and the commands to run.

        Files, in order: Playwright config, optional GitHub Actions
        workflow, example test, ``.gitignore``.  Commands, in order:
        project initialisation (only without ``package.json``),
        Playwright Test installation, browser download.
        """
        extension = language_to_file_extension(answers.language)
        files: dict[str, str] = {}

        files[f"playwright.config.{extension}"] = execute_template(
            self._assets.read(f"playwright.config.{extension}"),
            {"testDir": answers.test_dir},
        )

        if answers.install_github_actions:
            files[GITHUB_WORKFLOW_PATH] = execute_template(
                self._assets.read("github-actions.yml"),
                {
                    "installDepsCommand": command_to_install_deps(package_manager),
                    "runTestsCommand": command_to_run_tests(package_manager),
                },
            )

        files[f"{answers.test_dir}/example.spec.{extension}"] = self._assets.read(
            f"example.spec.{extension}",
        )

        files[".gitignore"] = build_gitignore(existing_gitignore)

        return ChangePlan(
            files=files,
            commands=self._commands(package_manager, has_package_json=has_package_json),
        )

    @staticmethod
    def _commands(
        package_manager: PackageManager,
        *,
        has_package_json: bool,
    ) -> tuple[Command, ...]:
        commands: list[Command] = []
        if not has_package_json:
            if package_manager == "yarn":
                commands.append(Command("Initializing Yarn project", "yarn init -y"))
            else:
                commands.append(Command("Initializing NPM project", "npm init -y"))

        if package_manager == "yarn":
            install = "yarn add --dev @playwright/test"
        else:
            install = "npm install --save-dev @playwright/test"
        commands.append(Command("Installing Playwright Test", install))

        commands.append(Command("Downloading browsers", "npx playwright install --with-deps"))
        return tuple(commands)
