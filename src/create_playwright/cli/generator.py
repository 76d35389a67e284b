"""The scaffolding flow: ask, plan, write, install, patch, explain.

:class:`Generator` wires the infrastructure adapters into the core
planner and owns every user-facing message of a run.  Steps run
strictly in sequence and the first error aborts the run.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from pathlib import Path

from create_playwright.cli.console import console, escape
from create_playwright.cli.prompts import ask_questions, confirm_overwrite, is_non_interactive
from create_playwright.core.models import ChangePlan, Command, PromptOptions
from create_playwright.core.options import language_to_file_extension
from create_playwright.core.package_json import patch_package_json
from create_playwright.core.planner import ChangePlanner, command_to_run_tests, npx_runner
from create_playwright.core.protocols import AssetLoader, CommandRunner
from create_playwright.infra.assets import PackagedAssetLoader
from create_playwright.infra.command_runner import SubprocessCommandRunner
from create_playwright.infra.package_manager import determine_package_manager
from create_playwright.infra.project_files import (
    GITIGNORE,
    PACKAGE_JSON,
    ensure_root_dir,
    load_package_json,
    read_text_if_exists,
    relative_display,
    save_package_json,
    write_project_file,
)
from create_playwright.infra.tool_detector import require_tools, tools_for

logger = logging.getLogger(__name__)

DOCS_URL: str = "https://playwright.dev/docs/intro"


class Generator:
    """Scaffold a Playwright Test project inside *root_dir*.

    The directory is created on construction and the package manager
    is detected from it.  Collaborators default to the real adapters;
    tests pass fakes.
    """

    def __init__(
        self,
        root_dir: Path,
        *,
        assets: AssetLoader | None = None,
        runner: CommandRunner | None = None,
        environ: Mapping[str, str] | None = None,
        cwd: Path | None = None,
    ) -> None:
        self.root_dir: Path = root_dir
        self._environ: Mapping[str, str] = os.environ if environ is None else environ
        self._cwd: Path = cwd if cwd is not None else Path.cwd()
        self._planner = ChangePlanner(assets if assets is not None else PackagedAssetLoader())
        self._runner: CommandRunner = runner if runner is not None else SubprocessCommandRunner()

        ensure_root_dir(self.root_dir)
        self.package_manager = determine_package_manager(self.root_dir, self._environ)

    def run(self) -> PromptOptions:
        """Execute the whole flow and return the answers that drove it."""
        self._print_intro()
        answers = ask_questions(self._environ)
        plan = self.identify_changes(answers)
        self._create_files(plan)
        self._execute_commands(plan.commands)
        self._patch_package_json()
        self._print_outro(answers)
        return answers

    # ------------------------------------------------------------------
    # Planning
    # ------------------------------------------------------------------

    def identify_changes(self, answers: PromptOptions) -> ChangePlan:
        """Compute the plan for *answers* against the current directory state."""
        return self._planner.identify_changes(
            answers,
            self.package_manager,
            has_package_json=(self.root_dir / PACKAGE_JSON).exists(),
            existing_gitignore=read_text_if_exists(self.root_dir / GITIGNORE),
        )

    # ------------------------------------------------------------------
    # Applying
    # ------------------------------------------------------------------

    def _create_files(self, plan: ChangePlan) -> None:
        for relative_path, contents in plan.files.items():
            target = self.root_dir.joinpath(*relative_path.split("/"))
            display = relative_display(target, self._cwd)
            # .gitignore already carries the existing contents.
            if target.exists() and relative_path != GITIGNORE:
                if is_non_interactive(self._environ):
                    logger.warning("%s already exists, keeping it", display)
                    continue
                if not confirm_overwrite(display):
                    logger.info("Keeping existing %s", display)
                    continue
            console.print(f"[dim]Writing {escape(display)}.[/dim]")
            write_project_file(self.root_dir, relative_path, contents)

    def _execute_commands(self, commands: tuple[Command, ...]) -> None:
        if not commands:
            return
        require_tools(tools_for(self.package_manager))
        for command in commands:
            console.print(f"{escape(command.name)} ({escape(command.command)})…")
            self._runner.run(command, self.root_dir)

    def _patch_package_json(self) -> None:
        package_json = load_package_json(self.root_dir)
        save_package_json(self.root_dir, patch_package_json(package_json))

    # ------------------------------------------------------------------
    # Messages
    # ------------------------------------------------------------------

    def _print_intro(self) -> None:
        console.print(
            "[yellow]Getting started with writing [bold]end-to-end[/bold] "
            "tests with [bold]Playwright[/bold]:[/yellow]"
        )
        location = relative_display(self.root_dir, self._cwd) or "."
        console.print(f"Initializing project in '{escape(location)}'")

    def _print_outro(self, answers: PromptOptions) -> None:
        run_tests = command_to_run_tests(self.package_manager)
        extension = language_to_file_extension(answers.language)
        example = os.path.join(*answers.test_dir.split("/"), f"example.spec.{extension}")
        path_to_navigate = relative_display(self.root_dir, self._cwd)
        prefix = f"  cd {escape(path_to_navigate)}\n" if path_to_navigate else ""

        console.print(
            "[green]✔ Success![/green] "
            f"[bold]Created a Playwright Test project at {escape(self.root_dir)}[/bold]"
        )
        console.print(
            "Inside that directory, you can run several commands:\n"
            "\n"
            f"  [cyan]{run_tests}[/cyan]\n"
            "    Runs the end-to-end tests.\n"
            "\n"
            f"  [cyan]{run_tests} -- --project=\"Desktop Chrome\"[/cyan]\n"
            "    Runs the tests only on Desktop Chrome.\n"
            "\n"
            f"  [cyan]{run_tests} -- {escape(example)}[/cyan]\n"
            "    Runs the tests of a specific file.\n"
            "\n"
            f"  [cyan]{npx_runner(self.package_manager)} playwright debug {run_tests}[/cyan]\n"
            "    Runs the tests in debug mode.\n"
            "\n"
            "We suggest that you begin by typing:\n"
            "\n"
            f"[cyan]{prefix}  {run_tests}[/cyan]\n"
            "\n"
            f"Visit {DOCS_URL} for more information. ✨\n"
            "\n"
            "Happy hacking! 🎭"
        )
