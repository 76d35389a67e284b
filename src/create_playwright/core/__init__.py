"""Core layer — answers, planning and pure data transformations.

Rules
-----
* No ``print()`` calls.
* No filesystem, network or subprocess I/O.
* No imports from ``cli`` or ``infra``.
"""

from create_playwright.core.models import ChangePlan, Command, PromptOptions
from create_playwright.core.planner import ChangePlanner, build_gitignore, command_to_run_tests
from create_playwright.core.protocols import AssetLoader, CommandRunner

__all__: list[str] = [
    "AssetLoader",
    "ChangePlan",
    "ChangePlanner",
    "Command",
    "CommandRunner",
    "PromptOptions",
    "build_gitignore",
    "command_to_run_tests",
]
