"""Domain models for create-playwright.

All models are **frozen** dataclasses — immutable value objects with no
behaviour beyond data access and no dependency on external packages.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Literal

Language = Literal["TypeScript", "JavaScript"]
"""Language the generated config and example test are written in."""

PackageManager = Literal["npm", "yarn"]
"""Node package manager used to initialise the project and install deps."""

LANGUAGES: tuple[Language, ...] = ("TypeScript", "JavaScript")


# ---------------------------------------------------------------------------
# Answers
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class PromptOptions:
    """The user's answers, collected interactively or from ``TEST_OPTIONS``."""

    test_dir: str = "e2e"
    """Directory, relative to the project root, holding the tests."""

    install_github_actions: bool = True
    """Whether to add a GitHub Actions workflow."""

    language: Language = "TypeScript"
    """Language of the generated files."""


# ---------------------------------------------------------------------------
# Plan
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Command:
    """A shell command together with the label shown before running it."""

    name: str
    """Human-readable label, e.g. ``"Installing Playwright Test"``."""

    command: str
    """Command line executed through the shell."""


@dataclass(frozen=True, slots=True)
class ChangePlan:
    """Everything a scaffolding run will do to the project directory.

    ``files`` maps relative POSIX paths to their full contents in write
    order; ``commands`` run in listed order.
    """

    files: Mapping[str, str] = field(default_factory=dict)
    commands: tuple[Command, ...] = ()
