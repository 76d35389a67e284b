"""Parsing and validation of answer records.

``TEST_OPTIONS`` carries a JSON object that replaces the interactive
prompts in automated runs.  Its keys keep the camel-case names used by
the npm initializer so existing CI recipes keep working::

    TEST_OPTIONS='{"testDir": "tests", "installGitHubActions": false, "language": "JavaScript"}'

Every function here is pure apart from logging ignored keys.
"""

from __future__ import annotations

import json
import logging
import posixpath
from pathlib import PurePosixPath, PureWindowsPath
from typing import Any

from create_playwright.core.models import LANGUAGES, Language, PromptOptions
from create_playwright.exceptions import InvalidOptionsError

logger = logging.getLogger(__name__)

TEST_OPTIONS_ENV: str = "TEST_OPTIONS"

_KNOWN_KEYS: frozenset[str] = frozenset({"testDir", "installGitHubActions", "language"})


def language_to_file_extension(language: Language) -> str:
    """Return ``"js"`` for JavaScript and ``"ts"`` for TypeScript."""
    return "js" if language == "JavaScript" else "ts"


def validate_test_dir(test_dir: str) -> str:
    """Normalise *test_dir* to a relative POSIX path.

    Raises
    ------
    InvalidOptionsError
        If the path is empty, absolute, or escapes the project root.
    """
    stripped = test_dir.strip()
    if not stripped:
        raise InvalidOptionsError(
            "The test directory must not be empty.",
            hint="Use a relative path such as 'e2e' or 'tests'.",
        )

    windows_path = PureWindowsPath(stripped)
    if windows_path.is_absolute() or windows_path.drive or stripped.startswith("/"):
        raise InvalidOptionsError(
            f"The test directory must be relative to the project: {stripped!r}",
        )

    parts = [part for part in PurePosixPath(stripped.replace("\\", "/")).parts if part != "."]
    depth = 0
    for part in parts:
        depth += -1 if part == ".." else 1
        if depth < 0:
            raise InvalidOptionsError(
                f"The test directory must stay inside the project: {stripped!r}",
            )
    if not parts or depth == 0:
        raise InvalidOptionsError(
            f"The test directory must name a sub-directory of the project: {stripped!r}",
        )
    return posixpath.normpath("/".join(parts))


def options_from_mapping(data: dict[str, Any]) -> PromptOptions:
    """Build :class:`PromptOptions` from a camel-case mapping.

    Missing keys fall back to the prompt defaults.  Unknown keys are
    ignored with a warning, so newer option records still work.
    """
    unknown = sorted(set(data) - _KNOWN_KEYS)
    if unknown:
        logger.warning(
            "Ignoring unknown option(s): %s (supported: %s)",
            ", ".join(unknown),
            ", ".join(sorted(_KNOWN_KEYS)),
        )

    defaults = PromptOptions()

    test_dir = data.get("testDir", defaults.test_dir)
    if not isinstance(test_dir, str):
        raise InvalidOptionsError("'testDir' must be a string.")

    install_github_actions = data.get("installGitHubActions", defaults.install_github_actions)
    if not isinstance(install_github_actions, bool):
        raise InvalidOptionsError("'installGitHubActions' must be true or false.")

    language = data.get("language", defaults.language)
    if language not in LANGUAGES:
        raise InvalidOptionsError(
            f"Unsupported language: {language!r}",
            hint=f"Choose one of: {', '.join(LANGUAGES)}",
        )

    return PromptOptions(
        test_dir=validate_test_dir(test_dir),
        install_github_actions=install_github_actions,
        language=language,
    )


def parse_test_options(raw: str) -> PromptOptions:
    """Parse the JSON value of ``TEST_OPTIONS``.

    Raises
    ------
    InvalidOptionsError
        On malformed JSON, a non-object payload, or invalid values.
    """
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise InvalidOptionsError(
            f"{TEST_OPTIONS_ENV} is not valid JSON: {exc.msg}",
            hint='Example: {"testDir": "e2e", "installGitHubActions": true, "language": "TypeScript"}',
        ) from exc

    if not isinstance(data, dict):
        raise InvalidOptionsError(f"{TEST_OPTIONS_ENV} must be a JSON object.")

    return options_from_mapping(data)
