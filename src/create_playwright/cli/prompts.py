"""Interactive questions for the CLI layer.

Responsible for:

* Reading answers from ``TEST_OPTIONS`` when it is set.
* Otherwise asking the three questions via questionary.
* Asking whether an existing file may be overwritten.

All validation of answers lives in :mod:`create_playwright.core.options`.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from typing import Any

from create_playwright.core.models import LANGUAGES, PromptOptions
from create_playwright.core.options import (
    TEST_OPTIONS_ENV,
    parse_test_options,
    validate_test_dir,
)
from create_playwright.exceptions import (
    EnvironmentError,
    InvalidOptionsError,
    PromptCancelledError,
)


def _import_questionary() -> Any:
    """Import questionary lazily for interactive prompts."""
    try:
        import questionary
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "questionary is not installed. Install with: pip install questionary",
            hint=f"Or set {TEST_OPTIONS_ENV} to answer the questions non-interactively.",
        ) from exc
    return questionary


def _answered(value: Any) -> Any:
    """Return *value*, or raise when questionary reported a cancel."""
    if value is None:
        raise PromptCancelledError(
            "No answer given.",
            hint="Answer the question and press Enter, or press Ctrl+C to quit.",
        )
    return value


def _validate_test_dir_answer(text: str) -> bool | str:
    """questionary validator: ``True`` or an error message."""
    try:
        validate_test_dir(text)
    except InvalidOptionsError as exc:
        return str(exc)
    return True


def is_non_interactive(environ: Mapping[str, str] | None = None) -> bool:
    """Return whether answers come from ``TEST_OPTIONS``."""
    env = os.environ if environ is None else environ
    return bool(env.get(TEST_OPTIONS_ENV))


def ask_questions(environ: Mapping[str, str] | None = None) -> PromptOptions:
    """Collect the answers for a scaffolding run.

    Returns
    -------
    PromptOptions
        Answers parsed from ``TEST_OPTIONS`` or entered interactively.

    Raises
    ------
    InvalidOptionsError
        If ``TEST_OPTIONS`` is malformed.
    PromptCancelledError
        If the user dismisses a prompt.
    """
    env = os.environ if environ is None else environ
    raw = env.get(TEST_OPTIONS_ENV)
    if raw:
        return parse_test_options(raw)

    questionary = _import_questionary()
    defaults = PromptOptions()

    language = _answered(
        questionary.select(
            "Do you want to use TypeScript or JavaScript?",
            choices=list(LANGUAGES),
            default=defaults.language,
            use_arrow_keys=True,
        ).ask()
    )
    test_dir = _answered(
        questionary.text(
            "Where to put your end-to-end tests?",
            default=defaults.test_dir,
            validate=_validate_test_dir_answer,
        ).ask()
    )
    install_github_actions = _answered(
        questionary.confirm(
            "Add a GitHub Actions workflow?",
            default=defaults.install_github_actions,
        ).ask()
    )

    return PromptOptions(
        test_dir=validate_test_dir(test_dir),
        install_github_actions=bool(install_github_actions),
        language=language,
    )


def confirm_overwrite(display_path: str) -> bool:
    """Ask whether the existing file at *display_path* may be replaced."""
    questionary = _import_questionary()
    return bool(
        _answered(
            questionary.confirm(
                f"{display_path} already exists. Override it?",
                default=False,
            ).ask()
        )
    )
