"""Custom exception hierarchy for create-playwright.

Every error that crosses a layer boundary inherits from
:class:`CreatePlaywrightError`.  Raw ``OSError``, JSON decoding and
subprocess failures are caught in the infrastructure layer and
re-raised as one of the typed subclasses below.

Hierarchy
---------
CreatePlaywrightError
├── InvalidOptionsError
├── PromptCancelledError
├── AssetNotFoundError
├── FileWriteError
├── PackageJsonError
├── CommandFailedError
├── ToolNotFoundError
└── EnvironmentError
"""

from __future__ import annotations


class CreatePlaywrightError(Exception):
    """Base exception for all create-playwright errors.

    The CLI error boundary renders the message, followed by the
    optional :attr:`hint`, and exits with status 1.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Answers ---------------------------------------------------------------

class InvalidOptionsError(CreatePlaywrightError):
    """Raised when ``TEST_OPTIONS`` or a prompt answer is unusable."""


class PromptCancelledError(CreatePlaywrightError):
    """Raised when the user dismisses an interactive prompt."""


# --- Files -----------------------------------------------------------------

class AssetNotFoundError(CreatePlaywrightError):
    """Raised when a bundled template cannot be read."""


class FileWriteError(CreatePlaywrightError):
    """Raised when a project file cannot be created or written."""


class PackageJsonError(CreatePlaywrightError):
    """Raised when ``package.json`` is missing or not a JSON object."""


# --- External tools --------------------------------------------------------

class CommandFailedError(CreatePlaywrightError):
    """Raised when a package-manager command exits with a non-zero status."""

    def __init__(
        self,
        message: str,
        *,
        hint: str | None = None,
        returncode: int | None = None,
    ) -> None:
        super().__init__(message, hint=hint)
        self.returncode: int | None = returncode


class ToolNotFoundError(CreatePlaywrightError):
    """Raised when node, npm, npx or yarn cannot be located on PATH."""


class EnvironmentError(CreatePlaywrightError):
    """Raised when an optional Python dependency (rich, questionary) is missing."""
