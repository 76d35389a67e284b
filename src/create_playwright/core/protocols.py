"""Protocols (interfaces) consumed by the core layer.

Core code depends only on these contracts, never on the concrete
infrastructure adapters that satisfy them.
"""

from __future__ import annotations

from pathlib import Path
from typing import Protocol

from create_playwright.core.models import Command


class AssetLoader(Protocol):
    """Contract for template sources.

    Implementations raise
    :class:`~create_playwright.exceptions.AssetNotFoundError` when the
    named asset does not exist.
    """

    def read(self, name: str) -> str:
        """Return the text of the asset called *name*."""
        ...  # pragma: no cover


class CommandRunner(Protocol):
    """Contract for shell command execution backends.

    Implementations must map every backend failure to
    :class:`~create_playwright.exceptions.CommandFailedError`.
    """

    def run(self, command: Command, cwd: Path) -> None:
        """Run *command* inside *cwd*, blocking until it exits."""
        ...  # pragma: no cover
