"""Subprocess-backed implementation of :class:`~create_playwright.core.protocols.CommandRunner`.

This module is the **only** place that spawns package-manager
processes.  Commands run through the shell with the parent's stdio so
npm / Yarn progress output reaches the terminal unchanged.
"""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path

from create_playwright.core.models import Command
from create_playwright.exceptions import CommandFailedError

logger = logging.getLogger(__name__)


class SubprocessCommandRunner:
    """Run each :class:`Command` with :func:`subprocess.run`.

    Satisfies the :class:`CommandRunner` protocol structurally.
    """

    def run(self, command: Command, cwd: Path) -> None:
        """Run *command* in *cwd* and wait for it to finish.

        Raises
        ------
        CommandFailedError
            When the process cannot be started or exits non-zero.
        """
        logger.debug("Running %r in %s", command.command, cwd)
        try:
            result = subprocess.run(
                command.command,
                shell=True,
                cwd=str(cwd),
                check=False,
            )
        except OSError as exc:
            raise CommandFailedError(
                f"{command.name} failed: cannot run '{command.command}': {exc}",
            ) from exc

        logger.debug("%r exited with status %d", command.command, result.returncode)
        if result.returncode != 0:
            raise CommandFailedError(
                f"{command.name} failed: '{command.command}' exited with status {result.returncode}.",
                hint="Check the output above, fix the problem and run create-playwright again.",
                returncode=result.returncode,
            )
