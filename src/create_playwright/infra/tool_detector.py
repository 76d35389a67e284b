"""Infrastructure: Node.js tool detection and platform guidance.

Locates ``node``, ``npm``, ``npx`` and ``yarn`` on the system PATH
and provides platform-specific installation guidance when one is
missing.

Rules
-----
* Detection via :func:`shutil.which` only — no subprocess.
* No automatic installation.
* No ``print()`` — callers handle user-facing output.
"""

from __future__ import annotations

import logging
import platform
import shutil
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

from create_playwright.core.models import PackageManager
from create_playwright.exceptions import ToolNotFoundError

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Detection result
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ToolStatus:
    """Result of a PATH probe for one executable.

    Attributes
    ----------
    name : str
        Executable name that was looked up.
    found : bool
        Whether the executable was located on PATH.
    path : Path | None
        Absolute path to the executable, or ``None``.
    install_commands : tuple[str, ...]
        Suggested install commands for the current platform.  Empty
        when the tool is already present.
    """

    name: str
    found: bool
    path: Path | None
    install_commands: tuple[str, ...]


# ---------------------------------------------------------------------------
# Detection logic
# ---------------------------------------------------------------------------

def detect_tool(name: str) -> ToolStatus:
    """Probe PATH for *name*; never raises."""
    result = shutil.which(name)
    if result is not None:
        resolved = Path(result).resolve()
        logger.debug("Found %s at %s", name, resolved)
        return ToolStatus(name=name, found=True, path=resolved, install_commands=())

    logger.debug("%s not found on PATH", name)
    return ToolStatus(
        name=name,
        found=False,
        path=None,
        install_commands=_platform_install_commands(name),
    )


def require_tools(names: Iterable[str]) -> dict[str, Path]:
    """Locate every tool in *names* or raise for the first missing one."""
    located: dict[str, Path] = {}
    for name in names:
        status = detect_tool(name)
        if not status.found or status.path is None:
            hint_lines: list[str] = []
            if status.install_commands:
                hint_lines.append(f"Install {name} using one of:")
                hint_lines.extend(f"  {cmd}" for cmd in status.install_commands)
            raise ToolNotFoundError(
                f"{name} is not installed or not on PATH.",
                hint="\n".join(hint_lines) if hint_lines else None,
            )
        located[name] = status.path
    return located


def tools_for(package_manager: PackageManager) -> tuple[str, ...]:
    """Executables a scaffolding run with *package_manager* invokes."""
    if package_manager == "yarn":
        return ("yarn", "npx")
    return ("npm", "npx")


# ---------------------------------------------------------------------------
# Platform-specific install guidance
# ---------------------------------------------------------------------------

def _platform_install_commands(name: str) -> tuple[str, ...]:
    """Return install commands for *name* appropriate for the current OS."""
    if name == "yarn":
        return ("corepack enable", "npm install --global yarn")

    # npm and npx ship with Node.js.
    system = platform.system().lower()
    if system == "windows":
        return (
            "winget install OpenJS.NodeJS.LTS",
            "choco install nodejs-lts",
        )
    if system == "linux":
        return (
            "sudo apt install nodejs npm",
            "sudo dnf install nodejs",
            "sudo pacman -S nodejs npm",
        )
    if system == "darwin":
        return ("brew install node",)
    return ("Please install Node.js from https://nodejs.org/en/download",)
