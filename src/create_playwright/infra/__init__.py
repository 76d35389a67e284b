"""Infrastructure layer — filesystem, subprocesses and PATH probing.

Every raw ``OSError`` or subprocess failure is caught here and
re-raised as a :class:`~create_playwright.exceptions.CreatePlaywrightError`
subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering); diagnostics
  go to the module loggers.
"""

from create_playwright.infra.assets import PackagedAssetLoader
from create_playwright.infra.command_runner import SubprocessCommandRunner
from create_playwright.infra.package_manager import determine_package_manager
from create_playwright.infra.tool_detector import ToolStatus, detect_tool, require_tools

__all__: list[str] = [
    "PackagedAssetLoader",
    "SubprocessCommandRunner",
    "ToolStatus",
    "detect_tool",
    "determine_package_manager",
    "require_tools",
]
