"""create-playwright — scaffold a Playwright Test end-to-end project.

Asks a few questions, writes template files, installs dependencies
through npm or Yarn and patches ``package.json``.
"""

from create_playwright.version import __version__

__all__: list[str] = ["__version__"]
