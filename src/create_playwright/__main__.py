"""Allow ``python -m create_playwright`` invocation.

Delegates to the CLI error-boundary entry point so that
``python -m create_playwright`` behaves identically to the
``create-playwright`` console script.
"""

from __future__ import annotations

from create_playwright.cli.app import cli

if __name__ == "__main__":
    cli()
