"""CLI application entry point and command routing for create-playwright.

This module is the **sole error boundary** for the entire application.
It catches :class:`~create_playwright.exceptions.CreatePlaywrightError`,
``KeyboardInterrupt`` and any unexpected ``Exception``, renders a short
message and returns a well-defined exit code.

Architecture notes
------------------
* No business logic lives here — the flow lives in
  :mod:`create_playwright.cli.generator`, planning in ``core``.
* This module is the only place that translates between the domain
  world and the OS process exit code.
"""

from __future__ import annotations

import argparse
import logging
import sys

from create_playwright.cli import exit_codes
from create_playwright.cli.console import configure_logging, console, escape
from create_playwright.exceptions import CreatePlaywrightError
from create_playwright.version import __version__

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    * ``create-playwright [DIR]``    — scaffold a project (interactive)
    * ``create-playwright --doctor`` — environment diagnostics
    * ``create-playwright --version``
    """
    parser = argparse.ArgumentParser(
        prog="create-playwright",
        description="Set up end-to-end testing with Playwright Test.",
        epilog=(
            "Set TEST_OPTIONS to a JSON object "
            '(e.g. \'{"testDir": "e2e", "installGitHubActions": true, '
            '"language": "TypeScript"}\') to skip the questions.'
        ),
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "root_dir",
        nargs="?",
        default=None,
        metavar="DIR",
        help="Project directory (default: the current directory).",
    )
    parser.add_argument(
        "--doctor",
        action="store_true",
        help="Check that Node.js, npm, npx and yarn are available, then exit.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log every file write and command.",
    )
    return parser


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _handle_init(root_arg: str | None) -> int:
    """Scaffold a Playwright Test project in *root_arg* (or the cwd)."""
    from create_playwright.cli.generator import Generator
    from create_playwright.infra.project_files import determine_root_dir

    generator = Generator(determine_root_dir(root_arg))
    generator.run()
    return exit_codes.SUCCESS


def _handle_doctor() -> int:
    """Dispatch the ``--doctor`` diagnostics command."""
    from create_playwright.cli.doctor import run_doctor

    return run_doctor()


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the create-playwright CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.

    Returns
    -------
    int
        OS process exit code.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)
    configure_logging(verbose=args.verbose)

    if args.doctor:
        return _handle_doctor()

    return _handle_init(args.root_dir)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point."""
    try:
        code = main()
        sys.exit(code)
    except CreatePlaywrightError as exc:
        logger.debug("Aborting", exc_info=True)
        console.print(f"[bold red]Error:[/bold red] {escape(exc)}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {escape(exc.hint)}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        logger.debug("Unexpected error", exc_info=True)
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {escape(exc)}"
        )
        sys.exit(exit_codes.GENERAL_ERROR)
