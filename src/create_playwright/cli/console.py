"""CLI console and logging helpers with optional Rich support.

This module avoids module-level imports of optional UI dependencies so
bootstrap paths (``--help``, ``--version``) remain functional even when
Rich is not installed.
"""

from __future__ import annotations

import logging
import re
import sys
from typing import Any

from create_playwright.exceptions import EnvironmentError

_STYLE_WORDS = r"(?:bold|dim|red|green|yellow|cyan)"
_MARKUP_RE = re.compile(rf"\[/?{_STYLE_WORDS}(?: {_STYLE_WORDS})*\]")


def _load_rich_console_class() -> type[Any]:
    """Return ``rich.console.Console`` class or raise ``EnvironmentError``."""
    try:
        from rich.console import Console
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "rich is not installed. Install with: pip install rich",
        ) from exc
    return Console


def get_rich_console() -> Any:
    """Create a Rich console instance targeting stderr."""
    console_class = _load_rich_console_class()
    return console_class(stderr=True, highlight=False)


def escape(value: object) -> str:
    """Make *value* safe to interpolate into console markup.

    Without Rich nothing parses markup, so the text is returned as-is.
    """
    text = str(value)
    try:
        from rich.markup import escape as escape_markup
    except ModuleNotFoundError:
        return text
    return escape_markup(text)


def strip_markup(text: str) -> str:
    """Remove the console style tags, leaving any other brackets intact."""
    return _MARKUP_RE.sub("", text)


class _ConsoleProxy:
    """Minimal ``print``-compatible proxy with Rich fallback."""

    def print(self, *objects: object) -> None:
        """Render with Rich when available, else plain stderr print."""
        try:
            rich_console = get_rich_console()
        except EnvironmentError:
            print(*(strip_markup(o) if isinstance(o, str) else o for o in objects), file=sys.stderr)
            return
        rich_console.print(*objects)


console = _ConsoleProxy()


# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------

def configure_logging(verbose: bool = False) -> None:
    """Route ``create_playwright`` loggers to stderr.

    Uses :class:`rich.logging.RichHandler` when Rich is available.  The
    level is WARNING by default and DEBUG with ``--verbose``.
    """
    handler: logging.Handler
    try:
        from rich.console import Console
        from rich.logging import RichHandler
    except ModuleNotFoundError:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
    else:
        handler = RichHandler(
            console=Console(stderr=True),
            show_time=False,
            show_path=verbose,
        )

    logger = logging.getLogger("create_playwright")
    for existing in list(logger.handlers):
        logger.removeHandler(existing)
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    logger.propagate = False
