"""Infrastructure: templates bundled as package data.

Implements :class:`~create_playwright.core.protocols.AssetLoader` on
top of :mod:`importlib.resources`, so templates resolve the same way
from a source checkout, an installed wheel, or a zip import.
"""

from __future__ import annotations

import logging
from importlib import resources
from typing import TYPE_CHECKING

from create_playwright.exceptions import AssetNotFoundError

if TYPE_CHECKING:
    from importlib.resources.abc import Traversable

logger = logging.getLogger(__name__)

ASSETS_PACKAGE: str = "create_playwright"
ASSETS_DIR: str = "assets"


class PackagedAssetLoader:
    """Read templates from ``create_playwright/assets``.

    Satisfies the :class:`AssetLoader` protocol structurally.
    """

    def __init__(self, root: Traversable | None = None) -> None:
        self._root: Traversable = (
            root if root is not None else resources.files(ASSETS_PACKAGE) / ASSETS_DIR
        )

    def read(self, name: str) -> str:
        """Return the UTF-8 text of the asset called *name*.

        Raises
        ------
        AssetNotFoundError
            When the asset does not exist or cannot be read.
        """
        asset = self._root / name
        logger.debug("Reading asset %s", name)
        try:
            return asset.read_text(encoding="utf-8")
        except OSError as exc:
            raise AssetNotFoundError(
                f"Template '{name}' is missing from the installation.",
                hint="Reinstall create-playwright: pip install --force-reinstall create-playwright",
            ) from exc
