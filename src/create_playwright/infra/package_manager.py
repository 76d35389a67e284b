"""Infrastructure: npm / Yarn detection."""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from pathlib import Path

from create_playwright.core.models import PackageManager

logger = logging.getLogger(__name__)

USER_AGENT_ENV: str = "npm_config_user_agent"


def determine_package_manager(
    root_dir: Path,
    environ: Mapping[str, str] | None = None,
) -> PackageManager:
    """Pick the package manager for *root_dir*.

    A ``yarn.lock`` in the project wins.  Otherwise the user agent set
    by ``npm init`` / ``yarn create`` decides, and npm is the default.
    """
    env = os.environ if environ is None else environ

    if (root_dir / "yarn.lock").exists():
        logger.debug("Found yarn.lock in %s, using yarn", root_dir)
        return "yarn"

    user_agent = env.get(USER_AGENT_ENV)
    if user_agent:
        manager: PackageManager = "yarn" if "yarn" in user_agent else "npm"
        logger.debug("Detected %s from %s=%r", manager, USER_AGENT_ENV, user_agent)
        return manager

    return "npm"
