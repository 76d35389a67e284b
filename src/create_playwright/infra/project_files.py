"""Infrastructure: the project directory on disk.

Resolves the target directory and performs every filesystem read and
write of a scaffolding run.  ``OSError`` and JSON decoding failures
are re-raised as :class:`~create_playwright.exceptions.FileWriteError`
or :class:`~create_playwright.exceptions.PackageJsonError`.

No user-facing output lives here — callers announce writes themselves.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any

from create_playwright.core.package_json import render_package_json
from create_playwright.exceptions import FileWriteError, PackageJsonError

logger = logging.getLogger(__name__)

PACKAGE_JSON: str = "package.json"
GITIGNORE: str = ".gitignore"


# ---------------------------------------------------------------------------
# Root directory
# ---------------------------------------------------------------------------

def determine_root_dir(given_path: str | None = None, cwd: Path | None = None) -> Path:
    """Return the absolute project directory.

    An absolute *given_path* is used as-is, a relative one is resolved
    against *cwd* (default: the process working directory).  Without
    *given_path* the working directory itself is the project root.
    """
    base = cwd if cwd is not None else Path.cwd()
    if not given_path:
        return base
    path = Path(given_path).expanduser()
    if path.is_absolute():
        return path
    return base / path


def ensure_root_dir(root_dir: Path) -> None:
    """Create *root_dir* (and parents) when it does not exist yet."""
    if root_dir.is_dir():
        return
    logger.debug("Creating project directory %s", root_dir)
    try:
        root_dir.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise FileWriteError(
            f"Cannot create project directory {root_dir}: {exc.strerror or exc}",
        ) from exc


def relative_display(path: Path, cwd: Path | None = None) -> str:
    """Render *path* relative to *cwd* for messages.

    Paths outside *cwd* climb with ``..``; an empty string means *path*
    is *cwd* itself.  On Windows a path on another drive stays absolute.
    """
    base = cwd if cwd is not None else Path.cwd()
    try:
        relative = os.path.relpath(path.resolve(), base.resolve())
    except ValueError:
        return str(path)
    return "" if relative == os.curdir else relative


# ---------------------------------------------------------------------------
# Plain files
# ---------------------------------------------------------------------------

def read_text_if_exists(path: Path) -> str | None:
    """Return the contents of *path*, or ``None`` when it does not exist."""
    if not path.is_file():
        return None
    try:
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        raise FileWriteError(f"Cannot read {path}: {exc.strerror or exc}") from exc


def write_project_file(root_dir: Path, relative_path: str, contents: str) -> Path:
    """Write *contents* to ``root_dir / relative_path`` and return the path.

    Parent directories are created as needed.
    """
    target = root_dir.joinpath(*relative_path.split("/"))
    logger.debug("Writing %s (%d bytes)", target, len(contents))
    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        # newline="" keeps "\n" line endings on every platform.
        with target.open("w", encoding="utf-8", newline="") as handle:
            handle.write(contents)
    except OSError as exc:
        raise FileWriteError(f"Cannot write {target}: {exc.strerror or exc}") from exc
    return target


# ---------------------------------------------------------------------------
# package.json
# ---------------------------------------------------------------------------

def load_package_json(root_dir: Path) -> dict[str, Any]:
    """Parse ``package.json`` in *root_dir*.

    Raises
    ------
    PackageJsonError
        When the file is missing, is not valid JSON, or its root is not
        an object.
    """
    path = root_dir / PACKAGE_JSON
    try:
        raw = path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise PackageJsonError(
            f"{path} does not exist.",
            hint="Run 'npm init -y' (or 'yarn init -y') in the project directory and retry.",
        ) from exc
    except OSError as exc:
        raise PackageJsonError(f"Cannot read {path}: {exc.strerror or exc}") from exc

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise PackageJsonError(
            f"{path} is not valid JSON (line {exc.lineno}, column {exc.colno}).",
        ) from exc

    if not isinstance(data, dict):
        raise PackageJsonError(f"{path} must contain a JSON object.")
    return data


def save_package_json(root_dir: Path, package_json: dict[str, Any]) -> Path:
    """Write *package_json* back to *root_dir* in npm's formatting."""
    return write_project_file(root_dir, PACKAGE_JSON, render_package_json(package_json))
