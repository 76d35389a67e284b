"""Pure transformations of a parsed ``package.json`` document."""

from __future__ import annotations

import json
from typing import Any

from create_playwright.exceptions import PackageJsonError

PACKAGE_JSON_TEST_SCRIPT_CMD: str = "test:e2e"
"""Name of the script added to ``package.json``."""

PLAYWRIGHT_TEST_SCRIPT: str = "playwright test"

_NPM_PLACEHOLDER_TEST: str = "no test specified"


def patch_package_json(package_json: dict[str, Any]) -> dict[str, Any]:
    """Return a copy of *package_json* with the end-to-end test script.

    * A missing ``scripts`` object is created.
    * The ``test`` script generated by ``npm init`` (which only echoes
      "no test specified") is removed.
    * ``scripts["test:e2e"]`` is set to ``playwright test``.

    Key order of the original document is preserved.
    """
    patched = dict(package_json)
    scripts = patched.get("scripts")
    if scripts is None:
        scripts = {}
    elif not isinstance(scripts, dict):
        raise PackageJsonError("'scripts' in package.json is not an object.")
    scripts = dict(scripts)

    test_script = scripts.get("test")
    if isinstance(test_script, str) and _NPM_PLACEHOLDER_TEST in test_script:
        del scripts["test"]

    scripts[PACKAGE_JSON_TEST_SCRIPT_CMD] = PLAYWRIGHT_TEST_SCRIPT
    patched["scripts"] = scripts
    return patched


def render_package_json(package_json: dict[str, Any]) -> str:
    """Serialise like npm does: two-space indent and a trailing newline."""
    return json.dumps(package_json, indent=2, ensure_ascii=False) + "\n"
