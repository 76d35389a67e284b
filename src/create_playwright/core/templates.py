"""Minimal ``{{placeholder}}`` substitution for the bundled templates."""

from __future__ import annotations

from collections.abc import Mapping


def execute_template(template: str, values: Mapping[str, str]) -> str:
    """Replace every ``{{key}}`` in *template* with ``values[key]``.

    Placeholders without a matching key are left untouched.
    """
    result = template
    for key, value in values.items():
        result = result.replace("{{" + key + "}}", value)
    return result
