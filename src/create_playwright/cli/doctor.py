"""``create-playwright --doctor`` — environment diagnostics command.

Reports whether the Node.js toolchain the scaffolder shells out to is
available, next to the Python and OS details useful in bug reports.
Renders a Rich table, or a plain-text table when Rich is missing.
"""

from __future__ import annotations

import platform
import sys

from create_playwright.cli import exit_codes
from create_playwright.cli.console import console, escape
from create_playwright.infra.tool_detector import ToolStatus, detect_tool
from create_playwright.version import __version__

REQUIRED_TOOLS: tuple[str, ...] = ("node", "npm", "npx")
OPTIONAL_TOOLS: tuple[str, ...] = ("yarn",)

_OK = "[green]OK[/green]"


# ---------------------------------------------------------------------------
# Diagnostic collectors
# ---------------------------------------------------------------------------

def _python_version_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the Python version row."""
    version = platform.python_version()
    ok = sys.version_info[:2] >= (3, 10)
    status = _OK if ok else "[red]FAIL (>=3.10 required)[/red]"
    return "Python", version, status


def _tool_check(status_obj: ToolStatus, *, required: bool) -> tuple[str, str, str]:
    """Return (label, value, status) for one PATH probe."""
    if status_obj.found:
        path_str = str(status_obj.path) if status_obj.path else "found"
        return status_obj.name, path_str, _OK
    if required:
        return status_obj.name, "not found", "[red]FAIL[/red]"
    return status_obj.name, "not found", "[yellow]WARN[/yellow]"


def _os_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the OS row."""
    system_raw = platform.system()
    system_display = {
        "Windows": "Windows",
        "Linux": "Linux",
        "Darwin": "macOS",
    }.get(system_raw, system_raw)
    value = f"{system_display} {platform.release()} ({platform.machine()})"
    return "OS", value, _OK


def _version_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the create-playwright version row."""
    return "create-playwright", __version__, _OK


def _status_plain(status: str) -> str:
    """Convert rich-markup status to plain text."""
    for word in ("FAIL", "WARN", "OK"):
        if word in status:
            return word
    return status


def _print_plain_doctor_table(checks: list[tuple[str, str, str]]) -> None:
    """Render doctor output without Rich."""
    print("\ncreate-playwright doctor", file=sys.stderr)
    print("=" * 64, file=sys.stderr)
    print(f"{'Component':<18} {'Value':<36} {'Status':<8}", file=sys.stderr)
    print("-" * 64, file=sys.stderr)
    for label, value, status in checks:
        print(f"{label:<18} {value:<36} {_status_plain(status):<8}", file=sys.stderr)
    print(file=sys.stderr)


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------

def run_doctor() -> int:
    """Execute all diagnostic checks and render a summary table.

    Returns
    -------
    int
        :data:`exit_codes.SUCCESS` when node, npm and npx are present,
        :data:`exit_codes.GENERAL_ERROR` otherwise.
    """
    tool_statuses = [
        (detect_tool(name), name in REQUIRED_TOOLS)
        for name in REQUIRED_TOOLS + OPTIONAL_TOOLS
    ]
    checks = [
        _version_check(),
        _python_version_check(),
        *(_tool_check(status, required=required) for status, required in tool_statuses),
        _os_check(),
    ]
    has_failure = any("FAIL" in status for _, _, status in checks)

    try:
        from rich.table import Table
    except ModuleNotFoundError:
        _print_plain_doctor_table(checks)
    else:
        table = Table(
            title="create-playwright doctor",
            show_header=True,
            header_style="bold cyan",
            border_style="dim",
        )
        table.add_column("Component", style="bold", min_width=18)
        table.add_column("Value", min_width=20)
        table.add_column("Status", justify="center", min_width=8)
        for label, value, status in checks:
            table.add_row(label, escape(value), status)

        console.print()
        console.print(table)
        console.print()

    # Install guidance for every missing tool; npm and npx share node's.
    shown: set[tuple[str, ...]] = set()
    for status_obj, _required in tool_statuses:
        if status_obj.found or not status_obj.install_commands:
            continue
        if status_obj.install_commands in shown:
            continue
        shown.add(status_obj.install_commands)
        console.print(f"[yellow]{escape(status_obj.name)} is not installed.[/yellow]")
        console.print("Install using one of the following commands:\n")
        for cmd in status_obj.install_commands:
            console.print(f"  [bold]{escape(cmd)}[/bold]")
        console.print()

    if has_failure:
        console.print("[bold red]Some checks failed.[/bold red]")
        return exit_codes.GENERAL_ERROR

    console.print("[bold green]All checks passed.[/bold green]")
    return exit_codes.SUCCESS
