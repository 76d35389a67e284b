"""Smoke tests — verify package wiring.

These tests prove that:
* The CLI entry point is importable and callable.
* The exception hierarchy is correctly structured.
* Version is accessible.
* Exit codes are defined.
"""

from __future__ import annotations

from unittest.mock import MagicMock, patch

import pytest

from create_playwright import __version__
from create_playwright.cli import exit_codes
from create_playwright.cli.app import cli, main
from create_playwright.exceptions import (
    AssetNotFoundError,
    CommandFailedError,
    CreatePlaywrightError,
    EnvironmentError,
    FileWriteError,
    InvalidOptionsError,
    PackageJsonError,
    PromptCancelledError,
    ToolNotFoundError,
)


# ---------------------------------------------------------------------------
# Version
# ---------------------------------------------------------------------------

class TestVersion:
    def test_version_is_string(self) -> None:
        assert isinstance(__version__, str)

    def test_version_is_semver_like(self) -> None:
        parts = __version__.split(".")
        assert len(parts) == 3
        assert all(part.isdigit() for part in parts)


# ---------------------------------------------------------------------------
# Exception hierarchy
# ---------------------------------------------------------------------------

class TestExceptions:
    @pytest.mark.parametrize(
        "exc_class",
        [
            InvalidOptionsError,
            PromptCancelledError,
            AssetNotFoundError,
            FileWriteError,
            PackageJsonError,
            CommandFailedError,
            ToolNotFoundError,
            EnvironmentError,
        ],
    )
    def test_all_exceptions_inherit_from_base(
        self, exc_class: type[CreatePlaywrightError]
    ) -> None:
        assert issubclass(exc_class, CreatePlaywrightError)

    def test_hint_is_stored(self) -> None:
        err = CreatePlaywrightError("boom", hint="try this")
        assert str(err) == "boom"
        assert err.hint == "try this"

    def test_hint_defaults_to_none(self) -> None:
        assert CreatePlaywrightError("boom").hint is None

    def test_command_failed_keeps_returncode(self) -> None:
        err = CommandFailedError("npm failed", returncode=3)
        assert err.returncode == 3
        assert err.hint is None


# ---------------------------------------------------------------------------
# Exit codes
# ---------------------------------------------------------------------------

class TestExitCodes:
    def test_success_is_zero(self) -> None:
        assert exit_codes.SUCCESS == 0

    def test_general_error_is_one(self) -> None:
        assert exit_codes.GENERAL_ERROR == 1

    def test_keyboard_interrupt_is_130(self) -> None:
        assert exit_codes.KEYBOARD_INTERRUPT == 130


# ---------------------------------------------------------------------------
# CLI routing
# ---------------------------------------------------------------------------

class TestCLIRouting:
    def test_version_flag(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--version"])
        assert exc_info.value.code == 0

    @patch("create_playwright.cli.doctor.run_doctor", return_value=exit_codes.SUCCESS)
    def test_doctor_flag_dispatches(self, mock_doctor: MagicMock) -> None:
        assert main(["--doctor"]) == exit_codes.SUCCESS
        mock_doctor.assert_called_once()

    def test_directory_routes_to_init(self, monkeypatch: pytest.MonkeyPatch) -> None:
        from create_playwright.cli import app as app_module

        seen: list[str | None] = []

        def fake_init(root_arg: str | None) -> int:
            seen.append(root_arg)
            return exit_codes.SUCCESS

        monkeypatch.setattr(app_module, "_handle_init", fake_init)
        assert main(["my-app"]) == exit_codes.SUCCESS
        assert main([]) == exit_codes.SUCCESS
        assert seen == ["my-app", None]


# ---------------------------------------------------------------------------
# Error boundary
# ---------------------------------------------------------------------------

class TestErrorBoundary:
    def _run_cli(self, monkeypatch: pytest.MonkeyPatch, side_effect: BaseException) -> int:
        from create_playwright.cli import app as app_module

        def boom(argv: list[str] | None = None) -> int:
            raise side_effect

        monkeypatch.setattr(app_module, "main", boom)
        with pytest.raises(SystemExit) as exc_info:
            cli()
        code = exc_info.value.code
        assert isinstance(code, int)
        return code

    def test_known_error_exits_one_with_hint(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str],
    ) -> None:
        code = self._run_cli(monkeypatch, InvalidOptionsError("bad options", hint="fix them"))
        assert code == exit_codes.GENERAL_ERROR
        err = capsys.readouterr().err
        assert "bad options" in err
        assert "fix them" in err

    def test_error_message_with_brackets_is_printed_verbatim(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str],
    ) -> None:
        error = PackageJsonError("/tmp/[/x]/package.json is not valid JSON.", hint="see [docs]")
        code = self._run_cli(monkeypatch, error)
        assert code == exit_codes.GENERAL_ERROR
        err = capsys.readouterr().err
        assert "/tmp/[/x]/package.json" in err
        assert "see [docs]" in err

    def test_unexpected_error_exits_one(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str],
    ) -> None:
        code = self._run_cli(monkeypatch, RuntimeError("kaboom"))
        assert code == exit_codes.GENERAL_ERROR
        assert "RuntimeError: kaboom" in capsys.readouterr().err

    def test_keyboard_interrupt_exits_130(self, monkeypatch: pytest.MonkeyPatch) -> None:
        code = self._run_cli(monkeypatch, KeyboardInterrupt())
        assert code == exit_codes.KEYBOARD_INTERRUPT

    def test_success_exits_zero(self, monkeypatch: pytest.MonkeyPatch) -> None:
        from create_playwright.cli import app as app_module

        monkeypatch.setattr(app_module, "main", lambda argv=None: exit_codes.SUCCESS)
        with pytest.raises(SystemExit) as exc_info:
            cli()
        assert exc_info.value.code == exit_codes.SUCCESS
