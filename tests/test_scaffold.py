"""Smoke tests — verify package wiring.

These tests prove that:
* The CLI entry point is importable and callable.
* The exception hierarchy is correctly structured.
* Version is accessible.
* Exit codes are defined and distinct.
"""

from __future__ import annotations

import pytest

from llauncher import __version__
from llauncher.cli import exit_codes
from llauncher.cli.app import exit_code_for, main
from llauncher.exceptions import (
    ConfigError,
    ConfigFieldError,
    ConfigParseError,
    ConfigReadError,
    EnvironmentError,
    LauncherError,
    SpawnError,
    SupervisorStateError,
    append_help_suggestion,
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
            ConfigError,
            ConfigReadError,
            ConfigParseError,
            ConfigFieldError,
            SpawnError,
            SupervisorStateError,
            EnvironmentError,
        ],
    )
    def test_all_exceptions_inherit_from_base(
        self, exc_class: type[LauncherError]
    ) -> None:
        assert issubclass(exc_class, LauncherError)

    def test_read_and_parse_are_config_errors(self) -> None:
        assert issubclass(ConfigReadError, ConfigError)
        assert issubclass(ConfigParseError, ConfigError)

    def test_field_error_is_not_a_config_error(self) -> None:
        assert not issubclass(ConfigFieldError, ConfigError)

    def test_hint_is_stored(self) -> None:
        err = LauncherError("boom", hint="try this")
        assert str(err) == "boom"
        assert err.hint == "try this"

    def test_hint_defaults_to_none(self) -> None:
        assert LauncherError("boom").hint is None


class TestAppendHelpSuggestion:
    def test_appends_once(self) -> None:
        hint = append_help_suggestion("Fix it.")
        assert hint.startswith("Fix it.\n")
        assert "llauncher --help" in hint
        assert append_help_suggestion(hint) == hint


# ---------------------------------------------------------------------------
# Exit codes
# ---------------------------------------------------------------------------

class TestExitCodes:
    def test_success_is_zero(self) -> None:
        assert exit_codes.SUCCESS == 0

    def test_reserved_codes_are_distinct_and_nonzero(self) -> None:
        reserved = [
            exit_codes.GENERAL_ERROR,
            exit_codes.UNEXPECTED_ERROR,
            exit_codes.ARGUMENT_BUILD_FAILED,
            exit_codes.CONFIG_ERROR,
            exit_codes.SPAWN_FAILED,
            exit_codes.KEYBOARD_INTERRUPT,
        ]
        assert all(code != 0 for code in reserved)
        assert len(set(reserved)) == len(reserved)

    def test_keyboard_interrupt_is_130(self) -> None:
        assert exit_codes.KEYBOARD_INTERRUPT == 130

    @pytest.mark.parametrize(
        ("exc", "expected"),
        [
            (ConfigReadError("x"), exit_codes.CONFIG_ERROR),
            (ConfigParseError("x"), exit_codes.CONFIG_ERROR),
            (ConfigFieldError("x"), exit_codes.ARGUMENT_BUILD_FAILED),
            (SpawnError("x"), exit_codes.SPAWN_FAILED),
            (SupervisorStateError("x"), exit_codes.GENERAL_ERROR),
            (LauncherError("x"), exit_codes.GENERAL_ERROR),
        ],
    )
    def test_exit_code_for(self, exc: LauncherError, expected: int) -> None:
        assert exit_code_for(exc) == expected


# ---------------------------------------------------------------------------
# CLI routing
# ---------------------------------------------------------------------------

class TestCLIRouting:
    def test_version_flag(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--version"])
        assert exc_info.value.code == 0

    def test_help_flag(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--help"])
        assert exc_info.value.code == 0
        out = capsys.readouterr().out
        assert "--config" in out
        assert "LLAMA_CONFIG_PATH" in out

    def test_unknown_command_is_a_usage_error(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["serve"])
        assert exc_info.value.code == 2

    def test_no_command_routes_to_launch(
        self, monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        from llauncher.cli import app as app_module

        monkeypatch.setattr(app_module, "_handle_launch", lambda args: 0)
        assert main([]) == 0

    def test_doctor_routes_to_doctor(
        self, monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        from llauncher.cli import app as app_module

        monkeypatch.setattr(app_module, "_handle_doctor", lambda args: 5)
        assert main(["doctor"]) == 5
