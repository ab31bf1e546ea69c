"""Smoke tests for package wiring.

These tests prove that:
* The CLI entry point is importable and callable.
* The exception hierarchy is correctly structured.
* Version is accessible.
* Exit codes are defined.
"""

from __future__ import annotations

from unittest.mock import patch

import pytest

from platconst import __version__
from platconst.cli import exit_codes
from platconst.cli.app import main
from platconst.exceptions import (
    ConfigurationError,
    DuplicateConstantError,
    EnvironmentError,
    PlatconstError,
    UnknownPlatformFamilyError,
    UnresolvedConstantError,
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
            UnresolvedConstantError,
            DuplicateConstantError,
            UnknownPlatformFamilyError,
            ConfigurationError,
            EnvironmentError,
        ],
    )
    def test_all_exceptions_inherit_from_base(
        self, exc_class: type[PlatconstError]
    ) -> None:
        assert issubclass(exc_class, PlatconstError)

    def test_base_inherits_from_exception(self) -> None:
        assert issubclass(PlatconstError, Exception)

    def test_hint_is_stored(self) -> None:
        err = PlatconstError("boom", hint="try this")
        assert str(err) == "boom"
        assert err.hint == "try this"

    def test_hint_defaults_to_none(self) -> None:
        err = PlatconstError("boom")
        assert err.hint is None

    def test_unresolved_carries_name_and_family(self) -> None:
        err = UnresolvedConstantError("EFOO", "linux")
        assert err.name == "EFOO"
        assert err.family == "linux"
        assert "EFOO" in str(err)

    def test_duplicate_carries_both_tiers(self) -> None:
        err = DuplicateConstantError("EPERM", "common-errno", "linux-errno")
        assert err.tiers == ("common-errno", "linux-errno")
        assert err.hint is not None


# ---------------------------------------------------------------------------
# Exit codes
# ---------------------------------------------------------------------------

class TestExitCodes:
    def test_success_is_zero(self) -> None:
        assert exit_codes.SUCCESS == 0

    def test_general_error_is_one(self) -> None:
        assert exit_codes.GENERAL_ERROR == 1

    def test_unexpected_error_is_two(self) -> None:
        assert exit_codes.UNEXPECTED_ERROR == 2

    def test_unresolved_is_three(self) -> None:
        assert exit_codes.UNRESOLVED == 3

    def test_keyboard_interrupt_is_130(self) -> None:
        assert exit_codes.KEYBOARD_INTERRUPT == 130


# ---------------------------------------------------------------------------
# CLI routing
# ---------------------------------------------------------------------------

class TestCLIRouting:
    def test_no_args_returns_success(self, capsys: pytest.CaptureFixture[str]) -> None:
        """No arguments should print help and exit 0."""
        code = main([])
        assert code == exit_codes.SUCCESS
        assert "platconst" in capsys.readouterr().out

    def test_version_flag(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--version"])
        assert exc_info.value.code == 0

    @patch("platconst.cli.doctor.run_doctor", return_value=exit_codes.SUCCESS)
    def test_doctor_returns_success(self, _mock_doc: object) -> None:
        code = main(["doctor"])
        assert code == exit_codes.SUCCESS

    def test_resolve_requires_a_name(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["resolve"])
        assert exc_info.value.code == 2
