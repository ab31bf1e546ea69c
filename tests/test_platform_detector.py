"""Tests for platform family detection (infra/platform_detector.py).

All tests mock :func:`platform.system` or pass the system name
explicitly — no dependency on the OS running the suite.
"""

from __future__ import annotations

from unittest.mock import patch

import pytest

from platconst.core.models import PlatformFamily
from platconst.infra.platform_detector import detect_family, system_display_name


class TestDetectFamily:
    @pytest.mark.parametrize(
        ("system", "family"),
        [
            ("Linux", PlatformFamily.LINUX),
            ("linux", PlatformFamily.LINUX),
            ("Darwin", PlatformFamily.DARWIN),
            ("FreeBSD", PlatformFamily.GENERIC),
            ("OpenBSD", PlatformFamily.GENERIC),
            ("SunOS", PlatformFamily.GENERIC),
            ("Windows", PlatformFamily.GENERIC),
            ("", PlatformFamily.GENERIC),
        ],
    )
    def test_mapping(self, system: str, family: PlatformFamily) -> None:
        assert detect_family(system) is family

    @patch("platconst.infra.platform_detector.platform.system", return_value="Darwin")
    def test_uses_platform_system_by_default(self, _mock_system: object) -> None:
        assert detect_family() is PlatformFamily.DARWIN

    @patch("platconst.infra.platform_detector.platform.system", return_value="Linux")
    def test_linux_by_default(self, _mock_system: object) -> None:
        assert detect_family() is PlatformFamily.LINUX


class TestSystemDisplayName:
    def test_darwin_shown_as_macos(self) -> None:
        assert system_display_name("Darwin") == "macOS"

    def test_passthrough(self) -> None:
        assert system_display_name("FreeBSD") == "FreeBSD"

    def test_empty(self) -> None:
        assert system_display_name("") == "unknown"
