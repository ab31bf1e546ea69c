"""Tests for the core resolver (core/resolver.py).

Coverage:
* Concrete per-family scenarios (EADDRINUSE, ECHRNG, AF_INET, SO_REUSEPORT).
* Family visibility of common, Linux-only and Darwin-only names.
* Not-found inputs: empty, unknown, lowercase.
* ``require`` error and hints.
* ``describe`` / container protocol.
* C-compatible sentinel conversion.
"""

from __future__ import annotations

import pytest

from platconst.core.models import ConstantCategory, ExcludedConstant, PlatformFamily
from platconst.core.resolver import (
    NOT_FOUND_SENTINEL,
    ConstantResolver,
    to_c_int_or_sentinel,
)
from platconst.core.tiers import (
    COMMON_ERRNO,
    COMMON_SOCKET,
    DARWIN_ERRNO,
    KNOWN_GAPS,
    LINUX_ERRNO,
    LINUX_SOCKET,
)
from platconst.exceptions import UnresolvedConstantError
from platconst.infra.value_sources import SnapshotSource


# ---------------------------------------------------------------------------
# Concrete scenarios
# ---------------------------------------------------------------------------

class TestScenarios:
    def test_eaddrinuse_on_linux(self, linux_resolver: ConstantResolver) -> None:
        assert linux_resolver.resolve("EADDRINUSE") == 98

    def test_eaddrinuse_on_darwin(self, darwin_resolver: ConstantResolver) -> None:
        assert darwin_resolver.resolve("EADDRINUSE") == 48

    def test_echrng_is_linux_only(
        self,
        linux_resolver: ConstantResolver,
        darwin_resolver: ConstantResolver,
    ) -> None:
        assert linux_resolver.resolve("ECHRNG") == 44
        assert darwin_resolver.resolve("ECHRNG") is None

    def test_af_inet_comes_from_source(
        self,
        linux_resolver: ConstantResolver,
        darwin_resolver: ConstantResolver,
    ) -> None:
        assert linux_resolver.resolve("AF_INET") == 2
        assert darwin_resolver.resolve("AF_INET") == 2

    def test_af_inet6_differs_between_families(
        self,
        linux_resolver: ConstantResolver,
        darwin_resolver: ConstantResolver,
    ) -> None:
        assert linux_resolver.resolve("AF_INET6") == 10
        assert darwin_resolver.resolve("AF_INET6") == 30

    @pytest.mark.parametrize("family", list(PlatformFamily))
    def test_so_reuseport_never_resolves(self, family: PlatformFamily) -> None:
        source = SnapshotSource(
            family if family is not PlatformFamily.GENERIC else PlatformFamily.LINUX
        )
        resolver = ConstantResolver.for_family(family, source)
        assert resolver.resolve("SO_REUSEPORT") is None

    def test_sol_socket_differs_between_families(
        self,
        linux_resolver: ConstantResolver,
        darwin_resolver: ConstantResolver,
    ) -> None:
        assert linux_resolver.resolve("SOL_SOCKET") == 1
        assert darwin_resolver.resolve("SOL_SOCKET") == 0xFFFF


# ---------------------------------------------------------------------------
# Family visibility
# ---------------------------------------------------------------------------

class TestFamilyVisibility:
    def test_common_names_agree_across_families_for_one_source(self) -> None:
        source = SnapshotSource(PlatformFamily.LINUX)
        resolvers = [
            ConstantResolver.for_family(family, source) for family in PlatformFamily
        ]
        for name in COMMON_ERRNO.names + COMMON_SOCKET.names:
            values = {resolver.resolve(name) for resolver in resolvers}
            assert len(values) == 1, name
            assert None not in values, name

    def test_linux_only_names(
        self,
        linux_resolver: ConstantResolver,
        darwin_resolver: ConstantResolver,
        generic_resolver: ConstantResolver,
    ) -> None:
        darwin_names = set(DARWIN_ERRNO.names)
        for name in LINUX_ERRNO.names + LINUX_SOCKET.names:
            assert linux_resolver.resolve(name) is not None, name
            assert generic_resolver.resolve(name) is None, name
            if name not in darwin_names:
                assert darwin_resolver.resolve(name) is None, name

    def test_darwin_only_names(
        self,
        linux_resolver: ConstantResolver,
        darwin_resolver: ConstantResolver,
        generic_resolver: ConstantResolver,
    ) -> None:
        linux_names = set(LINUX_ERRNO.names)
        for name in DARWIN_ERRNO.names:
            assert darwin_resolver.resolve(name) is not None, name
            assert generic_resolver.resolve(name) is None, name
            if name not in linux_names:
                assert linux_resolver.resolve(name) is None, name

    def test_shared_family_name_uses_family_value(
        self,
        linux_resolver: ConstantResolver,
        darwin_resolver: ConstantResolver,
    ) -> None:
        # EOPNOTSUPP is listed by both family tiers with different values.
        assert linux_resolver.resolve("EOPNOTSUPP") == 95
        assert darwin_resolver.resolve("EOPNOTSUPP") == 102

    def test_generic_only_sees_common_tiers(
        self,
        generic_resolver: ConstantResolver,
    ) -> None:
        assert len(generic_resolver) == len(COMMON_ERRNO) + len(COMMON_SOCKET)


# ---------------------------------------------------------------------------
# Not-found inputs
# ---------------------------------------------------------------------------

class TestNotFound:
    @pytest.mark.parametrize("name", ["", "NOT_A_REAL_CONSTANT", "enoent", " ENOENT"])
    @pytest.mark.parametrize("family", list(PlatformFamily))
    def test_unknown_inputs(self, family: PlatformFamily, name: str) -> None:
        resolver = ConstantResolver.for_family(
            family, SnapshotSource(PlatformFamily.LINUX)
        )
        assert resolver.resolve(name) is None

    def test_case_sensitive(self, linux_resolver: ConstantResolver) -> None:
        assert linux_resolver.resolve("ENOENT") == 2
        assert linux_resolver.resolve("enoent") is None

    @pytest.mark.parametrize("gap", KNOWN_GAPS, ids=lambda gap: gap.name)
    def test_known_gaps_never_resolve(
        self,
        linux_resolver: ConstantResolver,
        darwin_resolver: ConstantResolver,
        gap: ExcludedConstant,
    ) -> None:
        name = gap.name
        assert linux_resolver.resolve(name) is None
        assert darwin_resolver.resolve(name) is None

    def test_zero_value_is_found(self, linux_resolver: ConstantResolver) -> None:
        assert linux_resolver.resolve("INADDR_ANY") == 0
        assert "INADDR_ANY" in linux_resolver


# ---------------------------------------------------------------------------
# require / describe
# ---------------------------------------------------------------------------

class TestRequire:
    def test_returns_value(self, linux_resolver: ConstantResolver) -> None:
        assert linux_resolver.require("EPERM") == 1

    def test_raises_for_other_family(self, darwin_resolver: ConstantResolver) -> None:
        with pytest.raises(UnresolvedConstantError) as exc_info:
            darwin_resolver.require("ECHRNG")
        assert exc_info.value.name == "ECHRNG"
        assert exc_info.value.family == "darwin"

    def test_known_gap_hint(self, linux_resolver: ConstantResolver) -> None:
        with pytest.raises(UnresolvedConstantError) as exc_info:
            linux_resolver.require("SO_REUSEPORT")
        assert exc_info.value.hint is not None
        assert "intentionally excluded" in exc_info.value.hint

    def test_case_hint(self, linux_resolver: ConstantResolver) -> None:
        with pytest.raises(UnresolvedConstantError) as exc_info:
            linux_resolver.require("enoent")
        assert exc_info.value.hint is not None
        assert "ENOENT" in exc_info.value.hint

    def test_unknown_name_has_no_hint(self, linux_resolver: ConstantResolver) -> None:
        with pytest.raises(UnresolvedConstantError) as exc_info:
            linux_resolver.require("NOT_A_REAL_CONSTANT")
        assert exc_info.value.hint is None


class TestDescribe:
    def test_entry_fields(self, linux_resolver: ConstantResolver) -> None:
        info = linux_resolver.describe("TCP_CORK")
        assert info is not None
        assert info.value == 3
        assert info.tier == "linux-socket"
        assert info.category is ConstantCategory.SOCKET

    def test_missing_is_none(self, darwin_resolver: ConstantResolver) -> None:
        assert darwin_resolver.describe("TCP_CORK") is None

    def test_names_in_tier_order(self, linux_resolver: ConstantResolver) -> None:
        names = linux_resolver.names()
        assert names[0] == "EPERM"
        assert names.index("EHOSTUNREACH") < names.index("ECHRNG")
        assert names.index("SHUT_RDWR") < names.index("SOL_IP")

    def test_iteration_yields_entries(self, linux_resolver: ConstantResolver) -> None:
        assert sum(1 for _ in linux_resolver) == len(linux_resolver)

    def test_family_property(self, darwin_resolver: ConstantResolver) -> None:
        assert darwin_resolver.family is PlatformFamily.DARWIN


# ---------------------------------------------------------------------------
# C-compatible sentinel
# ---------------------------------------------------------------------------

class TestSentinel:
    def test_found_value(self, linux_resolver: ConstantResolver) -> None:
        assert to_c_int_or_sentinel(linux_resolver, "EADDRINUSE") == 98

    def test_not_found(self, linux_resolver: ConstantResolver) -> None:
        assert to_c_int_or_sentinel(linux_resolver, "NOPE") == NOT_FOUND_SENTINEL

    def test_inaddr_none_collides_with_sentinel(
        self,
        linux_resolver: ConstantResolver,
    ) -> None:
        assert linux_resolver.resolve("INADDR_NONE") == 0xFFFFFFFF
        assert to_c_int_or_sentinel(linux_resolver, "INADDR_NONE") == NOT_FOUND_SENTINEL
