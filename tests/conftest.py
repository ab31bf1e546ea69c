"""Shared pytest fixtures and configuration for the platconst test suite.

Guidelines
----------
* Tables for named families are built from header snapshots so results
  do not depend on the machine running the tests.
* Tests that touch the host stdlib compare against :mod:`errno` /
  :mod:`socket` directly instead of hardcoding numbers.
* The process-wide resolver cache and ``PLATCONST_*`` variables are reset
  around every test.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest

from platconst.api import default_resolver
from platconst.config import EnvVar
from platconst.core.models import PlatformFamily
from platconst.core.resolver import ConstantResolver
from platconst.infra.value_sources import SnapshotSource


@pytest.fixture(autouse=True)
def _isolate_process_state(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    for var in EnvVar:
        monkeypatch.delenv(var.value, raising=False)
    default_resolver.cache_clear()
    yield
    default_resolver.cache_clear()
    # The CLI installs its own handler and stops propagation.
    package_logger = logging.getLogger("platconst")
    for handler in package_logger.handlers[:]:
        package_logger.removeHandler(handler)
    package_logger.propagate = True
    package_logger.setLevel(logging.NOTSET)


@pytest.fixture()
def linux_resolver() -> ConstantResolver:
    return ConstantResolver.for_family(
        PlatformFamily.LINUX, SnapshotSource(PlatformFamily.LINUX)
    )


@pytest.fixture()
def darwin_resolver() -> ConstantResolver:
    return ConstantResolver.for_family(
        PlatformFamily.DARWIN, SnapshotSource(PlatformFamily.DARWIN)
    )


@pytest.fixture()
def generic_resolver() -> ConstantResolver:
    # Linux values, but only the common tiers are visible.
    return ConstantResolver.for_family(
        PlatformFamily.GENERIC, SnapshotSource(PlatformFamily.LINUX)
    )
