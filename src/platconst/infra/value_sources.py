"""Infrastructure: concrete value sources for table construction.

* :class:`StdlibSource` reads the host interpreter's :mod:`errno` and
  :mod:`socket` modules, which CPython compiles against the host's own
  headers.
* :class:`SnapshotSource` serves a frozen header snapshot for one family.
* :class:`ChainedSource` asks several sources in order.

Rules
-----
* A source returns ``None`` for names it does not define; it never
  guesses.
* No imports from ``cli``.
"""

from __future__ import annotations

import errno
import socket
from collections.abc import Mapping
from types import ModuleType

from platconst.core.models import ConstantCategory, PlatformFamily
from platconst.core.protocols import ValueSource
from platconst.infra.header_snapshots import SNAPSHOTS
from platconst.infra.platform_detector import detect_family


class StdlibSource:
    """Values exported by the running interpreter's stdlib modules."""

    def __init__(
        self,
        modules: Mapping[ConstantCategory, ModuleType] | None = None,
    ) -> None:
        self._modules: Mapping[ConstantCategory, ModuleType] = (
            modules
            if modules is not None
            else {ConstantCategory.ERRNO: errno, ConstantCategory.SOCKET: socket}
        )

    @property
    def description(self) -> str:
        return "host stdlib"

    def lookup(self, category: ConstantCategory, name: str) -> int | None:
        module = self._modules.get(category)
        if module is None or not name:
            return None
        value = getattr(module, name, None)
        # socket exports IntEnum members; bool is an int subclass but never
        # a header constant.
        if isinstance(value, bool) or not isinstance(value, int):
            return None
        return int(value)


class SnapshotSource:
    """Values from a frozen header snapshot of one platform family."""

    def __init__(
        self,
        family: PlatformFamily,
        values: Mapping[ConstantCategory, Mapping[str, int]] | None = None,
    ) -> None:
        self._family: PlatformFamily = family
        self._values: Mapping[ConstantCategory, Mapping[str, int]] = (
            values if values is not None else SNAPSHOTS.get(family, {})
        )

    @property
    def family(self) -> PlatformFamily:
        return self._family

    @property
    def description(self) -> str:
        return f"{self._family.value} header snapshot"

    def lookup(self, category: ConstantCategory, name: str) -> int | None:
        return self._values.get(category, {}).get(name)


class ChainedSource:
    """First source that defines a name wins."""

    def __init__(self, *sources: ValueSource) -> None:
        if not sources:
            raise ValueError("ChainedSource needs at least one source")
        self._sources: tuple[ValueSource, ...] = sources

    @property
    def description(self) -> str:
        return " + ".join(source.description for source in self._sources)

    def lookup(self, category: ConstantCategory, name: str) -> int | None:
        for source in self._sources:
            value = source.lookup(category, name)
            if value is not None:
                return value
        return None


def default_source(
    family: PlatformFamily,
    *,
    host_family: PlatformFamily | None = None,
) -> ValueSource:
    """Pick the value source for a table of *family*.

    * Host family: live stdlib values, snapshot for anything the stdlib
      does not export.
    * ``GENERIC``: stdlib only (there is no generic snapshot).
    * Any other family: its snapshot only, since the host's stdlib
      describes a different platform.
    """
    host = host_family if host_family is not None else detect_family()
    if family is PlatformFamily.GENERIC:
        return StdlibSource()
    if family is host:
        return ChainedSource(StdlibSource(), SnapshotSource(family))
    return SnapshotSource(family)
