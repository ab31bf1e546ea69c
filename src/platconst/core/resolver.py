"""Core constant resolver.

:class:`ConstantResolver` answers ``name -> value`` questions against one
immutable :class:`~platconst.core.table.ResolutionTable`.  It holds no
mutable state, so a single instance can be shared by any number of
threads.

Not-found policy
----------------
:meth:`ConstantResolver.resolve` returns ``None`` for a name that is not
defined on the active family.  ``None`` can never be mistaken for a real
value, unlike the ``-1`` sentinel that :func:`to_c_int_or_sentinel` keeps
for callers ported from C.
"""

from __future__ import annotations

import ctypes
from collections.abc import Iterator

from platconst.core.models import ConstantInfo, PlatformFamily
from platconst.core.protocols import ValueSource
from platconst.core.table import ResolutionTable
from platconst.core.tiers import known_gap
from platconst.exceptions import UnresolvedConstantError

NOT_FOUND_SENTINEL: int = -1
"""Value :func:`to_c_int_or_sentinel` returns for unknown names."""


class ConstantResolver:
    """Stateless resolver over a prebuilt table.

    Parameters
    ----------
    table:
        The resolution table for the active platform family.
    """

    def __init__(self, table: ResolutionTable) -> None:
        self._table: ResolutionTable = table

    @classmethod
    def for_family(
        cls,
        family: PlatformFamily,
        source: ValueSource,
    ) -> ConstantResolver:
        """Build the table for *family* from *source* and wrap it."""
        return cls(ResolutionTable.build(family, source))

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    @property
    def family(self) -> PlatformFamily:
        return self._table.family

    @property
    def table(self) -> ResolutionTable:
        return self._table

    def resolve(self, name: str) -> int | None:
        """Return the value of *name* on the active family, or ``None``.

        Matching is exact and case-sensitive; ``"enoent"`` and ``""`` are
        simply not found.
        """
        return self._table.value_of(name)

    def require(self, name: str) -> int:
        """Return the value of *name* or raise.

        Raises
        ------
        UnresolvedConstantError
            If *name* is not defined on the active family.  The hint says
            why when the name is a known gap.
        """
        info = self._table.get(name)
        if info is not None:
            return info.value
        raise UnresolvedConstantError(
            name,
            self.family.value,
            hint=self._unresolved_hint(name),
        )

    def describe(self, name: str) -> ConstantInfo | None:
        """Return the full table entry for *name*, or ``None``."""
        return self._table.get(name)

    def names(self) -> list[str]:
        """All resolvable names, in tier order."""
        return list(self._table)

    def __contains__(self, name: object) -> bool:
        return name in self._table

    def __iter__(self) -> Iterator[ConstantInfo]:
        return iter(self._table.values())

    def __len__(self) -> int:
        return len(self._table)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._table!r})"

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _unresolved_hint(self, name: str) -> str | None:
        gap = known_gap(name)
        if gap is not None:
            return f"{name} is intentionally excluded: {gap.reason}."
        if name != name.upper() and name.upper() in self._table:
            return f"Names are case-sensitive; did you mean {name.upper()}?"
        if name in self._table.missing:
            return (
                f"{name} is listed for {self.family.label} but "
                f"{self._table.source_description} does not define it."
            )
        return None


def to_c_int_or_sentinel(resolver: ConstantResolver, name: str) -> int:
    """Resolve *name* the way the C ``get_int_const`` did.

    The value is truncated to a 32-bit C ``int`` and ``-1`` means "not
    found".  That sentinel is ambiguous: ``INADDR_NONE`` and
    ``INADDR_BROADCAST`` are ``0xFFFFFFFF``, which is also ``-1`` as a C
    ``int``.  Prefer :meth:`ConstantResolver.resolve`.
    """
    value = resolver.resolve(name)
    if value is None:
        return NOT_FOUND_SENTINEL
    return ctypes.c_int(value).value
