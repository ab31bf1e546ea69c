"""Resolution table assembly.

A :class:`ResolutionTable` is the union of the common tiers and the
tiers of exactly one :class:`~platconst.core.models.PlatformFamily`,
with every value taken from a single
:class:`~platconst.core.protocols.ValueSource`.

Guarantees
----------
* Built once, immutable afterwards (read through a ``MappingProxyType``).
* Each name maps to exactly one entry; a collision between two active
  tiers raises :class:`~platconst.exceptions.DuplicateConstantError`
  at construction time.
* Names the source does not define are omitted, never guessed.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping, Sequence
from types import MappingProxyType

from platconst.core.models import ConstantInfo, PlatformFamily, Tier
from platconst.core.protocols import ValueSource
from platconst.core.tiers import tiers_for
from platconst.exceptions import DuplicateConstantError

logger = logging.getLogger(__name__)


class ResolutionTable(Mapping[str, ConstantInfo]):
    """Immutable ``name -> ConstantInfo`` mapping for one platform family."""

    __slots__ = ("_entries", "_family", "_source_description", "_missing")

    def __init__(
        self,
        family: PlatformFamily,
        entries: Mapping[str, ConstantInfo],
        *,
        source_description: str = "",
        missing: Sequence[str] = (),
    ) -> None:
        self._family: PlatformFamily = family
        self._entries: Mapping[str, ConstantInfo] = MappingProxyType(dict(entries))
        self._source_description: str = source_description
        self._missing: tuple[str, ...] = tuple(missing)

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def build(
        cls,
        family: PlatformFamily,
        source: ValueSource,
        *,
        tiers: Sequence[Tier] | None = None,
    ) -> ResolutionTable:
        """Assemble the table for *family* from *source*.

        Parameters
        ----------
        family:
            The active platform family.  Only tiers that apply to it are
            consulted.
        source:
            Where the numeric values come from.
        tiers:
            Override the tier set (mainly for tests).  Tiers that do not
            apply to *family* are skipped.

        Raises
        ------
        DuplicateConstantError
            If two active tiers define the same name.
        """
        active = tiers_for(family) if tiers is None else tuple(
            tier for tier in tiers if tier.applies_to(family)
        )

        entries: dict[str, ConstantInfo] = {}
        missing: list[str] = []
        for tier in active:
            seen_in_tier: set[str] = set()
            for name in tier.names:
                if name in seen_in_tier:
                    raise DuplicateConstantError(name, tier.name, tier.name)
                seen_in_tier.add(name)

                existing = entries.get(name)
                if existing is not None:
                    raise DuplicateConstantError(name, existing.tier, tier.name)

                value = source.lookup(tier.category, name)
                if value is None:
                    missing.append(name)
                    continue
                entries[name] = ConstantInfo(
                    name=name,
                    value=value,
                    tier=tier.name,
                    category=tier.category,
                )
            logger.debug(
                "tier %s contributed %d of %d names",
                tier.name,
                sum(1 for info in entries.values() if info.tier == tier.name),
                len(tier),
            )

        if missing:
            logger.debug(
                "%s does not define %d name(s) for %s: %s",
                source.description,
                len(missing),
                family.value,
                ", ".join(missing),
            )
        logger.debug(
            "built %s table with %d entries from %s",
            family.value,
            len(entries),
            source.description,
        )
        return cls(
            family,
            entries,
            source_description=source.description,
            missing=missing,
        )

    # ------------------------------------------------------------------
    # Mapping protocol
    # ------------------------------------------------------------------

    def __getitem__(self, name: str) -> ConstantInfo:
        return self._entries[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(family={self._family.value!r}, "
            f"entries={len(self._entries)})"
        )

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def family(self) -> PlatformFamily:
        return self._family

    @property
    def source_description(self) -> str:
        return self._source_description

    @property
    def missing(self) -> tuple[str, ...]:
        """Tier names the value source did not define."""
        return self._missing

    def value_of(self, name: str) -> int | None:
        """Return the value for *name*, or ``None`` if absent."""
        info = self._entries.get(name)
        return info.value if info is not None else None

    def by_tier(self, tier_name: str) -> list[ConstantInfo]:
        """Entries contributed by *tier_name*, in tier order."""
        return [info for info in self._entries.values() if info.tier == tier_name]
