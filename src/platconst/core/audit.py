"""Cross-checks between two value sources.

Used by ``platconst doctor`` to confirm that the header snapshot for the
host family agrees with what the host interpreter was compiled against.
Architectures such as MIPS, SPARC or Alpha Linux legitimately disagree
with the generic snapshot; the live value always wins.
"""

from __future__ import annotations

from dataclasses import dataclass

from platconst.core.models import PlatformFamily
from platconst.core.protocols import ValueSource
from platconst.core.tiers import tiers_for


@dataclass(frozen=True, slots=True)
class SourceMismatch:
    """A name both sources define, with different values."""

    name: str
    tier: str
    value: int
    reference_value: int


@dataclass(frozen=True, slots=True)
class SourceComparison:
    """Outcome of :func:`compare_sources`."""

    compared: int
    """Names defined by both sources."""

    mismatches: tuple[SourceMismatch, ...]

    only_in_reference: tuple[str, ...]
    """Names only the reference defines (filled in from it at build time)."""

    @property
    def agrees(self) -> bool:
        return not self.mismatches


def compare_sources(
    family: PlatformFamily,
    source: ValueSource,
    reference: ValueSource,
) -> SourceComparison:
    """Compare *source* against *reference* over the tiers of *family*."""
    compared = 0
    mismatches: list[SourceMismatch] = []
    only_in_reference: list[str] = []
    for tier in tiers_for(family):
        for name in tier.names:
            value = source.lookup(tier.category, name)
            reference_value = reference.lookup(tier.category, name)
            if reference_value is None:
                continue
            if value is None:
                only_in_reference.append(name)
                continue
            compared += 1
            if value != reference_value:
                mismatches.append(
                    SourceMismatch(
                        name=name,
                        tier=tier.name,
                        value=value,
                        reference_value=reference_value,
                    )
                )
    return SourceComparison(
        compared=compared,
        mismatches=tuple(mismatches),
        only_in_reference=tuple(only_in_reference),
    )
