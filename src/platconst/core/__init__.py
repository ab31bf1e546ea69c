"""Core layer: tiers, table assembly and resolution.

Rules
-----
* No ``print()`` calls.
* No imports from ``cli`` or ``infra``.
* Values only ever come from an injected ``ValueSource``.
"""

from platconst.core.audit import SourceComparison, SourceMismatch, compare_sources
from platconst.core.models import (
    ConstantCategory,
    ConstantInfo,
    ExcludedConstant,
    PlatformFamily,
    Tier,
)
from platconst.core.protocols import ValueSource
from platconst.core.resolver import ConstantResolver, to_c_int_or_sentinel
from platconst.core.table import ResolutionTable
from platconst.core.tiers import ALL_TIERS, KNOWN_GAPS, known_gap, tiers_for

__all__: list[str] = [
    "ALL_TIERS",
    "KNOWN_GAPS",
    "ConstantCategory",
    "ConstantInfo",
    "ConstantResolver",
    "ExcludedConstant",
    "PlatformFamily",
    "ResolutionTable",
    "SourceComparison",
    "SourceMismatch",
    "Tier",
    "ValueSource",
    "compare_sources",
    "known_gap",
    "tiers_for",
    "to_c_int_or_sentinel",
]
