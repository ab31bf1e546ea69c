"""Domain models for platconst.

Enumerations describe *where* a constant lives (platform family and
header category); the dataclasses are **frozen** value objects with no
behaviour beyond data access and carry zero I/O.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from platconst.exceptions import UnknownPlatformFamilyError


# ---------------------------------------------------------------------------
# Platform family
# ---------------------------------------------------------------------------

class PlatformFamily(Enum):
    """Group of operating systems sharing one set of header constants."""

    LINUX = "linux"
    DARWIN = "darwin"
    GENERIC = "generic"

    @property
    def label(self) -> str:
        """Human-readable name used in diagnostics."""
        return _FAMILY_LABELS[self]

    @classmethod
    def parse(cls, text: str) -> PlatformFamily:
        """Parse a family name as typed by a user or set in the environment.

        Matching is case-insensitive and accepts a few common aliases
        (``macos``, ``posix``).  The other BSDs have no alias of their own:
        their numbering matches neither snapshot, so they are ``generic``.

        Raises
        ------
        UnknownPlatformFamilyError
            If *text* does not name a known family.
        """
        key = text.strip().lower()
        family = _FAMILY_ALIASES.get(key)
        if family is None:
            choices = ", ".join(sorted(_FAMILY_ALIASES))
            raise UnknownPlatformFamilyError(
                f"Unknown platform family: {text!r}",
                hint=f"Choose one of: {choices}",
            )
        return family


_FAMILY_LABELS: dict[PlatformFamily, str] = {
    PlatformFamily.LINUX: "Linux",
    PlatformFamily.DARWIN: "Darwin/BSD",
    PlatformFamily.GENERIC: "Generic POSIX",
}

_FAMILY_ALIASES: dict[str, PlatformFamily] = {
    "linux": PlatformFamily.LINUX,
    "darwin": PlatformFamily.DARWIN,
    "macos": PlatformFamily.DARWIN,
    "generic": PlatformFamily.GENERIC,
    "posix": PlatformFamily.GENERIC,
}


class ConstantCategory(Enum):
    """Header category a constant belongs to."""

    ERRNO = "errno"
    SOCKET = "socket"


# ---------------------------------------------------------------------------
# Tier descriptors
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Tier:
    """A named subset of constant names scoped to one family or to all."""

    name: str
    """Stable identifier, e.g. ``"linux-errno"``."""

    family: PlatformFamily | None
    """Family the tier applies to, or ``None`` for the common tier."""

    category: ConstantCategory
    """Header category of every name in the tier."""

    names: tuple[str, ...]
    """Constant names in header spelling."""

    @property
    def is_common(self) -> bool:
        return self.family is None

    def applies_to(self, family: PlatformFamily) -> bool:
        """Whether the tier is visible when *family* is active."""
        return self.is_common or self.family is family

    def __len__(self) -> int:
        return len(self.names)


@dataclass(frozen=True, slots=True)
class ExcludedConstant:
    """A header name deliberately left out of every table."""

    name: str
    families: tuple[PlatformFamily, ...]
    """Families on which the header defines the name but we do not."""

    reason: str


# ---------------------------------------------------------------------------
# Resolved entry
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ConstantInfo:
    """A single resolved constant and where it came from."""

    name: str
    value: int
    tier: str
    """Name of the :class:`Tier` that contributed the entry."""

    category: ConstantCategory
