"""Custom exception hierarchy for platconst.

All exceptions raised by the package inherit from :class:`PlatconstError`
so that the CLI error boundary can render a clean message without leaking
internal stack traces.

A name that is simply not defined on the active platform is **not** an
exception for :meth:`~platconst.core.resolver.ConstantResolver.resolve`;
it is reported as ``None``.  :class:`UnresolvedConstantError` is only
raised by the strict :meth:`~platconst.core.resolver.ConstantResolver.require`
variant.

Hierarchy
---------
PlatconstError
├── UnresolvedConstantError
├── DuplicateConstantError
├── UnknownPlatformFamilyError
├── ConfigurationError
└── EnvironmentError
"""

from __future__ import annotations


class PlatconstError(Exception):
    """Base exception for all platconst errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Resolution -------------------------------------------------------------

class UnresolvedConstantError(PlatconstError):
    """Raised when a name is not defined for the active platform family."""

    def __init__(
        self,
        name: str,
        family: str,
        *,
        hint: str | None = None,
    ) -> None:
        super().__init__(
            f"{name!r} is not defined for platform family {family!r}.",
            hint=hint,
        )
        self.name: str = name
        self.family: str = family


# --- Table construction -----------------------------------------------------

class DuplicateConstantError(PlatconstError):
    """Raised when two active tiers carry the same constant name."""

    def __init__(self, name: str, first_tier: str, second_tier: str) -> None:
        super().__init__(
            f"{name!r} is defined by both tier {first_tier!r} "
            f"and tier {second_tier!r}.",
            hint="Each name may appear in at most one tier per platform family.",
        )
        self.name: str = name
        self.tiers: tuple[str, str] = (first_tier, second_tier)


# --- Configuration ----------------------------------------------------------

class UnknownPlatformFamilyError(PlatconstError):
    """Raised when a platform family name cannot be parsed."""


class ConfigurationError(PlatconstError):
    """Raised when an environment setting has an unusable value."""


# --- Environment / tooling --------------------------------------------------

class EnvironmentError(PlatconstError):
    """Raised when an optional runtime dependency is not available."""
