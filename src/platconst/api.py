"""Process-wide resolver and plain-function entry points.

The active family is fixed the first time it is needed: the
``PLATCONST_FAMILY`` override wins, otherwise the running OS decides.
The resulting resolver is cached for the lifetime of the process and
shared by every caller.
"""

from __future__ import annotations

import functools

from platconst.config import family_override
from platconst.core.models import PlatformFamily
from platconst.core.protocols import ValueSource
from platconst.core.resolver import ConstantResolver, to_c_int_or_sentinel
from platconst.infra.platform_detector import detect_family
from platconst.infra.value_sources import default_source


def active_family() -> PlatformFamily:
    """Family selected by the environment override or OS detection."""
    override = family_override()
    return override if override is not None else detect_family()


def build_resolver(
    family: PlatformFamily | None = None,
    source: ValueSource | None = None,
) -> ConstantResolver:
    """Build a fresh resolver.

    Parameters
    ----------
    family:
        Family to model; defaults to :func:`active_family`.
    source:
        Value source; defaults to :func:`~platconst.infra.default_source`
        for *family*.
    """
    chosen = family if family is not None else active_family()
    values = source if source is not None else default_source(chosen)
    return ConstantResolver.for_family(chosen, values)


@functools.lru_cache(maxsize=1)
def default_resolver() -> ConstantResolver:
    """The shared resolver for this process, built on first use."""
    return build_resolver()


def resolve(name: str) -> int | None:
    """Value of *name* on the active platform, or ``None`` if undefined."""
    return default_resolver().resolve(name)


def require(name: str) -> int:
    """Value of *name* on the active platform.

    Raises
    ------
    UnresolvedConstantError
        If *name* is not defined on the active platform.
    """
    return default_resolver().require(name)


def get_int_const(name: str) -> int:
    """C-compatible lookup returning ``-1`` for unknown names.

    Kept for callers ported from the C ``get_int_const`` helper.  The
    sentinel collides with ``INADDR_NONE`` and ``INADDR_BROADCAST``; use
    :func:`resolve` in new code.
    """
    return to_c_int_or_sentinel(default_resolver(), name)
