"""Infrastructure: platform family detection.

Maps the operating system reported by :func:`platform.system` onto a
:class:`~platconst.core.models.PlatformFamily`.

Rules
-----
* Detection via :func:`platform.system` only — no subprocess, no probing
  of the running kernel.
* No ``print()`` — callers handle user-facing output.
"""

from __future__ import annotations

import platform

from platconst.core.models import PlatformFamily

_SYSTEM_FAMILIES: dict[str, PlatformFamily] = {
    "linux": PlatformFamily.LINUX,
    "darwin": PlatformFamily.DARWIN,
}


def detect_family(system: str | None = None) -> PlatformFamily:
    """Return the family of *system* (default: the running OS).

    Linux-based systems map to ``LINUX`` and macOS to ``DARWIN``.  The
    other BSDs, Solaris and anything unrecognised get the ``GENERIC``
    POSIX baseline: their headers agree with neither snapshot.
    """
    raw = system if system is not None else platform.system()
    return _SYSTEM_FAMILIES.get(raw.strip().lower(), PlatformFamily.GENERIC)


def system_display_name(system: str | None = None) -> str:
    """Human-friendly OS name for diagnostics (``Darwin`` shown as macOS)."""
    raw = system if system is not None else platform.system()
    return {
        "Windows": "Windows",
        "Linux": "Linux",
        "Darwin": "macOS",
    }.get(raw, raw or "unknown")
