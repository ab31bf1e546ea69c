"""Protocols (interfaces) consumed by the core layer.

The core never reads the host's ``errno`` or ``socket`` modules itself;
it asks a :class:`ValueSource`.  Infrastructure adapters satisfy the
protocol structurally (no explicit inheritance required).
"""

from __future__ import annotations

from typing import Protocol

from platconst.core.models import ConstantCategory


class ValueSource(Protocol):
    """Contract for anything that knows header-defined integer values."""

    @property
    def description(self) -> str:
        """Short human-readable label, shown in diagnostics."""
        ...  # pragma: no cover

    def lookup(self, category: ConstantCategory, name: str) -> int | None:
        """Return the value *name* has in *category*, or ``None``.

        Implementations must return ``None`` rather than raise when the
        name is not defined, and must never fabricate a value.
        """
        ...  # pragma: no cover
