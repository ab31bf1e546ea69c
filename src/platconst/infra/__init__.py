"""Infrastructure layer — everything that touches the host platform.

This layer reads :func:`platform.system` and the interpreter's
:mod:`errno` / :mod:`socket` modules, and ships the header snapshots
used for non-host families.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
* Must expose clean, typed interfaces consumed by the core layer.
"""

from platconst.infra.header_snapshots import SNAPSHOT_MACHINES, SNAPSHOTS, snapshot_covers
from platconst.infra.platform_detector import detect_family, system_display_name
from platconst.infra.value_sources import (
    ChainedSource,
    SnapshotSource,
    StdlibSource,
    default_source,
)

__all__: list[str] = [
    "SNAPSHOTS",
    "SNAPSHOT_MACHINES",
    "ChainedSource",
    "SnapshotSource",
    "StdlibSource",
    "default_source",
    "detect_family",
    "snapshot_covers",
    "system_display_name",
]
