"""``platconst doctor``: environment diagnostics command.

Gathers host information and renders a Rich table summarising which
platform family is active, how many constants resolve, and whether the
bundled header snapshot agrees with the values the host interpreter was
compiled against.

This module lives in the CLI layer — it may import from ``infra``
and ``core``, and it renders via Rich.
"""

from __future__ import annotations

import platform
import sys

from platconst.api import build_resolver
from platconst.cli import exit_codes
from platconst.cli.console import console, import_rich_table
from platconst.config import family_override
from platconst.core.audit import SourceComparison, compare_sources
from platconst.core.models import PlatformFamily
from platconst.core.resolver import ConstantResolver
from platconst.infra.header_snapshots import SNAPSHOTS, snapshot_covers
from platconst.infra.platform_detector import detect_family, system_display_name
from platconst.infra.value_sources import SnapshotSource, StdlibSource
from platconst.version import __version__


# ---------------------------------------------------------------------------
# Diagnostic collectors
# ---------------------------------------------------------------------------

def _platconst_version_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the platconst version row."""
    return "platconst", __version__, "[green]OK[/green]"


def _python_version_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the Python version row."""
    version = platform.python_version()
    ok = sys.version_info[:2] >= (3, 10)
    status = "[green]OK[/green]" if ok else "[red]FAIL (>=3.10 required)[/red]"
    return "Python", version, status


def _os_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the OS row."""
    value = f"{system_display_name()} {platform.release()} ({platform.machine()})"
    return "OS", value, "[green]OK[/green]"


def _family_check(
    active: PlatformFamily,
    detected: PlatformFamily,
    origin: str,
) -> tuple[str, str, str]:
    """Return (label, value, status) for the active family row."""
    value = f"{active.label} ({origin})"
    if active is not detected:
        return "Family", value, f"[yellow]WARN (host is {detected.value})[/yellow]"
    return "Family", value, "[green]OK[/green]"


def _table_check(resolver: ConstantResolver) -> tuple[str, str, str]:
    """Return (label, value, status) for the resolution table row."""
    table = resolver.table
    value = f"{len(table)} constants"
    if table.missing:
        return "Table", f"{value}, {len(table.missing)} undefined", "[yellow]WARN[/yellow]"
    return "Table", value, "[green]OK[/green]"


def _snapshot_check(
    active: PlatformFamily,
    detected: PlatformFamily,
    machine: str | None = None,
) -> tuple[tuple[str, str, str], SourceComparison | None]:
    """Compare the bundled snapshot with the host stdlib.

    Only meaningful when the active family is the host family and a
    snapshot exists for it.  Names filled in from the snapshot are
    flagged when the snapshot was not taken for this machine.
    """
    if active not in SNAPSHOTS:
        return ("Snapshot", "none for this family", "[green]OK[/green]"), None
    if active is not detected:
        return ("Snapshot", "skipped (not the host family)", "[green]OK[/green]"), None

    arch = machine if machine is not None else platform.machine()
    comparison = compare_sources(active, StdlibSource(), SnapshotSource(active))
    parts = [f"{comparison.compared} compared"]
    warn = False
    if comparison.only_in_reference:
        parts.append(f"{len(comparison.only_in_reference)} from snapshot only")
        if not snapshot_covers(active, arch):
            parts.append(f"snapshot not valid for {arch or 'unknown machine'}")
            warn = True
    if not comparison.agrees:
        parts.append(f"{len(comparison.mismatches)} differ")
        warn = True

    status = "[yellow]WARN[/yellow]" if warn else "[green]OK[/green]"
    return ("Snapshot", ", ".join(parts), status), comparison


def _status_plain(status: str) -> str:
    """Convert rich-markup status to plain text."""
    if "FAIL" in status:
        return "FAIL"
    if "WARN" in status:
        return "WARN"
    if "OK" in status:
        return "OK"
    return status


def _print_plain_doctor_table(checks: list[tuple[str, str, str]]) -> None:
    """Render doctor output without Rich."""
    print("\nplatconst doctor", file=sys.stderr)
    print("=" * 64, file=sys.stderr)
    print(f"{'Component':<12} {'Value':<40} {'Status':<8}", file=sys.stderr)
    print("-" * 64, file=sys.stderr)
    for label, value, status in checks:
        print(f"{label:<12} {value:<40} {_status_plain(status):<8}", file=sys.stderr)
    print(file=sys.stderr)


def _print_mismatches(comparison: SourceComparison, rich_available: bool) -> None:
    """List snapshot values that differ from the host's."""
    header = "Host values differ from the bundled snapshot (host values are used):"
    if rich_available:
        console.print(f"[yellow]{header}[/yellow]")
        for item in comparison.mismatches:
            console.print(
                f"  [bold]{item.name}[/bold] host={item.value} "
                f"snapshot={item.reference_value}"
            )
        console.print()
        return
    print(header, file=sys.stderr)
    for item in comparison.mismatches:
        print(
            f"  {item.name} host={item.value} snapshot={item.reference_value}",
            file=sys.stderr,
        )
    print(file=sys.stderr)


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------

def run_doctor(family: PlatformFamily | None = None) -> int:
    """Execute all diagnostic checks and render a summary table.

    Parameters
    ----------
    family:
        Family forced on the command line, if any.

    Returns
    -------
    int
        :data:`exit_codes.SUCCESS` when no check fails,
        :data:`exit_codes.GENERAL_ERROR` otherwise.
    """
    detected = detect_family()
    if family is not None:
        active, origin = family, "--family"
    else:
        override = family_override()
        if override is not None:
            active, origin = override, "PLATCONST_FAMILY"
        else:
            active, origin = detected, "detected"

    resolver = build_resolver(active)
    snapshot_row, comparison = _snapshot_check(active, detected)

    checks = [
        _platconst_version_check(),
        _python_version_check(),
        _os_check(),
        _family_check(active, detected, origin),
        _table_check(resolver),
        snapshot_row,
    ]
    has_failure = any("FAIL" in status for _, _, status in checks)

    table_class = import_rich_table()
    rich_available = table_class is not None

    if table_class is not None:
        table = table_class(
            title="platconst doctor",
            show_header=True,
            header_style="bold cyan",
            border_style="dim",
        )
        table.add_column("Component", style="bold", min_width=12)
        table.add_column("Value", min_width=20)
        table.add_column("Status", justify="center", min_width=8)

        for label, value, status in checks:
            table.add_row(label, value, status)

        console.print()
        console.print(table)
        console.print()
    else:
        _print_plain_doctor_table(checks)

    if comparison is not None and comparison.mismatches:
        _print_mismatches(comparison, rich_available)

    if has_failure:
        if rich_available:
            console.print("[bold red]Some checks failed.[/bold red]")
        else:
            print("Some checks failed.", file=sys.stderr)
        return exit_codes.GENERAL_ERROR

    if rich_available:
        console.print("[bold green]All checks passed.[/bold green]")
    else:
        print("All checks passed.", file=sys.stderr)
    return exit_codes.SUCCESS
