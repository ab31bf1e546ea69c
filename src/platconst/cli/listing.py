"""Table rendering for ``platconst list`` and ``platconst gaps``.

Rich tables when Rich is importable, aligned plain text on stderr
otherwise.  No lookup logic lives here.
"""

from __future__ import annotations

import sys
from collections.abc import Sequence

from platconst.cli.console import console, import_rich_table
from platconst.core.models import ConstantInfo, ExcludedConstant


# ---------------------------------------------------------------------------
# Presentation helpers
# ---------------------------------------------------------------------------

def format_value(value: int) -> str:
    """Decimal, plus hex for flag-sized values (``4103 (0x1007)``)."""
    if 0 <= value < 16:
        return str(value)
    return f"{value} ({value:#x})"


def _gap_families(gap: ExcludedConstant) -> str:
    return ", ".join(family.value for family in gap.families)


# ---------------------------------------------------------------------------
# Constants table
# ---------------------------------------------------------------------------

def render_constants(infos: Sequence[ConstantInfo], *, title: str) -> None:
    """Print one row per resolved constant."""
    table_class = import_rich_table()
    if table_class is None:
        print(f"\n{title}", file=sys.stderr)
        print("-" * 64, file=sys.stderr)
        for info in infos:
            print(
                f"{info.name:<20} {format_value(info.value):<22} {info.tier}",
                file=sys.stderr,
            )
        print(f"{len(infos)} constant(s)", file=sys.stderr)
        return

    table = table_class(
        title=title,
        show_header=True,
        header_style="bold cyan",
        border_style="dim",
    )
    table.add_column("Name", style="bold", min_width=16)
    table.add_column("Value", justify="right", min_width=8)
    table.add_column("Tier", min_width=12)
    for info in infos:
        table.add_row(info.name, format_value(info.value), info.tier)

    console.print(table)
    console.print(f"[dim]{len(infos)} constant(s)[/dim]")


# ---------------------------------------------------------------------------
# Known gaps table
# ---------------------------------------------------------------------------

def render_gaps(gaps: Sequence[ExcludedConstant]) -> None:
    """Print the deliberately excluded names and why."""
    table_class = import_rich_table()
    if table_class is None:
        print("\nKnown gaps", file=sys.stderr)
        print("-" * 64, file=sys.stderr)
        for gap in gaps:
            print(
                f"{gap.name:<16} {_gap_families(gap):<16} {gap.reason}",
                file=sys.stderr,
            )
        return

    table = table_class(
        title="Known gaps",
        show_header=True,
        header_style="bold cyan",
        border_style="dim",
    )
    table.add_column("Name", style="bold", min_width=14)
    table.add_column("Families", min_width=12)
    table.add_column("Reason")
    for gap in gaps:
        table.add_row(gap.name, _gap_families(gap), gap.reason)

    console.print(table)
