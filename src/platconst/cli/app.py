"""CLI application entry point and command routing for platconst.

This module is the **sole error boundary** for the application.  It
catches :class:`~platconst.exceptions.PlatconstError`, ``KeyboardInterrupt``,
and any unexpected ``Exception``, rendering user-friendly messages and
returning well-defined exit codes.

Architecture notes
------------------
* No lookup logic lives here; all work is delegated to the core and
  infrastructure layers.
* Resolved values go to stdout so the command composes in shell
  scripts; diagnostics go to stderr.
"""

from __future__ import annotations

import argparse
import sys

from platconst.cli import exit_codes
from platconst.cli.console import console, escape_markup
from platconst.config import log_level
from platconst.core.models import ConstantCategory, PlatformFamily
from platconst.core.tiers import ALL_TIERS
from platconst.exceptions import PlatconstError
from platconst.logging_utils import get_logger, setup_logging
from platconst.version import __version__

logger = get_logger("cli")


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    Commands:
    * ``platconst resolve NAME [NAME ...]``
    * ``platconst list``
    * ``platconst gaps``
    * ``platconst doctor``
    """
    parser = argparse.ArgumentParser(
        prog="platconst",
        description="Resolve errno and socket constant names to platform values.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging.",
    )
    parser.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="Only log errors.",
    )
    parser.add_argument(
        "--family",
        default=None,
        help="Platform family to model (linux, darwin, generic). "
        "Defaults to PLATCONST_FAMILY or the running OS.",
    )

    commands = parser.add_subparsers(dest="command")

    resolve_cmd = commands.add_parser("resolve", help="Print NAME=VALUE for each name.")
    resolve_cmd.add_argument("names", nargs="+", metavar="NAME")

    list_cmd = commands.add_parser("list", help="List every resolvable constant.")
    list_cmd.add_argument(
        "--category",
        choices=[category.value for category in ConstantCategory],
        default=None,
    )
    list_cmd.add_argument(
        "--tier",
        choices=[tier.name for tier in ALL_TIERS],
        default=None,
    )

    commands.add_parser("gaps", help="Show names that are deliberately excluded.")
    commands.add_parser("doctor", help="Run environment diagnostics.")
    return parser


def _parse_family(raw: str | None) -> PlatformFamily | None:
    return PlatformFamily.parse(raw) if raw is not None else None


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _handle_resolve(names: list[str], family: PlatformFamily | None) -> int:
    """Print ``NAME=VALUE`` for every resolvable name."""
    from platconst.api import build_resolver

    resolver = build_resolver(family)
    unresolved = 0
    for name in names:
        value = resolver.resolve(name)
        if value is None:
            unresolved += 1
            console.print(
                f"[yellow]{escape_markup(name)}[/yellow] is not defined "
                f"for {resolver.family.label}."
            )
            continue
        print(f"{name}={value}")

    if unresolved:
        logger.debug("%d of %d name(s) unresolved", unresolved, len(names))
        return exit_codes.UNRESOLVED
    return exit_codes.SUCCESS


def _handle_list(
    family: PlatformFamily | None,
    category: str | None,
    tier: str | None,
) -> int:
    """Render the resolvable constants, optionally filtered."""
    from platconst.api import build_resolver
    from platconst.cli.listing import render_constants

    resolver = build_resolver(family)
    candidates = resolver.table.by_tier(tier) if tier is not None else list(resolver)
    infos = [
        info
        for info in candidates
        if category is None or info.category.value == category
    ]
    render_constants(
        infos,
        title=f"{resolver.family.label} constants ({resolver.table.source_description})",
    )
    return exit_codes.SUCCESS


def _handle_gaps() -> int:
    """Render the known-gaps list."""
    from platconst.cli.listing import render_gaps
    from platconst.core.tiers import KNOWN_GAPS

    render_gaps(KNOWN_GAPS)
    return exit_codes.SUCCESS


def _handle_doctor(family: PlatformFamily | None) -> int:
    """Dispatch the ``doctor`` diagnostics command."""
    from platconst.cli.doctor import run_doctor

    return run_doctor(family)


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the platconst CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.

    Returns
    -------
    int
        OS process exit code.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    setup_logging(level=log_level(), quiet=args.quiet, verbose=args.verbose)

    if args.command is None:
        parser.print_help()
        return exit_codes.SUCCESS

    family = _parse_family(args.family)
    logger.debug("command=%s family=%s", args.command, family)

    if args.command == "resolve":
        return _handle_resolve(args.names, family)
    if args.command == "list":
        return _handle_list(family, args.category, args.tier)
    if args.command == "gaps":
        return _handle_gaps()
    return _handle_doctor(family)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point."""
    try:
        code = main()
        sys.exit(code)
    except PlatconstError as exc:
        console.print(f"[bold red]Error:[/bold red] {escape_markup(exc)}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {escape_markup(exc.hint)}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {escape_markup(exc)}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
