"""Allow ``python -m platconst`` invocation.

This module simply delegates to the CLI error-boundary entry point so
that ``python -m platconst`` behaves identically to the ``platconst``
console script.
"""

from __future__ import annotations

from platconst.cli.app import cli

if __name__ == "__main__":
    cli()
