"""Centralized logging configuration for the platconst CLI.

Library code only creates module loggers; handlers are installed here,
and only by the CLI entry point.
"""

from __future__ import annotations

import logging
import sys

_FORMATS: dict[str, str] = {
    "simple": "%(levelname)-8s %(message)s",
    "detailed": "%(asctime)s [%(levelname)-8s] %(name)s:%(lineno)d - %(message)s",
}


def setup_logging(
    level: str = "WARNING",
    quiet: bool = False,
    verbose: bool = False,
    format_style: str = "simple",
) -> None:
    """Configure the ``platconst`` logger hierarchy.

    Args:
        level: Base logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        quiet: If True, suppress everything below ERROR
        verbose: If True, enable debug logging
        format_style: "simple" or "detailed"
    """
    if quiet:
        log_level = logging.ERROR
    elif verbose:
        log_level = logging.DEBUG
    else:
        numeric_level = getattr(logging, level.upper(), None)
        if not isinstance(numeric_level, int):
            raise ValueError(f"Invalid log level: {level}")
        log_level = numeric_level

    package_logger = logging.getLogger("platconst")
    for handler in package_logger.handlers[:]:
        package_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(_FORMATS.get(format_style, _FORMATS["simple"])))
    handler.setLevel(log_level)

    package_logger.setLevel(log_level)
    package_logger.addHandler(handler)
    package_logger.propagate = False


def get_logger(name: str) -> logging.Logger:
    """Get a logger below the ``platconst`` namespace."""
    return logging.getLogger(f"platconst.{name}")
