"""Environment variable names and typed accessors.

All environment access goes through this module so that the set of
knobs platconst reacts to is visible in one place.
"""

from __future__ import annotations

import os
from enum import Enum

from platconst.core.models import PlatformFamily
from platconst.exceptions import ConfigurationError

DEFAULT_LOG_LEVEL: str = "WARNING"

LOG_LEVELS: tuple[str, ...] = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class EnvVar(str, Enum):
    """Environment variables read by platconst."""

    FAMILY = "PLATCONST_FAMILY"
    """Force the active platform family (``linux``, ``darwin``, ``generic``)."""

    LOG_LEVEL = "PLATCONST_LOG_LEVEL"
    """Default CLI log level (``DEBUG`` … ``CRITICAL``)."""


def get_env(var: EnvVar, default: str | None = None) -> str | None:
    """Return the value of *var*, treating blank values as unset."""
    value = os.environ.get(var.value)
    if value is None or not value.strip():
        return default
    return value


def family_override() -> PlatformFamily | None:
    """Family forced through ``PLATCONST_FAMILY``, if any.

    Raises
    ------
    UnknownPlatformFamilyError
        If the variable is set to an unrecognised family.
    """
    raw = get_env(EnvVar.FAMILY)
    if raw is None:
        return None
    return PlatformFamily.parse(raw)


def log_level() -> str:
    """Log level from ``PLATCONST_LOG_LEVEL``, default ``WARNING``.

    Raises
    ------
    ConfigurationError
        If the variable names no standard logging level.
    """
    raw = get_env(EnvVar.LOG_LEVEL) or DEFAULT_LOG_LEVEL
    level = raw.strip().upper()
    if level not in LOG_LEVELS:
        raise ConfigurationError(
            f"Invalid {EnvVar.LOG_LEVEL.value}: {raw!r}",
            hint=f"Choose one of: {', '.join(LOG_LEVELS)}",
        )
    return level
