"""Single source of truth for the platconst version string."""

__version__: str = "0.1.0"
