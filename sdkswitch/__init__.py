"""Building blocks for managing and switching SDK versions: shells, shims, packages and plugin helpers."""

__version__ = "0.1.0"