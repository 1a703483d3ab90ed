"""String helpers exposed to plugins."""

from __future__ import annotations

from typing import Any, Iterable


def split(s: str, sep: str = "") -> list[str]:
    """Split ``s`` around each ``sep``; an empty separator splits into characters."""
    if sep == "":
        return list(s)
    return s.split(sep)


def fields(s: str) -> list[str]:
    """Split ``s`` around runs of whitespace."""
    return s.split()


def has_prefix(s: str, prefix: str) -> bool:
    return s.startswith(prefix)


def has_suffix(s: str, suffix: str) -> bool:
    return s.endswith(suffix)


def trim(s: str, cutset: str) -> str:
    """Strip every leading and trailing character found in ``cutset``."""
    if cutset == "":
        return s
    return s.strip(cutset)


def trim_space(s: str) -> str:
    return s.strip()


def trim_prefix(s: str, prefix: str) -> str:
    return s.removeprefix(prefix)


def trim_suffix(s: str, suffix: str) -> str:
    return s.removesuffix(suffix)


def contains(s: str, sub: str) -> bool:
    return sub in s


def _to_text(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return "nil"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def join(items: Iterable[Any], sep: str) -> str:
    """Join the text form of each item with ``sep``."""
    return sep.join(_to_text(item) for item in items)