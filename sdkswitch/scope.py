"""Scopes for selecting an SDK version and the locations its files are linked to."""

from __future__ import annotations

from enum import Enum


class UseScope(Enum):
    """Where a selected SDK version is recorded."""

    GLOBAL = 0
    PROJECT = 1
    SESSION = 2

    def __str__(self) -> str:
        return self.name.lower()


class Location(Enum):
    """Where the files of an installed SDK package are exposed."""

    ORIGINAL = 0
    GLOBAL = 1
    SHELL = 2

    def __str__(self) -> str:
        return self.name.lower()