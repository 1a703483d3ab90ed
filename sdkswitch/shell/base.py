"""The interface every supported shell implements."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Mapping, Optional

EnvVars = Mapping[str, Optional[str]]
"""Environment variables to export; a value of ``None`` means unset."""


@dataclass(frozen=True)
class ActivateConfig:
    """What a shell needs to produce its activation script."""

    self_path: str
    args: list[str] = field(default_factory=list)


class Shell(ABC):
    """A shell that hosts the environment hook."""

    @abstractmethod
    def activate(self, config: ActivateConfig) -> str:
        """Return the script to place in the shell's configuration file.

        The script sets up initial environment variables and installs a hook
        that refreshes them when needed.
        """

    @abstractmethod
    def export(self, envs: EnvVars) -> str:
        """Return shell code that sets or unsets the given variables.

        Variables whose value is ``None`` are unset.
        """