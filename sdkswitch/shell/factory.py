"""Looking up a supported shell by name."""

from __future__ import annotations

from typing import Callable, Optional

from sdkswitch.shell.base import Shell
from sdkswitch.shell.bash import BashShell
from sdkswitch.shell.clink import ClinkShell
from sdkswitch.shell.fish import FishShell
from sdkswitch.shell.nushell import NushellShell
from sdkswitch.shell.powershell import PowerShellShell
from sdkswitch.shell.zsh import ZshShell

_SHELLS: dict[str, Callable[[], Shell]] = {
    "bash": BashShell,
    "zsh": ZshShell,
    "pwsh": PowerShellShell,
    "fish": FishShell,
    "clink": ClinkShell,
    "nushell": NushellShell,
}


def new_shell(name: str) -> Optional[Shell]:
    """Return the shell called ``name`` (case-insensitive), or ``None`` if unsupported."""
    factory = _SHELLS.get(name.lower())
    return factory() if factory is not None else None