"""File operations available to plugins, relative to a root directory."""

from __future__ import annotations

import os
from dataclasses import dataclass


def _join(root: str, name: str) -> str:
    parts = [part for part in (root, name) if part]
    if not parts:
        return ""
    return os.path.normpath(os.sep.join(parts))


@dataclass(frozen=True)
class FileOperation:
    """File operations whose paths are taken below ``root_path``."""

    root_path: str

    def symlink(self, src: str, dest: str) -> bool:
        """Create ``dest`` as a symlink to ``src``, both below the root."""
        os.symlink(_join(self.root_path, src), _join(self.root_path, dest))
        return True