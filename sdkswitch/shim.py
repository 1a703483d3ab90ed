"""Shims: symlinks in a shared directory that point at SDK executables."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

logger = logging.getLogger(__name__)


@dataclass
class Shim:
    """A link named after ``binary_path`` placed inside ``output_path``."""

    binary_path: str
    output_path: str

    @property
    def target(self) -> str:
        return os.path.join(self.output_path, os.path.basename(self.binary_path))

    def clear(self) -> None:
        """Remove the generated shim if there is one."""
        target = self.target
        if not os.path.lexists(target):
            return
        os.remove(target)

    def generate(self) -> None:
        """Create the shim, replacing any earlier one."""
        try:
            self.clear()
        except OSError as exc:
            logger.debug("Clear shim failed: %s", exc)
            raise
        target = self.target
        logger.debug("Create shim from %s to %s", self.binary_path, target)
        if os.path.exists(target):
            try:
                os.remove(target)
            except OSError:
                pass
        try:
            os.symlink(self.binary_path, target)
        except OSError as exc:
            logger.debug("Create symlink failed: %s", exc)
            raise