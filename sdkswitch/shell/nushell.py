"""Nushell support."""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Optional

from sdkswitch.shell.base import ActivateConfig, EnvVars, Shell

NEWLINE = "\r\n" if os.name == "nt" else "\n"
"""Line separator used in generated Nushell scripts."""

PATH_VAR_NAME = "Path" if os.name == "nt" else "PATH"
"""Name Nushell expects for the search path variable on this platform."""

SCRIPT_NAME = "vfox.nu"

_SELF = "^'{{.SelfPath}}'"
_UPDATE = "updateVfoxEnvironment"
_PRE_PROMPT = "hooks.pre_prompt"


def _build_config() -> str:
    # (indent depth, text) pairs; indented two spaces per level.
    lines = [
        (0, ""),
        (0, "# Generated file: keeps the environment of this Nushell session in step."),
        (0, ""),
        (0, f"{_SELF} activate nushell $nu.default-config-dir | ignore"),
        (0, ""),
        (0, "export-env {"),
        (1, f"def --env {_UPDATE} [] {{"),
        (2, f"let envData = ({_SELF} env -s nushell --full | from json)"),
        (2, "if ($envData | is-empty) {"),
        (3, "return"),
        (2, "}"),
        (2, "load-env $envData.envsToSet"),
        (2, "hide-env ...$envData.envsToUnset"),
        (1, "}"),
        (0, ""),
        (1, f"$env.config = ($env.config | upsert {_PRE_PROMPT} {{"),
        (2, f"let currentValue = ($env.config | get -i {_PRE_PROMPT})"),
        (2, "if $currentValue == null {"),
        (3, f"[{{{_UPDATE}}}]"),
        (2, "} else {"),
        (3, f"$currentValue | append {{{_UPDATE}}}"),
        (2, "}"),
        (1, "})"),
        (0, ""),
        (1, "$env.__VFOX_SHELL = 'nushell'"),
        (1, "$env.__VFOX_PID = $nu.pid"),
        (0, ""),
        (1, f"{_SELF} env --cleanup | ignore"),
        (0, ""),
        (1, _UPDATE),
        (0, "}"),
        (0, ""),
    ]
    return "\n".join("  " * depth + text if text else "" for depth, text in lines)


NUSHELL_CONFIG = _build_config()


def _split_path_list(value: Optional[str]) -> list[str]:
    if not value:
        return []
    return value.split(os.pathsep)


class NushellShell(Shell):
    """Nushell, which loads variables from a JSON record instead of evaluating code."""

    def activate(self, config: ActivateConfig) -> str:
        """Write the setup script into the configuration directory given as first argument.

        Returns the short snippet that sources the written script.
        """
        if not config.args:
            raise ValueError("config path is required")
        target = Path(config.args[0]) / SCRIPT_NAME
        content = NUSHELL_CONFIG.replace("\n", NEWLINE).replace("{{.SelfPath}}", config.self_path)
        try:
            target.write_bytes(content.encode("utf-8"))
            os.chmod(target, 0o755)
        except OSError as exc:
            raise OSError(f"failed to write file: {exc}") from exc
        return (
            "# vfox configuration"
            + NEWLINE
            + f'source ($nu.default-config-dir | path join "{SCRIPT_NAME}")'
            + NEWLINE
        )

    def export(self, envs: EnvVars) -> str:
        """Return a JSON record of the variables to set and the names to unset."""
        to_set: dict[str, Any] = {}
        to_unset: list[str] = []
        for key, value in envs.items():
            if key.lower() == "path":
                to_set[PATH_VAR_NAME] = _split_path_list(value)
            elif value is None:
                to_unset.append(key)
            else:
                to_set[key] = value
        data = {
            "envsToSet": dict(sorted(to_set.items())),
            "envsToUnset": to_unset,
        }
        return json.dumps(data, separators=(",", ":"), ensure_ascii=False)