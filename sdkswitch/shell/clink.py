"""Clink (cmd.exe) support."""

from __future__ import annotations

from sdkswitch.shell.base import ActivateConfig, EnvVars, Shell

CLINK_HOOK = """
{{.EnvContent}}
"{{.SelfPath}}" env --cleanup > nul 2> nul
"""


class ClinkShell(Shell):
    """cmd.exe extended by Clink."""

    def activate(self, config: ActivateConfig) -> str:
        return CLINK_HOOK

    def export(self, envs: EnvVars) -> str:
        # cmd.exe unsets a variable by assigning it an empty value.
        return "".join(
            f'set "{key}={"" if value is None else value}"\n' for key, value in envs.items()
        )