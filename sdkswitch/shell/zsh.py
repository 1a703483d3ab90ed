"""Zsh support."""

from __future__ import annotations

from sdkswitch.shell.base import ActivateConfig, EnvVars, Shell
from sdkswitch.shell.bash import bash_escape

_SELF = '"{{.SelfPath}}"'
_HOOK_NAME = "_vfox_hook"


def _register_hook(array: str) -> list[str]:
    """Lines that prepend the hook to a zsh hook array unless already present."""
    return [
        f"  typeset -ag {array};",
        f'  if [[ -z "${{{array}[(r){_HOOK_NAME}]+1}}" ]]; then',
        f"    {array}=( {_HOOK_NAME} ${{{array}[@]}} )",
        "  fi",
    ]


def _build_hook() -> str:
    lines = [
        "",
        'if [[ -z "$__VFOX_PID" ]]; then',
        "  {{.EnvContent}}",
        "",
        "  export __VFOX_PID=$$;",
        "",
        f"  {_HOOK_NAME}() {{",
        "    trap -- '' SIGINT;",
        f'    eval "$({_SELF} env -s zsh)";',
        "    trap - SIGINT;",
        "  }",
        *_register_hook("precmd_functions"),
        *_register_hook("chpwd_functions"),
        "",
        "  trap 'vfox env --cleanup' EXIT",
        "fi",
        "",
    ]
    return "\n".join(lines)


ZSH_HOOK = _build_hook()


class ZshShell(Shell):
    """The Z shell."""

    def activate(self, config: ActivateConfig) -> str:
        return ZSH_HOOK

    def export(self, envs: EnvVars) -> str:
        return "".join(
            f"unset {bash_escape(key)};"
            if value is None
            else f"export {bash_escape(key)}={bash_escape(value)};"
            for key, value in envs.items()
        )