"""Fish shell support."""

from __future__ import annotations

from sdkswitch.shell.base import ActivateConfig, EnvVars, Shell

_REFRESH = '"{{.SelfPath}}" env -s fish | source;'
_AGAIN_FLAG = "__vfox_export_again"
_CD_HOOK = "__vfox_cd_hook"
_MODE = '"$vfox_fish_mode"'


def _build_hook() -> str:
    # (indent depth, text) pairs; fish scripts here are indented with tabs.
    lines = [
        (0, ""),
        (0, "{{.EnvContent}}"),
        (0, ""),
        (0, "set -x -g __VFOX_PID %self;"),
        (0, "function __vfox_export_eval --on-event fish_prompt;"),
        (1, _REFRESH),
        (0, ""),
        (1, f'if test {_MODE} != "disable_arrow";'),
        (2, f"function {_CD_HOOK} --on-variable PWD;"),
        (3, f'if test {_MODE} = "eval_after_arrow";'),
        (4, f"set -g {_AGAIN_FLAG} 0;"),
        (3, "else;"),
        (4, _REFRESH),
        (3, "end;"),
        (2, "end;"),
        (1, "end;"),
        (0, "end;"),
        (0, ""),
        (0, "function __vfox_export_eval_2 --on-event fish_preexec;"),
        (1, f"if set -q {_AGAIN_FLAG};"),
        (2, f"set -e {_AGAIN_FLAG};"),
        (2, _REFRESH),
        (2, "echo;"),
        (1, "end;"),
        (0, ""),
        (1, f"functions --erase {_CD_HOOK};"),
        (0, "end;"),
        (0, "function cleanup_on_exit --on-process-exit %self"),
        (0, ""),
        (1, '"{{.SelfPath}}" env --cleanup'),
        (0, "end;"),
        (0, ""),
    ]
    return "\n".join("\t" * depth + text if text else "" for depth, text in lines)


FISH_HOOK = _build_hook()

_NAMED_ESCAPES = {9: "'\\t'", 10: "'\\n'", 13: "'\\r'"}


def _escape_byte(byte: int) -> str:
    if byte in _NAMED_ESCAPES:
        return _NAMED_ESCAPES[byte]
    if byte <= 0x1F or byte >= 0x7F:
        return f"'\\X{byte:02x}'"
    char = chr(byte)
    if char in ("'", "\\"):
        return "\\" + char
    return char


def fish_escape(s: str) -> str:
    """Quote ``s`` for fish, always within single quotes.

    Control and non-ASCII bytes are written outside the quotes as escapes.
    """
    return "'" + "".join(_escape_byte(byte) for byte in s.encode("utf-8")) + "'"


class FishShell(Shell):
    """The fish shell."""

    def activate(self, config: ActivateConfig) -> str:
        return FISH_HOOK

    def export(self, envs: EnvVars) -> str:
        return "".join(
            self._unset(key) if value is None else self._set(key, value)
            for key, value in envs.items()
        )

    @staticmethod
    def _set(key: str, value: str) -> str:
        if key == "PATH":
            entries = " ".join(fish_escape(entry) for entry in value.split(":"))
            return f"set -x -g PATH {entries};"
        return f"set -x -g {fish_escape(key)} {fish_escape(value)};"

    @staticmethod
    def _unset(key: str) -> str:
        return f"set -e -g {fish_escape(key)};"