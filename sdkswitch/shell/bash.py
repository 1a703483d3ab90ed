"""Bash support, and the Bash quoting shared with other POSIX-like shells."""

from __future__ import annotations

from sdkswitch.shell.base import ActivateConfig, EnvVars, Shell

BASH_HOOK = """
{{.EnvContent}}

export __VFOX_PID=$$;

_vfox_hook() {
  local previous_exit_status=$?;
  trap -- '' SIGINT;
  eval "$("{{.SelfPath}}" env -s bash)";
  trap - SIGINT;
  return $previous_exit_status;
};
if ! [[ "${PROMPT_COMMAND[*]:-}" =~ _vfox_hook ]]; then
  if [[ "$(declare -p PROMPT_COMMAND 2>&1)" == "declare -a"* ]]; then
    PROMPT_COMMAND=(_vfox_hook "${PROMPT_COMMAND[@]}")
  else
    PROMPT_COMMAND="_vfox_hook${PROMPT_COMMAND:+;$PROMPT_COMMAND}"
  fi
fi

trap 'vfox env --cleanup' EXIT
"""

_NAMED_ESCAPES = {9: "\\t", 10: "\\n", 13: "\\r"}
_LITERAL_PUNCTUATION = frozenset(",-./@_")


def _escape_byte(byte: int) -> tuple[str, bool]:
    """Return the escaped form of one byte and whether it forces quoting."""
    if byte in _NAMED_ESCAPES:
        return _NAMED_ESCAPES[byte], True
    if byte <= 0x1F or byte >= 0x7F:
        return f"\\x{byte:02x}", True
    char = chr(byte)
    if char in ("'", "\\"):
        return "\\" + char, True
    if char.isdigit() or "A" <= char <= "Z" or char in _LITERAL_PUNCTUATION:
        return char, False
    return char, True


def bash_escape(s: str) -> str:
    """Quote ``s`` for Bash.

    The result is wrapped in ``$'...'`` when any byte needs escaping and is
    otherwise left as it is. Control characters become ANSI escapes and
    non-ASCII bytes become hex codes, so the result is one line of ASCII.
    """
    if s == "":
        return "''"
    pieces = [_escape_byte(byte) for byte in s.encode("utf-8")]
    body = "".join(text for text, _ in pieces)
    if any(needs_quoting for _, needs_quoting in pieces):
        return "$'" + body + "'"
    return body


class BashShell(Shell):
    """The Bash shell."""

    def activate(self, config: ActivateConfig) -> str:
        return BASH_HOOK

    def export(self, envs: EnvVars) -> str:
        return "".join(
            f"unset {bash_escape(key)};"
            if value is None
            else f"export {bash_escape(key)}={bash_escape(value)};"
            for key, value in envs.items()
        )