"""PowerShell support."""

from __future__ import annotations

import re

from sdkswitch.shell.base import ActivateConfig, EnvVars, Shell

POWERSHELL_HOOK = """
{{.EnvContent}}

<#
Due to a bug in PowerShell, we have to cleanup first when the shell open.
#>
& '{{.SelfPath}}' env --cleanup 2>$null | Out-Null;

$__VFOX_PID=$pid;
$originalPrompt = $function:prompt;
$OutputEncoding = [console]::InputEncoding = [console]::OutputEncoding = [Text.UTF8Encoding]::UTF8;

function prompt {
    $export = &"{{.SelfPath}}" env -s pwsh;
    if ($export) {
		Invoke-Expression -Command $export;
    }
    &$originalPrompt;
}

<#
 There is a bug here. 
 When powershell is closed via the x button, this event will not be fired.
 See https://github.com/PowerShell/PowerShell/issues/8000
#>
Register-EngineEvent -SourceIdentifier PowerShell.Exiting -SupportEvent -Action {
	&"{{.SelfPath}}" env --cleanup;
}
"""

_NAMED_ESCAPES = {9: b"`t", 10: b"`n", 13: b"`r"}
_QUOTED_VALUE = re.compile(r"'.*'")


def _escape_byte(byte: int) -> tuple[bytes, bool]:
    """Return the escaped form of one byte and whether it forces quoting."""
    if byte in _NAMED_ESCAPES:
        return _NAMED_ESCAPES[byte], True
    if byte <= 0x1F or byte == 0x7F:
        return f"\\x{byte:02x}".encode("ascii"), True
    if byte == ord("'"):
        return b"`'", True
    raw = bytes([byte])
    if byte <= ord("+"):
        return raw, True
    if byte <= ord("Z") or byte == ord("_"):
        return raw, False
    return raw, True


def powershell_escape(s: str) -> str:
    """Quote ``s`` for PowerShell, wrapping it in single quotes when needed."""
    if s == "":
        return "''"
    pieces = [_escape_byte(byte) for byte in s.encode("utf-8")]
    body = b"".join(raw for raw, _ in pieces).decode("utf-8")
    if any(needs_quoting for _, needs_quoting in pieces):
        return "'" + body + "'"
    return body


class PowerShellShell(Shell):
    """PowerShell (pwsh)."""

    def activate(self, config: ActivateConfig) -> str:
        return POWERSHELL_HOOK

    def export(self, envs: EnvVars) -> str:
        return "".join(
            self._unset(key) if value is None else self._set(key, value)
            for key, value in envs.items()
        )

    @staticmethod
    def _set(key: str, value: str) -> str:
        escaped = powershell_escape(value)
        if not _QUOTED_VALUE.search(escaped):
            escaped = f"'{escaped}'"
        return f"$env:{powershell_escape(key)}={escaped};"

    @staticmethod
    def _unset(key: str) -> str:
        return f"Remove-Item -Path 'env:/{powershell_escape(key)}';"