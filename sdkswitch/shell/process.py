"""Finding the executable of a shell process and opening a new instance of it."""

from __future__ import annotations

import os
import subprocess
import sys

import psutil


def _linux_executable(pid: int) -> str:
    try:
        return os.readlink(f"/proc/{pid}/exe")
    except OSError as exc:
        raise OSError(f"open a new shell failed, err:{exc}") from exc


def _macos_executable(pid: int) -> str:
    try:
        result = subprocess.run(
            ["ps", "-p", str(pid), "-o", "command="],
            capture_output=True,
            text=True,
            check=True,
        )
    except (OSError, subprocess.CalledProcessError) as exc:
        raise OSError(f"open a new shell failed, err:{exc}") from exc
    words = result.stdout.split()
    if not words:
        raise OSError("not found shell")
    return words[0].removeprefix("-")


def _generic_executable(pid: int) -> str:
    try:
        return psutil.Process(pid).exe()
    except psutil.Error as exc:
        raise OSError(f"open a new shell failed, err:{exc}") from exc


def shell_executable(pid: int) -> str:
    """Return the executable of the process ``pid`` (normally the parent shell)."""
    if sys.platform.startswith("linux"):
        return _linux_executable(pid)
    if sys.platform == "darwin":
        return _macos_executable(pid)
    return _generic_executable(pid)


def open_shell(pid: int) -> None:
    """Start a new interactive instance of the shell running as ``pid`` and wait for it."""
    path = shell_executable(pid)
    try:
        subprocess.run([path], env=dict(os.environ), check=True)
    except (OSError, subprocess.CalledProcessError) as exc:
        raise OSError(f"open a new shell failed, err:{exc}") from exc