"""Clipboard backends.

The primary backend is :mod:`pyperclip`. When it fails (no copy
mechanism found, locked clipboard), the platform's clipboard command is
tried directly as a fallback.
"""

from __future__ import annotations

import logging
import platform
import shutil
import subprocess

import pyperclip

logger = logging.getLogger(__name__)


class ClipboardError(Exception):
    """No clipboard backend could copy the text."""


# Linux candidates in preference order (Wayland first).
_LINUX_COMMANDS: list[list[str]] = [
    ["wl-copy"],
    ["xclip", "-selection", "clipboard"],
    ["xsel", "--clipboard", "--input"],
]


def system_copy_command(system: str | None = None) -> list[str] | None:
    """Return the argv of the platform clipboard command, or None."""
    system = system or platform.system()
    if system == "Darwin":
        return ["pbcopy"]
    if system == "Windows":
        return ["clip"]
    if system == "Linux":
        for argv in _LINUX_COMMANDS:
            if shutil.which(argv[0]):
                return argv
    return None


def copy_with_pyperclip(text: str) -> None:
    try:
        pyperclip.copy(text)
    except pyperclip.PyperclipException as exc:
        raise ClipboardError(str(exc)) from exc


def copy_with_system_command(text: str) -> None:
    argv = system_copy_command()
    if argv is None:
        msg = f"No clipboard command available on {platform.system()}"
        raise ClipboardError(msg)
    try:
        subprocess.run(argv, input=text, text=True, check=True, capture_output=True)
    except (OSError, subprocess.CalledProcessError) as exc:
        msg = f"{argv[0]} failed: {exc}"
        raise ClipboardError(msg) from exc


def copy_text(text: str, *, fallback: bool = True) -> str:
    """Copy *text* to the clipboard and return the backend name used.

    Raises:
        ClipboardError: Every attempted backend failed.
    """
    try:
        copy_with_pyperclip(text)
        return "pyperclip"
    except ClipboardError as exc:
        if not fallback:
            raise
        logger.debug("pyperclip copy failed, trying system command: %s", exc)

    copy_with_system_command(text)
    return "system"
