"""Tests for clipboard backends and fallback."""

from __future__ import annotations

import subprocess
from typing import Any

import pyperclip
import pytest

from passforge.infrastructure import clipboard
from passforge.infrastructure.clipboard import (
    ClipboardError,
    copy_text,
    copy_with_system_command,
    system_copy_command,
)


def _broken_pyperclip(text: str) -> None:
    raise pyperclip.PyperclipException("no copy mechanism")


class TestSystemCopyCommand:
    def test_macos(self) -> None:
        assert system_copy_command("Darwin") == ["pbcopy"]

    def test_windows(self) -> None:
        assert system_copy_command("Windows") == ["clip"]

    def test_linux_prefers_first_available(self, monkeypatch: pytest.MonkeyPatch) -> None:
        available = {"xsel", "xclip"}
        monkeypatch.setattr(
            clipboard.shutil, "which", lambda name: f"/usr/bin/{name}" if name in available else None
        )
        assert system_copy_command("Linux") == ["xclip", "-selection", "clipboard"]

    def test_linux_wayland(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(clipboard.shutil, "which", lambda name: "/usr/bin/wl-copy")
        assert system_copy_command("Linux") == ["wl-copy"]

    def test_linux_nothing_installed(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(clipboard.shutil, "which", lambda name: None)
        assert system_copy_command("Linux") is None

    def test_unknown_platform(self) -> None:
        assert system_copy_command("Plan9") is None


class TestCopyWithSystemCommand:
    def test_pipes_text_to_command(self, monkeypatch: pytest.MonkeyPatch) -> None:
        calls: list[tuple[list[str], dict[str, Any]]] = []
        monkeypatch.setattr(clipboard, "system_copy_command", lambda: ["pbcopy"])
        monkeypatch.setattr(
            clipboard.subprocess, "run", lambda argv, **kw: calls.append((argv, kw))
        )
        copy_with_system_command("s3cret")
        assert calls[0][0] == ["pbcopy"]
        assert calls[0][1]["input"] == "s3cret"
        assert calls[0][1]["check"] is True

    def test_no_command(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(clipboard, "system_copy_command", lambda: None)
        with pytest.raises(ClipboardError, match="No clipboard command"):
            copy_with_system_command("x")

    def test_command_failure(self, monkeypatch: pytest.MonkeyPatch) -> None:
        def failing_run(argv: list[str], **kw: Any) -> None:
            raise subprocess.CalledProcessError(1, argv)

        monkeypatch.setattr(clipboard, "system_copy_command", lambda: ["xclip"])
        monkeypatch.setattr(clipboard.subprocess, "run", failing_run)
        with pytest.raises(ClipboardError, match="xclip failed"):
            copy_with_system_command("x")


class TestCopyText:
    def test_primary_backend(self, monkeypatch: pytest.MonkeyPatch) -> None:
        copied: list[str] = []
        monkeypatch.setattr(clipboard.pyperclip, "copy", copied.append)
        assert copy_text("abc") == "pyperclip"
        assert copied == ["abc"]

    def test_falls_back_to_system(self, monkeypatch: pytest.MonkeyPatch) -> None:
        piped: list[str] = []
        monkeypatch.setattr(clipboard.pyperclip, "copy", _broken_pyperclip)
        monkeypatch.setattr(clipboard, "copy_with_system_command", piped.append)
        assert copy_text("abc") == "system"
        assert piped == ["abc"]

    def test_fallback_disabled(self, monkeypatch: pytest.MonkeyPatch) -> None:
        piped: list[str] = []
        monkeypatch.setattr(clipboard.pyperclip, "copy", _broken_pyperclip)
        monkeypatch.setattr(clipboard, "copy_with_system_command", piped.append)
        with pytest.raises(ClipboardError, match="no copy mechanism"):
            copy_text("abc", fallback=False)
        assert piped == []

    def test_all_backends_fail(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(clipboard.pyperclip, "copy", _broken_pyperclip)
        monkeypatch.setattr(clipboard, "system_copy_command", lambda: None)
        with pytest.raises(ClipboardError):
            copy_text("abc")
