"""Shared pytest fixtures and test helpers for passforge tests."""

from __future__ import annotations

import logging
from collections.abc import Generator, Iterable
from pathlib import Path

import pytest
from click.testing import CliRunner


class SequenceRandomSource:
    """Deterministic random source that replays fixed draws.

    Records every requested bound and checks each replayed value is in range.
    """

    def __init__(self, values: Iterable[int]) -> None:
        self._values = list(values)
        self.bounds: list[int] = []

    def randbelow(self, n: int) -> int:
        self.bounds.append(n)
        if not self._values:
            msg = f"Random sequence exhausted (bound {n})"
            raise AssertionError(msg)
        value = self._values.pop(0)
        assert 0 <= value < n, f"draw {value} outside [0, {n})"
        return value

    @property
    def remaining(self) -> int:
        return len(self._values)


@pytest.fixture
def sequence_rng() -> type[SequenceRandomSource]:
    """Factory for deterministic random sources."""
    return SequenceRandomSource


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def prefs_path(tmp_path: Path) -> Path:
    """Location of an isolated preferences file (not created)."""
    return tmp_path / "prefs" / "preferences.json"


@pytest.fixture(autouse=True)
def _isolated_env(
    tmp_path: Path,
    prefs_path: Path,
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    """Keep tests away from real config, preferences, and terminal hints."""
    for name in ("PASSFORGE_CONFIG", "PASSFORGE_GENERATOR__LENGTH", "COLORFGBG"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("PASSFORGE_PREFERENCES__PATH", str(prefs_path))
    monkeypatch.chdir(tmp_path)


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Undo handlers installed by configure_logging during CLI runs."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    app = logging.getLogger("passforge")
    app_level = app.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    app.setLevel(app_level)
