"""Preference store — a small JSON key-value file.

Used only by the theme feature. Lives in the per-user application
directory reported by :func:`click.get_app_dir` unless overridden.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

import click

logger = logging.getLogger(__name__)

APP_NAME = "passforge"
PREFERENCES_FILENAME = "preferences.json"


class PreferenceStoreError(Exception):
    """The preferences file could not be read or written."""


def default_preferences_path() -> Path:
    """Per-user location of the preferences file."""
    return Path(click.get_app_dir(APP_NAME)) / PREFERENCES_FILENAME


class PreferenceStore:
    """String-valued key-value persistence backed by a JSON object file.

    A missing file reads as empty. The file is rewritten in full on every
    :meth:`set`.
    """

    def __init__(self, path: Path | None = None) -> None:
        self.path = path or default_preferences_path()

    def _load(self) -> dict[str, str]:
        if not self.path.is_file():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:  # ValueError covers JSON and UTF-8 decode errors
            msg = f"Cannot read preferences from {self.path}: {exc}"
            raise PreferenceStoreError(msg) from exc
        if not isinstance(data, dict):
            msg = f"Preferences file {self.path} must contain a JSON object"
            raise PreferenceStoreError(msg)
        return {str(k): str(v) for k, v in data.items()}

    def get(self, key: str) -> str | None:
        """Return the stored value for *key*, or None."""
        return self._load().get(key)

    def set(self, key: str, value: str) -> None:
        """Persist *value* under *key*, keeping all other keys."""
        data = self._load()
        data[key] = value
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(json.dumps(data, indent=2, sort_keys=True), encoding="utf-8")
        except OSError as exc:
            msg = f"Cannot write preferences to {self.path}: {exc}"
            raise PreferenceStoreError(msg) from exc
        logger.debug("Stored preference %s in %s", key, self.path)
