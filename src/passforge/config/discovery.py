"""Locate the passforge.toml that supplies generator and clipboard defaults.

A project can pin its password policy (length, character classes) by
committing passforge.toml; any command run below it picks the file up.
``PASSFORGE_CONFIG`` points at one file explicitly and disables the search.
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "passforge.toml"
CONFIG_ENV_VAR = "PASSFORGE_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Walk up from *start* (default: cwd) looking for passforge.toml.

    A ``PASSFORGE_CONFIG`` that names a missing file yields None rather
    than falling back to the search.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        p = Path(env_path)
        if p.is_file():
            return p
        return None

    current = (start or Path.cwd()).resolve()
    while True:
        candidate = current / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
        parent = current.parent
        if parent == current:
            break
        current = parent
    return None
