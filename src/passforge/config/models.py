"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, passforge.toml only contains overrides.
"""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import BaseModel

from passforge.domain.charsets import CharacterClass


class GeneratorConfig(BaseModel):
    """[generator] section."""

    model_config = {"frozen": True}

    length: int = 16
    uppercase: bool = True
    lowercase: bool = True
    numbers: bool = True
    symbols: bool = True
    rng: Literal["secure", "modulo"] = "secure"

    def enabled_classes(self) -> set[CharacterClass]:
        """Character classes switched on in this section."""
        flags = {
            CharacterClass.UPPERCASE: self.uppercase,
            CharacterClass.LOWERCASE: self.lowercase,
            CharacterClass.NUMBER: self.numbers,
            CharacterClass.SYMBOL: self.symbols,
        }
        return {cls for cls, enabled in flags.items() if enabled}


class ClipboardConfig(BaseModel):
    """[clipboard] section."""

    model_config = {"frozen": True}

    fallback: bool = True


class PreferencesConfig(BaseModel):
    """[preferences] section."""

    model_config = {"frozen": True}

    path: Path | None = None
