"""Light/dark display theme values and resolution rules."""

from __future__ import annotations

from collections.abc import Mapping
from enum import StrEnum

THEME_KEY = "theme"


class Theme(StrEnum):
    """Terminal display theme."""

    LIGHT = "light"
    DARK = "dark"

    def toggled(self) -> Theme:
        return Theme.LIGHT if self is Theme.DARK else Theme.DARK


def parse_theme(value: str | None) -> Theme | None:
    """Return the Theme for exactly ``"light"`` or ``"dark"``, else None."""
    if value == Theme.LIGHT.value:
        return Theme.LIGHT
    if value == Theme.DARK.value:
        return Theme.DARK
    return None


def resolve_theme(saved: str | None, *, prefers_dark: bool) -> Theme:
    """A valid saved preference wins; otherwise follow the environment."""
    theme = parse_theme(saved)
    if theme is not None:
        return theme
    return Theme.DARK if prefers_dark else Theme.LIGHT


# xterm palette indexes that are dark backgrounds (black through cyan, grey).
_DARK_BACKGROUNDS = frozenset({0, 1, 2, 3, 4, 5, 6, 8})


def detect_prefers_dark(environ: Mapping[str, str]) -> bool:
    """Guess whether the terminal has a dark background from ``COLORFGBG``.

    Examples:
        >>> detect_prefers_dark({"COLORFGBG": "15;0"})
        True
        >>> detect_prefers_dark({"COLORFGBG": "0;15"})
        False
        >>> detect_prefers_dark({})
        False
    """
    raw = environ.get("COLORFGBG", "")
    if not raw:
        return False
    background = raw.split(";")[-1]
    try:
        return int(background) in _DARK_BACKGROUNDS
    except ValueError:
        return False
