"""Rich Console factory and light/dark themes for passforge output.

Creates Console instances that render to a StringIO buffer, preserving
the ``format_result() -> str`` contract.  In non-TTY environments
(tests, pipes) Rich automatically disables color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme as RichTheme

from passforge.domain.theme import Theme

LIGHT_THEME = RichTheme(
    {
        "pf.ok": "bold green4",
        "pf.error": "bold red3",
        "pf.warning": "bold dark_orange3",
        "pf.op": "bold blue",
        "pf.key": "grey50",
        "pf.password": "bold black on grey93",
        "pf.border": "grey62",
        "pf.strength.weak": "red3",
        "pf.strength.fair": "dark_orange3",
        "pf.strength.strong": "green4",
    }
)

DARK_THEME = RichTheme(
    {
        "pf.ok": "bold green",
        "pf.error": "bold red",
        "pf.warning": "bold yellow",
        "pf.op": "bold cyan",
        "pf.key": "dim",
        "pf.password": "bold bright_white on grey23",
        "pf.border": "grey50",
        "pf.strength.weak": "bright_red",
        "pf.strength.fair": "yellow",
        "pf.strength.strong": "bright_green",
    }
)

_THEMES: dict[Theme, RichTheme] = {
    Theme.LIGHT: LIGHT_THEME,
    Theme.DARK: DARK_THEME,
}


def rich_theme_for(theme: Theme) -> RichTheme:
    """Return the Rich style theme for a display theme."""
    return _THEMES[theme]


def create_console(
    *,
    theme: Theme = Theme.LIGHT,
    no_color: bool = False,
    width: int | None = None,
) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        theme: Light or dark style set.
        no_color: Disable ANSI escape codes (used in tests).
        width: Override terminal width (useful for consistent test output).
    """
    return Console(
        file=StringIO(),
        theme=rich_theme_for(theme),
        no_color=no_color,
        highlight=False,
        width=width or 100,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def strength_style(entropy_bits: float) -> tuple[str, str]:
    """Map entropy to a ``(label, style)`` pair.

    Examples:
        >>> strength_style(30.0)
        ('weak', 'pf.strength.weak')
        >>> strength_style(100.0)
        ('strong', 'pf.strength.strong')
    """
    if entropy_bits < 50:
        return "weak", "pf.strength.weak"
    if entropy_bits < 80:
        return "fair", "pf.strength.fair"
    return "strong", "pf.strength.strong"
