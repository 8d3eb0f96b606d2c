"""Tests for the Rich Console factory and light/dark themes."""

from io import StringIO

import pytest

from passforge.domain.theme import Theme
from passforge.output.console import (
    DARK_THEME,
    LIGHT_THEME,
    create_console,
    get_output,
    rich_theme_for,
    strength_style,
)


class TestThemes:
    def test_same_style_names(self) -> None:
        assert set(LIGHT_THEME.styles) == set(DARK_THEME.styles)

    def test_styles_differ(self) -> None:
        assert LIGHT_THEME.styles["pf.password"] != DARK_THEME.styles["pf.password"]

    def test_rich_theme_for(self) -> None:
        assert rich_theme_for(Theme.LIGHT) is LIGHT_THEME
        assert rich_theme_for(Theme.DARK) is DARK_THEME


class TestCreateConsole:
    def test_returns_console_with_stringio(self) -> None:
        console = create_console()
        assert isinstance(console.file, StringIO)

    def test_no_color_disables_ansi(self) -> None:
        console = create_console(theme=Theme.DARK, no_color=True)
        console.print("[pf.ok]hello[/pf.ok]")
        output = get_output(console)
        assert "\x1b" not in output
        assert "hello" in output

    def test_theme_styles_resolve(self) -> None:
        console = create_console(theme=Theme.DARK)
        assert console.get_style("pf.ok") == DARK_THEME.styles["pf.ok"]

    def test_custom_width(self) -> None:
        assert create_console(width=80).width == 80

    def test_empty_console(self) -> None:
        assert get_output(create_console()) == ""


class TestStrengthStyle:
    @pytest.mark.parametrize(
        ("bits", "label"),
        [(0.0, "weak"), (49.9, "weak"), (50.0, "fair"), (79.9, "fair"), (80.0, "strong")],
    )
    def test_thresholds(self, bits: float, label: str) -> None:
        assert strength_style(bits) == (label, f"pf.strength.{label}")
