"""Command group: light/dark display theme."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from passforge.commands._base import PfGroup
from passforge.domain.theme import Theme

if TYPE_CHECKING:
    from passforge.commands._context import AppContext

_THEME_EXAMPLES = """\
  passforge theme show
  passforge theme set dark
  passforge theme toggle
  passforge --json theme show"""


@click.group(cls=PfGroup, examples=_THEME_EXAMPLES)
def theme() -> None:
    """Show or change the saved light/dark theme."""


@theme.command(examples="  passforge theme show")
@click.pass_obj
def show(app: AppContext) -> None:
    """Show the active theme (saved, or detected from the terminal)."""
    from passforge.services.theme import ThemeService

    app.emit(ThemeService(app.preferences).current())


@theme.command(name="set", examples="  passforge theme set dark\n  passforge theme set light")
@click.argument("name", type=click.Choice([t.value for t in Theme]))
@click.pass_obj
def set_theme(app: AppContext, name: str) -> None:
    """Save NAME as the theme."""
    from passforge.services.theme import ThemeService

    app.emit(ThemeService(app.preferences).set(name))


@theme.command(examples="  passforge theme toggle")
@click.pass_obj
def toggle(app: AppContext) -> None:
    """Switch between light and dark."""
    from passforge.services.theme import ThemeService

    app.emit(ThemeService(app.preferences).toggle())
