"""Subcommand modules for passforge.

Provides register_commands() which uses deferred imports to keep
``passforge --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all command groups and standalone commands on the root CLI group."""
    # --- Groups ---
    from passforge.commands.theme import theme

    cli.add_command(theme)

    # --- Standalone commands ---
    from passforge.commands.copy import copy
    from passforge.commands.generate import generate

    cli.add_command(generate)
    cli.add_command(copy)
