"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``.  Provides the preference store, the active display
theme, and centralized result emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import click

from passforge.domain.theme import Theme
from passforge.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from passforge.config.settings import PassforgeSettings
    from passforge.infrastructure.preferences import PreferenceStore
    from passforge.services.result import ServiceResult

logger = logging.getLogger(__name__)


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    The preference store is created lazily so ``--help`` and
    ``--version`` never touch the filesystem.
    """

    def __init__(self, settings: PassforgeSettings) -> None:
        self.settings = settings
        self._preferences: PreferenceStore | None = None

        from passforge.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def preferences(self) -> PreferenceStore:
        """The preference store (created lazily on first access)."""
        if self._preferences is None:
            from passforge.infrastructure.preferences import PreferenceStore

            self._preferences = PreferenceStore(self.settings.preferences.path)
        return self._preferences

    def display_theme(self) -> Theme:
        """Theme used to style human output; light if preferences are unreadable."""
        from passforge.infrastructure.preferences import PreferenceStoreError
        from passforge.services.theme import ThemeService

        try:
            return ThemeService(self.preferences).resolve()
        except PreferenceStoreError as exc:
            logger.warning("Falling back to light theme: %s", exc)
            return Theme.LIGHT

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
          Warnings are emitted to stderr so they don't pollute piped output.
        * Failure: writes to stderr, exits with code 1.
        """
        human = not (self.settings.json_output or self.settings.quiet)
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
            theme=self.display_theme() if human else Theme.LIGHT,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            # In JSON mode, warnings are already in the serialized payload.
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
