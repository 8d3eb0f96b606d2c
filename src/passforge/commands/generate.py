"""Command: generate a password."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from passforge.commands._base import PfCommand
from passforge.domain.charsets import CharacterClass

if TYPE_CHECKING:
    from passforge.commands._context import AppContext
    from passforge.config.models import GeneratorConfig


def _selected_classes(
    config: GeneratorConfig,
    overrides: dict[CharacterClass, bool | None],
) -> set[CharacterClass]:
    """Apply per-class CLI switches on top of the configured defaults."""
    selected = config.enabled_classes()
    for cls, flag in overrides.items():
        if flag is True:
            selected.add(cls)
        elif flag is False:
            selected.discard(cls)
    return selected


@click.command(
    cls=PfCommand,
    examples="""\
  passforge generate
  passforge generate --length 32
  passforge generate -l 8 --no-symbols
  passforge generate --no-uppercase --no-lowercase --no-symbols --length 6
  passforge generate --copy
  passforge -q generate | passforge copy""",
)
@click.option("-l", "--length", type=int, default=None, help="Password length.")
@click.option("--uppercase/--no-uppercase", default=None, help="Include A-Z.")
@click.option("--lowercase/--no-lowercase", default=None, help="Include a-z.")
@click.option("--numbers/--no-numbers", default=None, help="Include 0-9.")
@click.option("--symbols/--no-symbols", default=None, help="Include punctuation symbols.")
@click.option("--copy", "copy_", is_flag=True, help="Also copy the password to the clipboard.")
@click.pass_obj
def generate(
    app: AppContext,
    length: int | None,
    uppercase: bool | None,
    lowercase: bool | None,
    numbers: bool | None,
    symbols: bool | None,
    copy_: bool,
) -> None:
    """Generate a random password from the selected character types."""
    from passforge.domain.rng import get_random_source
    from passforge.services.generator import GeneratorService

    config = app.settings.generator
    classes = _selected_classes(
        config,
        {
            CharacterClass.UPPERCASE: uppercase,
            CharacterClass.LOWERCASE: lowercase,
            CharacterClass.NUMBER: numbers,
            CharacterClass.SYMBOL: symbols,
        },
    )
    svc = GeneratorService(get_random_source(config.rng))
    result = svc.generate(length if length is not None else config.length, classes)

    if result.ok and copy_:
        from passforge.services.clipboard import ClipboardService

        copied = ClipboardService(fallback=app.settings.clipboard.fallback).copy(
            result.data["password"]
        )
        warnings = list(result.warnings)
        if not copied.ok and copied.error is not None:
            warnings.append(copied.error.message)
        result = result.model_copy(
            update={
                "data": {**result.data, "copied": copied.ok},
                "warnings": warnings,
            }
        )

    app.emit(result)
