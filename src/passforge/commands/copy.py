"""Command: copy text (a password) to the clipboard."""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING

import click

from passforge.commands._base import PfCommand

if TYPE_CHECKING:
    from passforge.commands._context import AppContext


@click.command(
    cls=PfCommand,
    examples="""\
  passforge copy 'k3#Vq9!zLm'
  passforge -q generate | passforge copy""",
)
@click.argument("text", required=False)
@click.pass_obj
def copy(app: AppContext, text: str | None) -> None:
    """Copy TEXT (or stdin) to the clipboard."""
    from passforge.services.clipboard import ClipboardService

    if text is None:
        text = sys.stdin.read()
    app.emit(ClipboardService(fallback=app.settings.clipboard.fallback).copy(text))
