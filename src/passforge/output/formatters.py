"""Output mode dispatcher.

The CLI renders ServiceResult for humans (Rich, light or dark theme),
for scripts (``--quiet``: the bare password), or for machines
(``--json``).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel

from passforge.domain.theme import Theme
from passforge.output.renderers import render_quiet, render_result

if TYPE_CHECKING:
    from passforge.services.result import ServiceResult


class OutputSettings(BaseModel):
    """How a ServiceResult should be presented."""

    model_config = {"frozen": True}

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    theme: Theme = Theme.LIGHT


def format_result(result: ServiceResult, *, settings: OutputSettings | None = None) -> str:
    """Format a ServiceResult for display.

    Precedence: JSON, then quiet, then Rich.
    """
    settings = settings or OutputSettings()
    if settings.json_output:
        return result.model_dump_json(indent=2)
    if settings.quiet:
        return render_quiet(result)
    return render_result(result, theme=settings.theme, verbose=settings.verbose)
