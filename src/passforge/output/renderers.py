"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO).  Renderers
are dispatched by ``result.op`` in :func:`render_result`.  Unknown ops
fall through to a generic key-value renderer.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from rich.panel import Panel
from rich.text import Text

from passforge.domain.theme import Theme
from passforge.output.console import create_console, get_output, strength_style

if TYPE_CHECKING:
    from rich.console import Console

    from passforge.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(
    result: ServiceResult,
    *,
    theme: Theme = Theme.LIGHT,
    verbose: bool = False,
) -> str:
    """Render a ServiceResult to a styled string via Rich."""
    console = create_console(theme=theme)

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode.

    A generated password is printed alone so it can be piped.
    """
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"
    if "password" in result.data:
        return str(result.data["password"])
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult, message: str | None = None) -> None:
    line = Text.assemble(("OK", "pf.ok"), (f"  {result.op}", "pf.op"))
    if message:
        line.append(f"  {message}")
    console.print(line)


def _field(console: Console, key: str, value: Any, *, style: str = "") -> None:
    console.print(Text.assemble((f"  {key}: ", "pf.key"), (str(value), style)))


# ── Renderers ─────────────────────────────────────────────────────────


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)


def _render_password(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    data = result.data
    _status_line(console, result, "Password generated.")
    console.print(
        Panel(
            Text(str(data["password"]), style="pf.password"),
            border_style="pf.border",
            expand=False,
        )
    )
    entropy = float(data.get("entropy_bits", 0.0))
    label, style = strength_style(entropy)
    _field(console, "strength", f"{label} ({entropy:.1f} bits)", style=style)
    _field(console, "length", data.get("length", ""))
    _field(console, "classes", ", ".join(data.get("classes", [])))
    copied = data.get("copied")
    if copied is not None:
        _field(console, "copied", "yes" if copied else "no")


def _render_copy(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result, "Copied to clipboard.")
    if verbose:
        _field(console, "backend", result.data.get("backend", ""))
        _field(console, "characters", result.data.get("characters", ""))


def _render_theme(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    _field(console, "theme", result.data.get("theme", ""))
    for key in ("previous", "source"):
        if key in result.data:
            _field(console, key, result.data[key])


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    msg = result.error.message if result.error else "Unknown error"
    console.print(Text.assemble(("ERROR", "pf.error"), (f"  {result.op}", "pf.op"), f"  {msg}"))
    if verbose and result.error is not None:
        _field(console, "code", result.error.code)
        for key, value in result.error.detail.items():
            _field(console, key, value)


_Renderer = Callable[..., None]

_OP_RENDERERS: dict[str, _Renderer] = {
    "generate_password": _render_password,
    "copy_password": _render_copy,
    "theme_show": _render_theme,
    "theme_set": _render_theme,
    "theme_toggle": _render_theme,
}
