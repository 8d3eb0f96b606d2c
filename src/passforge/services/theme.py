"""ThemeService — read, set, and toggle the persisted display theme.

Resolution order when reading: saved preference, then the terminal's
background (``COLORFGBG``), then light. The resolved theme is written
back so later runs are stable.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from typing import TYPE_CHECKING

from passforge.domain.theme import THEME_KEY, Theme, detect_prefers_dark, parse_theme, resolve_theme
from passforge.infrastructure.preferences import PreferenceStoreError
from passforge.services.result import ServiceResult

if TYPE_CHECKING:
    from passforge.infrastructure.preferences import PreferenceStore

logger = logging.getLogger(__name__)


class ThemeService:
    """Theme preference operations over a :class:`PreferenceStore`."""

    def __init__(
        self,
        store: PreferenceStore,
        environ: Mapping[str, str] | None = None,
    ) -> None:
        self._store = store
        self._environ = os.environ if environ is None else environ

    def resolve(self) -> Theme:
        """Resolve the active theme without persisting it.

        Raises:
            PreferenceStoreError: The preferences file is unreadable.
        """
        saved = self._store.get(THEME_KEY)
        return resolve_theme(saved, prefers_dark=detect_prefers_dark(self._environ))

    def current(self) -> ServiceResult:
        """Report the active theme, persisting it if it was not saved."""
        op = "theme_show"
        try:
            saved = parse_theme(self._store.get(THEME_KEY))
            theme = self.resolve()
            if saved is None:
                self._store.set(THEME_KEY, theme.value)
        except PreferenceStoreError as exc:
            return ServiceResult.failure(op, "PREFERENCES_ERROR", str(exc))
        return ServiceResult(
            ok=True,
            op=op,
            data={"theme": theme.value, "source": "saved" if saved else "detected"},
        )

    def set(self, value: str) -> ServiceResult:
        """Persist *value* (``light`` or ``dark``) as the theme."""
        op = "theme_set"
        theme = parse_theme(value)
        if theme is None:
            return ServiceResult.failure(
                op,
                "INVALID_THEME",
                f"Unknown theme {value!r}; expected 'light' or 'dark'.",
            )
        return self._apply(op, theme)

    def toggle(self) -> ServiceResult:
        """Switch between light and dark."""
        op = "theme_toggle"
        try:
            current = self.resolve()
        except PreferenceStoreError as exc:
            return ServiceResult.failure(op, "PREFERENCES_ERROR", str(exc))
        return self._apply(op, current.toggled(), previous=current)

    def _apply(self, op: str, theme: Theme, *, previous: Theme | None = None) -> ServiceResult:
        try:
            self._store.set(THEME_KEY, theme.value)
        except PreferenceStoreError as exc:
            return ServiceResult.failure(op, "PREFERENCES_ERROR", str(exc))
        logger.debug("Theme set to %s", theme.value)
        data = {"theme": theme.value}
        if previous is not None:
            data["previous"] = previous.value
        return ServiceResult(ok=True, op=op, data=data)
