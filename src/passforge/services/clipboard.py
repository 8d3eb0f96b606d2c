"""ClipboardService — copy a generated password to the system clipboard."""

from __future__ import annotations

import logging

from passforge.infrastructure.clipboard import ClipboardError, copy_text
from passforge.services.result import ServiceResult

logger = logging.getLogger(__name__)


class ClipboardService:
    """Copies text via pyperclip, falling back to the platform command."""

    def __init__(self, *, fallback: bool = True) -> None:
        self._fallback = fallback

    def copy(self, text: str) -> ServiceResult:
        """Copy *text* (trimmed) to the clipboard."""
        op = "copy_password"
        value = text.strip()
        if not value:
            return ServiceResult.failure(op, "NOTHING_TO_COPY", "Nothing to copy.")

        try:
            backend = copy_text(value, fallback=self._fallback)
        except ClipboardError as exc:
            logger.info("Clipboard copy failed: %s", exc)
            return ServiceResult.failure(op, "COPY_FAILED", "Failed to copy.", reason=str(exc))

        return ServiceResult(
            ok=True,
            op=op,
            data={"backend": backend, "characters": len(value)},
        )
