"""GeneratorService — password generation wrapped in ServiceResult.

Pipeline: BUILD CONFIG → GENERATE → ESTIMATE ENTROPY → RESPOND
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from passforge.domain.charsets import CharacterClass, ordered_classes
from passforge.domain.generator import GenerationConfig, GenerationError, entropy_bits, generate
from passforge.domain.rng import SecureRandomSource, SystemRandomSource
from passforge.services.result import ServiceResult

logger = logging.getLogger(__name__)


class GeneratorService:
    """Generates passwords from an injected secure random source."""

    def __init__(self, rng: SecureRandomSource | None = None) -> None:
        self._rng = rng or SystemRandomSource()

    def generate(self, length: int, classes: Iterable[CharacterClass]) -> ServiceResult:
        """Generate one password of *length* from the enabled *classes*."""
        op = "generate_password"
        enabled = frozenset(classes)
        config = GenerationConfig(length=length, enabled_classes=enabled)

        try:
            password = generate(config, self._rng)
        except GenerationError as exc:
            logger.debug("Generation rejected: %s", exc.code)
            return ServiceResult.failure(op, exc.code, str(exc), length=length)

        # Never log the password itself.
        logger.debug(
            "Generated password: length=%d classes=%s",
            len(password),
            ",".join(ordered_classes(enabled)),
        )
        warnings: list[str] = []
        if len(password) > length:
            warnings.append(
                f"Length {length} is below the {len(enabled)} selected character types; "
                f"generated {len(password)} characters."
            )
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "password": password,
                "length": len(password),
                "classes": [str(cls) for cls in ordered_classes(enabled)],
                "entropy_bits": round(entropy_bits(len(password), enabled), 2),
            },
            warnings=warnings,
        )
