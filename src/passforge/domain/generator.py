"""Password generation.

Pipeline: VALIDATE → ONE PER CLASS → FILL FROM POOL → SHUFFLE → JOIN

INVARIANT: Every enabled class contributes exactly one leading draw,
even when ``length`` is smaller than the number of enabled classes.
The result length is therefore ``max(length, len(enabled_classes))``.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel

from passforge.domain.charsets import ALPHABETS, CharacterClass, combined_pool, ordered_classes

if TYPE_CHECKING:
    from passforge.domain.rng import SecureRandomSource


class GenerationError(Exception):
    """Base class for recoverable generation failures."""

    code = "GENERATION_ERROR"


class NoCharacterClassSelected(GenerationError):
    """No character class was enabled."""

    code = "NO_CHARACTER_CLASS"

    def __init__(self) -> None:
        super().__init__("Select at least one character type.")


class InvalidLength(GenerationError):
    """Requested length is below 1."""

    code = "INVALID_LENGTH"

    def __init__(self, length: int) -> None:
        super().__init__(f"Password length must be at least 1, got {length}.")
        self.length = length


class GenerationConfig(BaseModel):
    """What to generate: a length and the enabled character classes.

    Not validated on construction; :func:`generate` reports bad values
    as :class:`GenerationError` subclasses.
    """

    model_config = {"frozen": True}

    length: int
    enabled_classes: frozenset[CharacterClass]


def pick_char(chars: str, rng: SecureRandomSource) -> str:
    """Draw one character from *chars*."""
    return chars[rng.randbelow(len(chars))]


def shuffle_in_place(items: list[Any], rng: SecureRandomSource) -> None:
    """Fisher–Yates shuffle from the last index down to index 1."""
    for i in range(len(items) - 1, 0, -1):
        j = rng.randbelow(i + 1)
        items[i], items[j] = items[j], items[i]


def generate(config: GenerationConfig, rng: SecureRandomSource) -> str:
    """Generate a password for *config* using entropy from *rng*.

    Raises:
        NoCharacterClassSelected: ``config.enabled_classes`` is empty.
        InvalidLength: ``config.length`` is less than 1.
    """
    if not config.enabled_classes:
        raise NoCharacterClassSelected
    if config.length < 1:
        raise InvalidLength(config.length)

    classes = ordered_classes(config.enabled_classes)
    result = [pick_char(ALPHABETS[cls], rng) for cls in classes]

    pool = combined_pool(classes)
    while len(result) < config.length:
        result.append(pick_char(pool, rng))

    shuffle_in_place(result, rng)
    return "".join(result)


def entropy_bits(length: int, classes: frozenset[CharacterClass] | set[CharacterClass]) -> float:
    """Theoretical entropy of a *length*-character password over the pool."""
    pool_size = len(combined_pool(classes))
    if pool_size == 0 or length <= 0:
        return 0.0
    return length * math.log2(pool_size)
