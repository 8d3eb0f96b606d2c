"""Character classes and their fixed alphabets.

Declaration order of :class:`CharacterClass` is the generation order.
"""

from __future__ import annotations

from collections.abc import Iterable
from enum import StrEnum


class CharacterClass(StrEnum):
    """Named categories of allowed password characters."""

    UPPERCASE = "uppercase"
    LOWERCASE = "lowercase"
    NUMBER = "number"
    SYMBOL = "symbol"


ALPHABETS: dict[CharacterClass, str] = {
    CharacterClass.UPPERCASE: "ABCDEFGHIJKLMNOPQRSTUVWXYZ",
    CharacterClass.LOWERCASE: "abcdefghijklmnopqrstuvwxyz",
    CharacterClass.NUMBER: "0123456789",
    CharacterClass.SYMBOL: "!@#$%^&*()_+[]{}|;:,.<>?",
}


def ordered_classes(classes: Iterable[CharacterClass]) -> list[CharacterClass]:
    """Return *classes* sorted into declaration order.

    Examples:
        >>> ordered_classes({CharacterClass.SYMBOL, CharacterClass.UPPERCASE})
        [<CharacterClass.UPPERCASE: 'uppercase'>, <CharacterClass.SYMBOL: 'symbol'>]
    """
    selected = set(classes)
    return [cls for cls in CharacterClass if cls in selected]


def combined_pool(classes: Iterable[CharacterClass]) -> str:
    """Concatenate the alphabets of *classes* in declaration order."""
    return "".join(ALPHABETS[cls] for cls in ordered_classes(classes))
