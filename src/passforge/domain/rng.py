"""Secure random sources used by the generator.

Only :mod:`secrets` backs these sources. General-purpose PRNGs such as
:mod:`random` must never be used for credentials.
"""

from __future__ import annotations

import secrets
from collections.abc import Callable
from typing import Protocol, runtime_checkable


@runtime_checkable
class SecureRandomSource(Protocol):
    """Produces uniformly distributed integers in ``[0, n)``."""

    def randbelow(self, n: int) -> int: ...


def _check_bound(n: int) -> None:
    if n <= 0:
        msg = f"Upper bound must be positive, got {n}"
        raise ValueError(msg)


class SystemRandomSource:
    """Unbiased source backed by :func:`secrets.randbelow`."""

    def randbelow(self, n: int) -> int:
        _check_bound(n)
        return secrets.randbelow(n)


class ModuloRandomSource:
    """32-bit secure draw reduced with ``% n``.

    Carries a small modulo bias for bounds that do not divide 2**32.
    Kept for byte-for-byte parity with browser-based generators that use
    ``crypto.getRandomValues(Uint32Array) % n``.
    """

    def randbelow(self, n: int) -> int:
        _check_bound(n)
        return secrets.randbits(32) % n


RANDOM_SOURCES: dict[str, Callable[[], SecureRandomSource]] = {
    "secure": SystemRandomSource,
    "modulo": ModuloRandomSource,
}


def get_random_source(name: str) -> SecureRandomSource:
    """Instantiate the random source registered under *name*."""
    factory = RANDOM_SOURCES.get(name)
    if factory is None:
        msg = f"Unknown random source: {name!r}"
        raise ValueError(msg)
    return factory()
