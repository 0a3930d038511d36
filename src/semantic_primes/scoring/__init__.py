"""Prime candidacy scoring."""

from __future__ import annotations

__all__ = [
    "primes",
    "weights",
]
