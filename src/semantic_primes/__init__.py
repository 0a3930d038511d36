"""Discovery of semantic prime candidates from circular dictionary definitions."""

from __future__ import annotations

from .common.config import DiscoveryConfig
from .pipeline import DiscoveryResult, discover_primes
from .scoring.primes import PrimeRecord
from .scoring.weights import ScoringWeights

__all__ = [
    "DiscoveryConfig",
    "DiscoveryResult",
    "PrimeRecord",
    "ScoringWeights",
    "discover_primes",
]
