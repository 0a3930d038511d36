from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ScoringWeights:
    """Additive contributions to the prime score.

    Every contribution is independent of the others, so the order in which
    they are applied never changes the final score.
    """

    in_cycle: float = 50.0
    scc_size_scale: float = 15.0
    scc_size_cap: float = 30.0
    self_loop: float = 30.0
    self_reference: float = 20.0
    frequency_scale: float = 8.0
    short_word_bonus: float = 10.0
    short_word_max_length: int = 4
    medium_word_bonus: float = 5.0
    medium_word_max_length: int = 6
