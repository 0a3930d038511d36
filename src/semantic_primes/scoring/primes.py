"""Composite prime-candidacy scoring for words in circular definition chains."""
from __future__ import annotations

import logging
import math
from typing import Optional

from pydantic import BaseModel, Field

from ..graph.dependency import DependencyGraph
from ..graph.scc import ComponentAssignment, is_in_cycle
from ..index.lemma_index import LemmaIndex
from .weights import ScoringWeights

logger = logging.getLogger(__name__)


class PrimeRecord(BaseModel):
    word: str
    score: float
    scc_size: int
    has_self_loop: bool = False
    is_in_cycle: bool = True
    is_self_reference: bool = False
    reference_count: int = 0
    definition: Optional[str] = None
    part_of_speech: Optional[str] = None
    scc_sample: list[str] = Field(default_factory=list)


def score_word(
    word: str,
    *,
    scc_size: int,
    has_self_loop: bool,
    reference_count: int,
    is_self_reference: bool,
    in_cycle: bool = True,
    weights: ScoringWeights | None = None,
) -> float:
    """Return the additive prime score for *word*.

    - in_cycle: fixed base amount.
    - scc size: ``log10(size)`` scaled and capped, only for components > 1.
    - self_loop / self_reference: fixed amounts, independent of each other.
    - frequency: ``log10(count)`` scaled; zero for words never used.
    - brevity: bonus for short words, a smaller one for moderately short ones.
    """

    w = weights or ScoringWeights()
    score = 0.0

    if in_cycle:
        score += w.in_cycle

    if scc_size > 1:
        score += min(math.log10(scc_size) * w.scc_size_scale, w.scc_size_cap)

    if has_self_loop:
        score += w.self_loop

    if is_self_reference:
        score += w.self_reference

    if reference_count > 0:
        score += math.log10(reference_count) * w.frequency_scale

    if len(word) <= w.short_word_max_length:
        score += w.short_word_bonus
    elif len(word) <= w.medium_word_max_length:
        score += w.medium_word_bonus

    return score


def rank_primes(
    index: LemmaIndex,
    graph: DependencyGraph,
    assignment: ComponentAssignment,
    *,
    sample_size: int = 10,
    weights: ScoringWeights | None = None,
) -> list[PrimeRecord]:
    """Score every in-cycle word and return records by descending score.

    Words outside any circular chain are excluded. Ties keep component
    discovery order.
    """

    records: list[PrimeRecord] = []
    for word, component in assignment.items():
        if not is_in_cycle(graph, assignment, word):
            continue

        self_loop = graph.has_self_loop(word)
        self_ref = index.is_self_reference(word)
        count = index.frequency(word)
        definitions = index.definitions_for(word)
        first = definitions[0] if definitions else None

        records.append(
            PrimeRecord(
                word=word,
                score=score_word(
                    word,
                    scc_size=len(component),
                    has_self_loop=self_loop,
                    reference_count=count,
                    is_self_reference=self_ref,
                    weights=weights,
                ),
                scc_size=len(component),
                has_self_loop=self_loop,
                is_self_reference=self_ref,
                reference_count=count,
                definition=first.definition if first else None,
                part_of_speech=(first.part_of_speech or None) if first else None,
                scc_sample=list(component[:sample_size]),
            )
        )

    records.sort(key=lambda r: r.score, reverse=True)
    logger.info("Prime candidates scored", extra={"primes": len(records)})
    return records


__all__ = ["PrimeRecord", "rank_primes", "score_word"]
