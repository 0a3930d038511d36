"""End-to-end discovery: corpus lines → index → graph → SCCs → ranked primes."""
from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import Iterable

from .common.config import DiscoveryConfig
from .extraction.extractor import extract
from .graph.dependency import DependencyGraph, build_dependency_graph
from .graph.scc import ComponentAssignment, assign_components, is_in_cycle
from .index.lemma_index import LemmaIndex, build_lemma_index
from .scoring.primes import PrimeRecord, rank_primes

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class DiscoveryResult:
    config: DiscoveryConfig
    index: LemmaIndex
    graph: DependencyGraph
    assignment: ComponentAssignment
    records: list[PrimeRecord]
    line_count: int = 0
    concept_set_count: int = 0
    timings: dict[str, float] = field(default_factory=dict)

    def record_for(self, word: str) -> PrimeRecord | None:
        for record in self.records:
            if record.word == word:
                return record
        return None

    def in_cycle(self, word: str) -> bool:
        return is_in_cycle(self.graph, self.assignment, word)


def discover_primes(
    lines: Iterable[str], config: DiscoveryConfig | None = None
) -> DiscoveryResult:
    """Run the full discovery pipeline over *lines*.

    The input is consumed exactly once. Any error raised while reading it
    aborts the run.
    """

    config = config or DiscoveryConfig()
    timings: dict[str, float] = {}

    start = time.perf_counter()
    tables = extract(lines, show_progress=config.show_progress)
    timings["extract"] = time.perf_counter() - start

    start = time.perf_counter()
    index = build_lemma_index(
        tables,
        config.stop_words,
        min_word_length=config.min_word_length,
        show_progress=config.show_progress,
    )
    line_count = tables.line_count
    concept_set_count = len(tables.concept_sets)
    # The raw tables are not needed once the index is frozen.
    del tables
    timings["index"] = time.perf_counter() - start

    start = time.perf_counter()
    graph = build_dependency_graph(index, show_progress=config.show_progress)
    timings["graph"] = time.perf_counter() - start

    start = time.perf_counter()
    assignment = assign_components(graph, show_progress=config.show_progress)
    timings["scc"] = time.perf_counter() - start

    start = time.perf_counter()
    records = rank_primes(
        index,
        graph,
        assignment,
        sample_size=config.sample_size,
        weights=config.weights,
    )
    timings["score"] = time.perf_counter() - start

    logger.info(
        "Discovery complete",
        extra={"primes": len(records), **{f"{k}_seconds": round(v, 3) for k, v in timings.items()}},
    )
    return DiscoveryResult(
        config=config,
        index=index,
        graph=graph,
        assignment=assignment,
        records=records,
        line_count=line_count,
        concept_set_count=concept_set_count,
        timings=timings,
    )


__all__ = ["DiscoveryResult", "discover_primes"]
