"""Directed word-dependency graph derived from definition text.

An edge ``A -> B`` means one of A's definitions uses the content word B and
B is itself defined in the corpus.
"""
from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Mapping

from tqdm import tqdm

from ..index.lemma_index import LemmaIndex

logger = logging.getLogger(__name__)


class DependencyGraph:
    """Immutable adjacency structure keyed by word.

    Successors keep the order in which they were first seen so traversals are
    reproducible across runs.
    """

    __slots__ = ("_edges", "_self_loops", "_edge_count")

    def __init__(self, edges: Mapping[str, Iterable[str]]) -> None:
        adjacency: dict[str, tuple[str, ...]] = {}
        self_loops: set[str] = set()
        edge_count = 0
        for word, targets in edges.items():
            # dict.fromkeys gives set semantics with a stable order.
            deps = tuple(dict.fromkeys(t for t in targets if t in edges))
            adjacency[word] = deps
            edge_count += len(deps)
            if word in deps:
                self_loops.add(word)
        self._edges = adjacency
        self._self_loops = frozenset(self_loops)
        self._edge_count = edge_count

    def __contains__(self, word: object) -> bool:
        return word in self._edges

    def __len__(self) -> int:
        return len(self._edges)

    def __iter__(self) -> Iterator[str]:
        return iter(self._edges)

    @property
    def edge_count(self) -> int:
        return self._edge_count

    @property
    def self_loops(self) -> frozenset[str]:
        return self._self_loops

    def successors(self, word: str) -> tuple[str, ...]:
        return self._edges.get(word, ())

    def has_edge(self, source: str, target: str) -> bool:
        return target in self._edges.get(source, ())

    def has_self_loop(self, word: str) -> bool:
        return word in self._self_loops

    def edges(self) -> Iterator[tuple[str, str]]:
        for source, targets in self._edges.items():
            for target in targets:
                yield source, target


def build_dependency_graph(index: LemmaIndex, *, show_progress: bool = False) -> DependencyGraph:
    """Install, for every indexed word, the defined words its definitions use."""

    words: Iterable[str] = index
    if show_progress:
        words = tqdm(words, desc="Building dependency graph", unit="word", total=len(index))

    edges: dict[str, list[str]] = {}
    for word in words:
        deps: dict[str, None] = {}
        for record in index.definitions_for(word):
            for token in record.content_words:
                if token in index:
                    deps.setdefault(token, None)
        edges[word] = list(deps)

    graph = DependencyGraph(edges)
    logger.info(
        "Dependency graph built",
        extra={
            "nodes": len(graph),
            "edges": graph.edge_count,
            "self_loops": len(graph.self_loops),
        },
    )
    return graph


__all__ = ["DependencyGraph", "build_dependency_graph"]
