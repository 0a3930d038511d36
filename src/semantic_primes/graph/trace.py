"""Follow definition chains to show why a word is (or is not) circular."""
from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from .dependency import DependencyGraph

if TYPE_CHECKING:
    from ..pipeline import DiscoveryResult


class UnknownWordError(LookupError):
    """Raised when a queried word has no definition in the corpus."""

    def __init__(self, word: str) -> None:
        super().__init__(word)
        self.word = word


def dependency_path(graph: DependencyGraph, source: str, target: str) -> list[str] | None:
    """Return the shortest chain ``source -> ... -> target``, or ``None``.

    A path of length zero (``source == target``) is not considered; use
    :func:`shortest_cycle` for chains that return to their start.
    """

    if source not in graph or target not in graph:
        return None

    parents: dict[str, str] = {}
    queue: deque[str] = deque([source])
    seen = {source}
    while queue:
        node = queue.popleft()
        for nxt in graph.successors(node):
            if nxt == target:
                path = [target, node]
                while path[-1] != source:
                    path.append(parents[path[-1]])
                path.reverse()
                return path
            if nxt not in seen:
                seen.add(nxt)
                parents[nxt] = node
                queue.append(nxt)
    return None


def shortest_cycle(graph: DependencyGraph, word: str) -> list[str] | None:
    """Return the shortest definition chain leading from *word* back to itself.

    The returned list starts and ends with *word*; a self-loop yields
    ``[word, word]``.
    """

    if graph.has_self_loop(word):
        return [word, word]
    return dependency_path(graph, word, word)


@dataclass(slots=True)
class WordReport:
    word: str
    definitions: list[str] = field(default_factory=list)
    content_words: list[str] = field(default_factory=list)
    dependencies: list[str] = field(default_factory=list)
    reference_count: int = 0
    scc_size: int = 0
    has_self_loop: bool = False
    is_self_reference: bool = False
    is_in_cycle: bool = False
    cycle: list[str] | None = None
    score: float | None = None


def explain_word(result: "DiscoveryResult", word: str) -> WordReport:
    """Collect everything discovery knows about *word*.

    Raises :class:`UnknownWordError` when the word has no definition in the
    corpus.
    """

    word = word.strip().lower()
    if word not in result.index:
        raise UnknownWordError(word)

    records = result.index.definitions_for(word)
    content: dict[str, None] = {}
    for record in records:
        for token in record.content_words:
            content.setdefault(token, None)

    prime = result.record_for(word)
    return WordReport(
        word=word,
        definitions=[r.definition for r in records],
        content_words=list(content),
        dependencies=list(result.graph.successors(word)),
        reference_count=result.index.frequency(word),
        scc_size=result.assignment.size(word),
        has_self_loop=result.graph.has_self_loop(word),
        is_self_reference=result.index.is_self_reference(word),
        is_in_cycle=result.in_cycle(word),
        cycle=shortest_cycle(result.graph, word),
        score=prime.score if prime else None,
    )


__all__ = ["UnknownWordError", "WordReport", "dependency_path", "explain_word", "shortest_cycle"]
