"""Strongly connected components of the dependency graph.

Tarjan's algorithm, driven by an explicit work stack instead of recursion so
that definition chains hundreds of thousands of words deep cannot exhaust the
interpreter's call stack. All traversal state (indices, low-links, component
stack) is local to a single call.
"""
from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping, Sequence

from tqdm import tqdm

from .dependency import DependencyGraph

logger = logging.getLogger(__name__)


def strongly_connected_components(
    graph: DependencyGraph, *, show_progress: bool = False
) -> list[list[str]]:
    """Return the SCCs of *graph* as a partition of its nodes.

    Components are emitted in the order Tarjan's algorithm completes them
    (reverse topological order of the condensation). Members appear in the
    order they were popped from the component stack.
    """

    index_of: dict[str, int] = {}
    lowlink: dict[str, int] = {}
    on_stack: set[str] = set()
    component_stack: list[str] = []
    components: list[list[str]] = []
    counter = 0

    roots = tqdm(graph, desc="Finding SCCs", unit="word", total=len(graph)) if show_progress else graph

    for root in roots:
        if root in index_of:
            continue

        index_of[root] = lowlink[root] = counter
        counter += 1
        component_stack.append(root)
        on_stack.add(root)
        # Each frame is a node plus the iterator over its remaining successors.
        work: list[tuple[str, Iterator[str]]] = [(root, iter(graph.successors(root)))]

        while work:
            node, children = work[-1]
            for child in children:
                if child not in index_of:
                    index_of[child] = lowlink[child] = counter
                    counter += 1
                    component_stack.append(child)
                    on_stack.add(child)
                    work.append((child, iter(graph.successors(child))))
                    break
                if child in on_stack and index_of[child] < lowlink[node]:
                    lowlink[node] = index_of[child]
            else:
                work.pop()
                if work:
                    parent = work[-1][0]
                    if lowlink[node] < lowlink[parent]:
                        lowlink[parent] = lowlink[node]

                if lowlink[node] == index_of[node]:
                    component: list[str] = []
                    while True:
                        member = component_stack.pop()
                        on_stack.discard(member)
                        component.append(member)
                        if member == node:
                            break
                    components.append(component)

    logger.info(
        "Strongly connected components found",
        extra={
            "components": len(components),
            "non_trivial": sum(1 for c in components if len(c) > 1),
        },
    )
    return components


class ComponentAssignment(Mapping[str, tuple[str, ...]]):
    """Mapping from every word to the members of its component (itself included)."""

    def __init__(self, components: Sequence[Sequence[str]]) -> None:
        self._components = [tuple(c) for c in components]
        self._by_word: dict[str, tuple[str, ...]] = {}
        for component in self._components:
            for word in component:
                self._by_word[word] = component

    def __getitem__(self, word: str) -> tuple[str, ...]:
        return self._by_word[word]

    def __iter__(self) -> Iterator[str]:
        return iter(self._by_word)

    def __len__(self) -> int:
        return len(self._by_word)

    @property
    def components(self) -> list[tuple[str, ...]]:
        return list(self._components)

    def size(self, word: str) -> int:
        return len(self._by_word.get(word, ()))

    def same_component(self, a: str, b: str) -> bool:
        component = self._by_word.get(a)
        return component is not None and component is self._by_word.get(b)

    def non_trivial(self) -> list[tuple[str, ...]]:
        return [c for c in self._components if len(c) > 1]

    def size_histogram(self) -> dict[int, int]:
        histogram: dict[int, int] = {}
        for component in self._components:
            histogram[len(component)] = histogram.get(len(component), 0) + 1
        return dict(sorted(histogram.items()))


def assign_components(
    graph: DependencyGraph, *, show_progress: bool = False
) -> ComponentAssignment:
    """Decompose *graph* and index the result by word."""

    assignment = ComponentAssignment(
        strongly_connected_components(graph, show_progress=show_progress)
    )
    logger.info(
        "Words in circular definitions",
        extra={"words_in_cycles": count_words_in_cycles(graph, assignment)},
    )
    return assignment


def is_in_cycle(graph: DependencyGraph, assignment: ComponentAssignment, word: str) -> bool:
    return assignment.size(word) > 1 or graph.has_self_loop(word)


def count_words_in_cycles(graph: DependencyGraph, assignment: ComponentAssignment) -> int:
    return sum(1 for word in assignment if is_in_cycle(graph, assignment, word))


__all__ = [
    "ComponentAssignment",
    "assign_components",
    "count_words_in_cycles",
    "is_in_cycle",
    "strongly_connected_components",
]
