"""Word dependency graph and its strongly connected components."""

from __future__ import annotations

from .dependency import DependencyGraph, build_dependency_graph
from .scc import ComponentAssignment, assign_components, strongly_connected_components

__all__ = [
    "ComponentAssignment",
    "DependencyGraph",
    "assign_components",
    "build_dependency_graph",
    "strongly_connected_components",
]
