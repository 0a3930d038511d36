"""Shared infrastructure for the semantic primes toolchain."""

from __future__ import annotations

from .config import DEFAULT_STOP_WORDS, DiscoveryConfig, get_config_paths, load_stop_words
from .types import ConceptSet, CorpusTables, DefinitionRecord, LexicalEntry, Lemma

__all__ = [
    "DEFAULT_STOP_WORDS",
    "ConceptSet",
    "CorpusTables",
    "DefinitionRecord",
    "DiscoveryConfig",
    "Lemma",
    "LexicalEntry",
    "get_config_paths",
    "load_stop_words",
]
