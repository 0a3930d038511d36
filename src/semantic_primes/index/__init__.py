"""Lemma ↔ definition indexing."""

from __future__ import annotations

from .lemma_index import LemmaIndex, LemmaIndexBuilder, build_lemma_index

__all__ = ["LemmaIndex", "LemmaIndexBuilder", "build_lemma_index"]
