"""Streaming extraction of lexical entries and concept sets."""

from __future__ import annotations

from .extractor import EntityExtractor, extract

__all__ = ["EntityExtractor", "extract"]
