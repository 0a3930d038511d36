"""Text utilities for definition analysis."""
from __future__ import annotations

import re
from collections.abc import Collection
from datetime import datetime, timezone

_NON_ALPHA_RE = re.compile(r"[^a-z\s]")

# ``&amp;`` must be decoded last so that ``&amp;lt;`` yields ``&lt;``.
_ENTITIES = (
    ("&apos;", "'"),
    ("&quot;", '"'),
    ("&lt;", "<"),
    ("&gt;", ">"),
    ("&amp;", "&"),
)


def decode_entities(text: str) -> str:
    """Decode the five predefined markup entities."""

    if "&" not in text:
        return text
    for entity, char in _ENTITIES:
        text = text.replace(entity, char)
    return text


def extract_content_words(
    text: str,
    stop_words: Collection[str] = frozenset(),
    *,
    min_length: int = 3,
) -> list[str]:
    """Return the distinct content words of *text* in order of first use.

    The text is lowercased, every non-alphabetic character becomes whitespace,
    and tokens shorter than *min_length* or listed in *stop_words* are dropped.
    """

    words: dict[str, None] = {}
    for token in _NON_ALPHA_RE.sub(" ", text.lower()).split():
        if len(token) < min_length or token in stop_words:
            continue
        words.setdefault(token, None)
    return list(words)


def utcnow_iso() -> str:
    """Return the current UTC timestamp in ISO-8601 format with a trailing 'Z'."""

    now = datetime.now(timezone.utc).replace(microsecond=0)
    return now.isoformat().replace("+00:00", "Z")


__all__ = ["decode_entities", "extract_content_words", "utcnow_iso"]
