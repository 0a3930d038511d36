"""Named-attribute scanning for markup tags.

Only the pieces of markup the extractor needs are recognized; attribute order
is never assumed and unknown attributes are ignored. An opening tag may be
split over several lines: :func:`find_unterminated_tag` reports the start of
such a tag and :func:`split_tag_end` finds where it finishes.
"""
from __future__ import annotations

import re
from collections.abc import Iterable, Iterator
from functools import lru_cache

from ..utils.text import decode_entities

_ATTR_RE = re.compile(r"""([A-Za-z_][\w:.-]*)\s*=\s*"([^"]*)\"""")


@lru_cache(maxsize=None)
def _open_tag_re(name: str) -> re.Pattern[str]:
    return re.compile(rf"<{name}\s+([^>]*)>")


@lru_cache(maxsize=None)
def _unterminated_tag_re(name: str) -> re.Pattern[str]:
    # ``<Name`` whose attributes run on past the end of the line.
    return re.compile(rf"<{name}(?:\s([^>]*))?$")


@lru_cache(maxsize=None)
def _span_re(name: str) -> re.Pattern[str]:
    return re.compile(rf"<{name}(?:\s[^>]*)?>([^<]*)</{name}>")


def parse_attributes(raw: str) -> dict[str, str]:
    """Return the decoded ``name="value"`` pairs found in *raw*."""

    return {name: decode_entities(value) for name, value in _ATTR_RE.findall(raw)}


def find_open_tag(line: str, name: str) -> dict[str, str] | None:
    """Return the attributes of the first complete ``<name ...>`` tag on *line*."""

    match = _open_tag_re(name).search(line)
    if match is None:
        return None
    return parse_attributes(match.group(1))


def iter_open_tags(line: str, name: str) -> Iterator[dict[str, str]]:
    """Yield the attributes of every complete ``<name ...>`` tag on *line*."""

    for match in _open_tag_re(name).finditer(line):
        yield parse_attributes(match.group(1))


def is_self_closing(line: str, name: str) -> bool:
    match = _open_tag_re(name).search(line)
    return bool(match and match.group(1).rstrip().endswith("/"))


def find_unterminated_tag(line: str, names: Iterable[str]) -> tuple[str, str] | None:
    """Return ``(name, raw attributes)`` for a tag left open at the end of *line*."""

    for name in names:
        match = _unterminated_tag_re(name).search(line)
        if match is not None:
            return name, match.group(1) or ""
    return None


def split_tag_end(line: str) -> tuple[str, str] | None:
    """Split a continuation line at the ``>`` ending a pending tag.

    Returns the attribute text before it and the remainder of the line, or
    ``None`` when the tag carries on past this line too.
    """

    head, sep, rest = line.partition(">")
    if not sep:
        return None
    return head, rest


def find_span(line: str, name: str) -> str | None:
    """Return the decoded text of a ``<name>text</name>`` span on one line."""

    match = _span_re(name).search(line)
    if match is None:
        return None
    return decode_entities(match.group(1))


def has_close_tag(line: str, name: str) -> bool:
    return f"</{name}>" in line


@lru_cache(maxsize=None)
def _marker_re(name: str) -> re.Pattern[str]:
    return re.compile(rf"<{name}(?:\s|>|$)")


@lru_cache(maxsize=None)
def _span_start_re(name: str) -> re.Pattern[str]:
    return re.compile(rf"<{name}(?:\s[^>]*)?>([^<]*)$")


@lru_cache(maxsize=None)
def _span_end_re(name: str) -> re.Pattern[str]:
    return re.compile(rf"([^<]*)</{name}>")


def has_open_marker(line: str, name: str) -> bool:
    return _marker_re(name).search(line) is not None


def span_head(line: str, name: str) -> str:
    """Return the decoded text following an opening tag left open on *line*."""

    match = _span_start_re(name).search(line)
    return decode_entities(match.group(1)) if match else ""


def span_tail(line: str, name: str) -> str | None:
    """Return the decoded text preceding ``</name>`` on *line*, if it closes there."""

    match = _span_end_re(name).search(line)
    return decode_entities(match.group(1)) if match else None


__all__ = [
    "find_open_tag",
    "find_span",
    "find_unterminated_tag",
    "has_close_tag",
    "has_open_marker",
    "is_self_closing",
    "iter_open_tags",
    "parse_attributes",
    "span_head",
    "span_tail",
    "split_tag_end",
]
