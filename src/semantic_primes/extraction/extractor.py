"""Single-pass extraction of lexical entries and concept sets.

The corpus is a tag-based lexical database export read line by line. Parse
state is carried across lines because definitions and opening tags may span
several of them; nothing but the two derived tables is kept in memory.
"""
from __future__ import annotations

import logging
from typing import Iterable

from tqdm import tqdm

from ..common.types import ConceptSet, CorpusTables, Lemma, LexicalEntry
from ..utils.text import decode_entities
from .markup import (
    find_open_tag,
    find_span,
    find_unterminated_tag,
    has_close_tag,
    has_open_marker,
    is_self_closing,
    iter_open_tags,
    parse_attributes,
    span_head,
    span_tail,
    split_tag_end,
)

logger = logging.getLogger(__name__)

PROGRESS_EVERY = 200_000

ENTRY_TAG = "LexicalEntry"
LEMMA_TAG = "Lemma"
SENSE_TAG = "Sense"
SYNSET_TAG = "Synset"
DEFINITION_TAG = "Definition"
EXAMPLE_TAG = "Example"

TRACKED_TAGS = (ENTRY_TAG, LEMMA_TAG, SENSE_TAG, SYNSET_TAG)


class EntityExtractor:
    """Stateful line scanner producing :class:`CorpusTables`.

    Feed lines in corpus order with :meth:`feed`, then call :meth:`close`.
    Unrecognized or malformed lines are ignored and never yield a partial
    entity. Opening tags and definitions may span several lines.
    """

    def __init__(self) -> None:
        self.tables = CorpusTables()
        self._entry: LexicalEntry | None = None
        self._concept: ConceptSet | None = None
        self._definition_parts: list[str] | None = None
        # Tag name plus the attribute text seen so far for an unfinished tag.
        self._pending_tag: tuple[str, list[str]] | None = None

    @property
    def in_definition(self) -> bool:
        return self._definition_parts is not None

    def feed(self, line: str) -> None:
        line = line.rstrip("\r\n")
        self.tables.line_count += 1

        rest: str | None = line
        if self._pending_tag is not None:
            rest = self._continue_tag(line)

        if rest is not None:
            self._scan_entry(rest)
            self._scan_concept_set(rest)
            pending = find_unterminated_tag(rest, TRACKED_TAGS)
            if pending is not None:
                self._pending_tag = (pending[0], [pending[1]])

        if self.tables.line_count % PROGRESS_EVERY == 0:
            logger.debug(
                "Parsed %d lines", self.tables.line_count,
                extra={
                    "entries": self.tables.entry_count,
                    "concept_sets": len(self.tables.concept_sets),
                },
            )

    def close(self) -> CorpusTables:
        if self._definition_parts is not None:
            logger.debug("Dropping unterminated definition at end of input")
        if self._entry is not None or self._concept is not None or self._pending_tag is not None:
            logger.debug("Dropping unterminated record at end of input")
        self._entry = None
        self._concept = None
        self._definition_parts = None
        self._pending_tag = None
        return self.tables

    # -- split tags ------------------------------------------------------

    def _continue_tag(self, line: str) -> str | None:
        """Extend the pending tag with *line*; return the text after its ``>``."""

        name, parts = self._pending_tag
        split = split_tag_end(line)
        if split is None:
            parts.append(line)
            return None

        head, rest = split
        parts.append(head)
        self._pending_tag = None
        raw = " ".join(parts)
        self._open_tag(name, parse_attributes(raw), self_closing=raw.rstrip().endswith("/"))
        return rest

    def _open_tag(self, name: str, attrs: dict[str, str], *, self_closing: bool = False) -> None:
        if name == ENTRY_TAG:
            self._start_entry(attrs)
        elif name == LEMMA_TAG:
            self._add_lemma(attrs)
        elif name == SENSE_TAG:
            self._add_sense(attrs)
        elif name == SYNSET_TAG and not self_closing:
            self._start_concept(attrs)

    # -- lexical entries -------------------------------------------------

    def _scan_entry(self, line: str) -> None:
        attrs = find_open_tag(line, ENTRY_TAG)
        if attrs is not None:
            self._start_entry(attrs)

        if self._entry is not None:
            for attrs in iter_open_tags(line, LEMMA_TAG):
                self._add_lemma(attrs)
            for attrs in iter_open_tags(line, SENSE_TAG):
                self._add_sense(attrs)

        if has_close_tag(line, ENTRY_TAG) and self._entry is not None:
            if self._entry.lemmas:
                self.tables.add_entry(self._entry)
            self._entry = None

    def _start_entry(self, attrs: dict[str, str]) -> None:
        entry_id = attrs.get("id")
        self._entry = LexicalEntry(entry_id) if entry_id else None

    def _add_lemma(self, attrs: dict[str, str]) -> None:
        form = attrs.get("writtenForm")
        if form and self._entry is not None:
            self._entry.lemmas.append(Lemma(form, attrs.get("partOfSpeech", "")))

    def _add_sense(self, attrs: dict[str, str]) -> None:
        target = attrs.get("synset")
        if target and self._entry is not None:
            self._entry.senses.append(target)

    # -- concept sets ----------------------------------------------------

    def _scan_concept_set(self, line: str) -> None:
        attrs = find_open_tag(line, SYNSET_TAG)
        if attrs is not None and not is_self_closing(line, SYNSET_TAG):
            self._start_concept(attrs)

        self._scan_definition(line)

        example = find_span(line, EXAMPLE_TAG)
        if example is not None and self._concept is not None:
            self._concept.examples.append(example)

        if has_close_tag(line, SYNSET_TAG) and self._concept is not None:
            concept = self._concept
            if concept.definitions:
                self.tables.concept_sets[concept.concept_id] = concept
            self._concept = None

    def _start_concept(self, attrs: dict[str, str]) -> None:
        concept_id = attrs.get("id")
        if concept_id:
            self._concept = ConceptSet(
                concept_id=concept_id,
                part_of_speech=attrs.get("partOfSpeech", ""),
                ili=attrs.get("ili") or None,
            )
        else:
            self._concept = None

    def _scan_definition(self, line: str) -> None:
        if has_open_marker(line, DEFINITION_TAG):
            self._definition_parts = None
            text = find_span(line, DEFINITION_TAG)
            if text is not None:
                self._add_definition(text)
            else:
                self._definition_parts = [span_head(line, DEFINITION_TAG)]
        elif self._definition_parts is not None:
            tail = span_tail(line, DEFINITION_TAG)
            if tail is None:
                self._definition_parts.append(decode_entities(line))
            else:
                self._definition_parts.append(tail)
                text = "\n".join(self._definition_parts)
                self._definition_parts = None
                self._add_definition(text)

    def _add_definition(self, text: str) -> None:
        if self._concept is not None:
            self._concept.definitions.append(text)


def extract(lines: Iterable[str], *, show_progress: bool = False) -> CorpusTables:
    """Consume *lines* once and return the concept-lemma and concept-set tables.

    Read errors raised by the underlying stream propagate to the caller.
    """

    extractor = EntityExtractor()
    iterator = tqdm(lines, desc="Parsing corpus", unit="line") if show_progress else lines
    for line in iterator:
        extractor.feed(line)
    tables = extractor.close()

    logger.info(
        "Corpus parsed",
        extra={
            "lines": tables.line_count,
            "entries": tables.entry_count,
            "concept_sets": len(tables.concept_sets),
        },
    )
    return tables


__all__ = ["EntityExtractor", "extract"]
