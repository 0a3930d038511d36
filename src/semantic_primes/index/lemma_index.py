"""Join concept-set lemmas and definitions into a word → definitions index."""
from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Collection, Iterable, Iterator, Mapping
from types import MappingProxyType

from tqdm import tqdm

from ..common.types import ConceptSet, CorpusTables, DefinitionRecord
from ..utils.text import extract_content_words

logger = logging.getLogger(__name__)


class LemmaIndex:
    """Read-only view over the word → definitions mapping and its statistics.

    Instances are produced by :class:`LemmaIndexBuilder.freeze`; the mappings
    exposed here cannot be mutated.
    """

    def __init__(
        self,
        definitions: dict[str, tuple[DefinitionRecord, ...]],
        term_frequency: dict[str, int],
        self_references: frozenset[str],
    ) -> None:
        self._definitions = MappingProxyType(definitions)
        self._term_frequency = MappingProxyType(term_frequency)
        self._self_references = self_references

    def __contains__(self, word: object) -> bool:
        return word in self._definitions

    def __len__(self) -> int:
        return len(self._definitions)

    def __iter__(self) -> Iterator[str]:
        return iter(self._definitions)

    @property
    def definitions(self) -> Mapping[str, tuple[DefinitionRecord, ...]]:
        return self._definitions

    @property
    def term_frequency(self) -> Mapping[str, int]:
        return self._term_frequency

    @property
    def self_references(self) -> frozenset[str]:
        return self._self_references

    def definitions_for(self, word: str) -> tuple[DefinitionRecord, ...]:
        return self._definitions.get(word, ())

    def frequency(self, word: str) -> int:
        return self._term_frequency.get(word, 0)

    def is_self_reference(self, word: str) -> bool:
        return word in self._self_references


class LemmaIndexBuilder:
    """Mutable accumulator used while folding concept sets into the index."""

    def __init__(
        self,
        stop_words: Collection[str] = frozenset(),
        *,
        min_word_length: int = 3,
    ) -> None:
        self.stop_words = stop_words
        self.min_word_length = min_word_length
        self._definitions: dict[str, list[DefinitionRecord]] = {}
        self._term_frequency: Counter[str] = Counter()
        self._self_references: set[str] = set()
        self._frozen = False

    def add_concept_set(self, concept: ConceptSet, lemmas: Collection[str]) -> None:
        if self._frozen:
            raise RuntimeError("LemmaIndexBuilder has already been frozen")

        for definition in concept.definitions:
            content_words = extract_content_words(
                definition, self.stop_words, min_length=self.min_word_length
            )
            record = DefinitionRecord(
                definition=definition,
                part_of_speech=concept.part_of_speech,
                concept_id=concept.concept_id,
                content_words=tuple(content_words),
            )
            present = set(content_words)
            for lemma in lemmas:
                self._definitions.setdefault(lemma, []).append(record)
                if lemma in present:
                    self._self_references.add(lemma)

            # Counted once per definition, whether or not any word owns it.
            self._term_frequency.update(content_words)

    def freeze(self) -> LemmaIndex:
        self._frozen = True
        return LemmaIndex(
            {word: tuple(records) for word, records in self._definitions.items()},
            dict(self._term_frequency),
            frozenset(self._self_references),
        )


def build_lemma_index(
    tables: CorpusTables,
    stop_words: Collection[str] = frozenset(),
    *,
    min_word_length: int = 3,
    show_progress: bool = False,
) -> LemmaIndex:
    """Build the lemma index and term frequencies from one corpus pass."""

    builder = LemmaIndexBuilder(stop_words, min_word_length=min_word_length)

    concepts: Iterable[ConceptSet] = tables.concept_sets.values()
    if show_progress:
        concepts = tqdm(concepts, desc="Indexing definitions", unit="synset", total=len(tables.concept_sets))
    for concept in concepts:
        if not concept.definitions:
            continue
        lemmas = sorted(tables.concept_lemmas.get(concept.concept_id, ()))
        builder.add_concept_set(concept, lemmas)

    index = builder.freeze()
    logger.info(
        "Lemma index built",
        extra={
            "lemmas": len(index),
            "content_words": len(index.term_frequency),
            "self_references": len(index.self_references),
        },
    )
    return index


__all__ = [
    "LemmaIndex",
    "LemmaIndexBuilder",
    "build_lemma_index",
]
