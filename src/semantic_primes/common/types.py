"""Record types shared by the extraction, index and graph stages."""
from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class Lemma:
    written_form: str
    part_of_speech: str = ""


@dataclass(slots=True)
class LexicalEntry:
    """A word entry: its written forms and the concept sets it has senses in."""

    entry_id: str
    lemmas: list[Lemma] = field(default_factory=list)
    senses: list[str] = field(default_factory=list)

    def normalized_forms(self) -> list[str]:
        return [lemma.written_form.lower() for lemma in self.lemmas]


@dataclass(slots=True)
class ConceptSet:
    """A group of synonymous senses with shared definitions and examples."""

    concept_id: str
    part_of_speech: str = ""
    ili: str | None = None
    definitions: list[str] = field(default_factory=list)
    examples: list[str] = field(default_factory=list)


@dataclass(frozen=True, slots=True)
class DefinitionRecord:
    """One definition as seen from a word in the lemma index.

    ``content_words`` is the de-duplicated token tuple extracted from
    ``definition``; it is shared by every word of the same concept set.
    """

    definition: str
    part_of_speech: str
    concept_id: str
    content_words: tuple[str, ...] = ()


@dataclass(slots=True)
class CorpusTables:
    """The two intermediate tables produced by a single pass over the corpus.

    Lexical entries are not kept: each one is folded into ``concept_lemmas``
    (concept-set id to the distinct lowercased lemmas referencing it) as soon
    as it closes.
    """

    concept_lemmas: dict[str, set[str]] = field(default_factory=dict)
    concept_sets: dict[str, ConceptSet] = field(default_factory=dict)
    entry_count: int = 0
    line_count: int = 0

    def add_entry(self, entry: LexicalEntry) -> None:
        forms = entry.normalized_forms()
        for concept_id in entry.senses:
            self.concept_lemmas.setdefault(concept_id, set()).update(forms)
        self.entry_count += 1


__all__ = [
    "ConceptSet",
    "CorpusTables",
    "DefinitionRecord",
    "Lemma",
    "LexicalEntry",
]
