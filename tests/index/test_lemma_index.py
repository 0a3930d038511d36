"""Tests for joining entries and concept sets into the lemma index."""

from __future__ import annotations

import pytest

from semantic_primes.common.types import ConceptSet, CorpusTables, Lemma, LexicalEntry
from semantic_primes.index import LemmaIndexBuilder, build_lemma_index


def _entry(entry_id: str, forms: list[str], senses: list[str]) -> LexicalEntry:
    return LexicalEntry(entry_id, [Lemma(f, "n") for f in forms], list(senses))


def _tables() -> CorpusTables:
    tables = CorpusTables()
    tables.add_entry(_entry("e1", ["Bank"], ["c-river", "c-money"]))
    tables.add_entry(_entry("e2", ["shore"], ["c-river"]))
    tables.add_entry(_entry("e3", ["bank"], ["c-river"]))
    tables.concept_sets = {
        "c-river": ConceptSet("c-river", "n", definitions=["sloping land beside water water"]),
        "c-money": ConceptSet("c-money", "n", definitions=["a financial institution, the bank"]),
        "c-orphan": ConceptSet("c-orphan", "n", definitions=["water that nobody names"]),
    }
    return tables


def test_entries_fold_into_lowercased_concept_lemmas():
    tables = _tables()
    mapping = tables.concept_lemmas
    assert tables.entry_count == 3
    assert mapping["c-river"] == {"bank", "shore"}
    assert mapping["c-money"] == {"bank"}


def test_polysemous_words_keep_every_definition_in_order():
    index = build_lemma_index(_tables())

    records = index.definitions_for("bank")
    assert [r.concept_id for r in records] == ["c-river", "c-money"]
    assert records[0].content_words == ("sloping", "land", "beside", "water")
    assert records[1].part_of_speech == "n"
    assert [r.concept_id for r in index.definitions_for("shore")] == ["c-river"]
    assert "c-orphan" not in {r.concept_id for recs in index.definitions.values() for r in recs}


def test_term_frequency_counts_once_per_definition():
    index = build_lemma_index(_tables())

    # Repeated within one definition counts once; the unowned concept set still counts.
    assert index.frequency("water") == 2
    assert index.frequency("bank") == 1
    assert index.frequency("missing") == 0


def test_self_reference_is_textual():
    index = build_lemma_index(_tables())
    assert index.is_self_reference("bank")
    assert not index.is_self_reference("shore")
    assert index.self_references == frozenset({"bank"})


def test_stop_words_filter_content_words():
    index = build_lemma_index(_tables(), {"the", "beside"})
    assert "beside" not in index.definitions_for("shore")[0].content_words
    assert index.frequency("the") == 0


def test_frozen_index_is_read_only():
    builder = LemmaIndexBuilder()
    builder.add_concept_set(ConceptSet("c", definitions=["some text"]), ["word"])
    index = builder.freeze()

    with pytest.raises(TypeError):
        index.definitions["other"] = ()  # type: ignore[index]
    with pytest.raises(RuntimeError):
        builder.add_concept_set(ConceptSet("d", definitions=["more"]), ["x"])
    assert "word" in index and len(index) == 1
