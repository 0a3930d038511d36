"""Tests for prime candidacy scoring."""

from __future__ import annotations

import math

import pytest

from semantic_primes.common.types import ConceptSet
from semantic_primes.graph import DependencyGraph, assign_components
from semantic_primes.index import LemmaIndexBuilder
from semantic_primes.scoring.primes import rank_primes, score_word
from semantic_primes.scoring.weights import ScoringWeights


def test_score_components_are_additive():
    base = score_word("abcdefghij", scc_size=1, has_self_loop=False, reference_count=0, is_self_reference=False)
    assert base == 50.0

    assert score_word(
        "abcdefghij", scc_size=10, has_self_loop=False, reference_count=0, is_self_reference=False
    ) == pytest.approx(50 + 15)
    assert score_word(
        "abcdefghij", scc_size=10_000, has_self_loop=False, reference_count=0, is_self_reference=False
    ) == pytest.approx(50 + 30)
    assert score_word(
        "abcdefghij", scc_size=1, has_self_loop=True, reference_count=0, is_self_reference=True
    ) == pytest.approx(100)
    assert score_word(
        "abcdefghij", scc_size=1, has_self_loop=False, reference_count=100, is_self_reference=False
    ) == pytest.approx(50 + 16)


def test_brevity_bonus():
    kwargs = dict(scc_size=1, has_self_loop=False, reference_count=0, is_self_reference=False, in_cycle=False)
    assert score_word("be", **kwargs) == 10
    assert score_word("four", **kwargs) == 10
    assert score_word("sixsix", **kwargs) == 5
    assert score_word("sevenxx", **kwargs) == 0


def test_custom_weights():
    weights = ScoringWeights(in_cycle=1, short_word_bonus=0)
    assert score_word("go", scc_size=1, has_self_loop=False, reference_count=0, is_self_reference=False, weights=weights) == 1


def _index(definitions: dict[str, str]):
    builder = LemmaIndexBuilder()
    for word, text in definitions.items():
        builder.add_concept_set(ConceptSet(f"c-{word}", "n", definitions=[text]), [word])
    return builder.freeze()


def test_rank_primes_filters_and_orders():
    index = _index({"entity": "a thing", "thing": "an entity", "body": "the physical entity", "exist": "to exist"})
    graph = DependencyGraph({"entity": ["thing"], "thing": ["entity"], "body": ["entity"], "exist": ["exist"]})
    records = rank_primes(index, graph, assign_components(graph), sample_size=1)

    assert [r.word for r in records] == ["exist", "entity", "thing"]
    exist, entity, thing = records
    assert exist.has_self_loop and exist.is_self_reference and exist.scc_size == 1
    assert exist.score == pytest.approx(105)
    assert entity.score == pytest.approx(50 + math.log10(2) * 15 + math.log10(2) * 8 + 5)
    assert thing.reference_count == 1
    assert entity.definition == "a thing"
    assert entity.part_of_speech == "n"
    assert len(entity.scc_sample) == 1
    assert all(r.is_in_cycle for r in records)


def test_missing_definition_is_omitted():
    graph = DependencyGraph({"a": ["a"]})
    records = rank_primes(_index({}), graph, assign_components(graph))
    assert records[0].definition is None
    assert "definition" not in records[0].model_dump(exclude_none=True)
