"""End-to-end discovery over small in-memory corpora."""

from __future__ import annotations

from semantic_primes import DiscoveryConfig, discover_primes


def test_toy_corpus_finds_the_entity_thing_cycle(toy_corpus):
    result = discover_primes(toy_corpus)

    assert [r.word for r in result.records] == ["entity", "thing"]
    assert all(r.scc_size == 2 for r in result.records)
    assert set(result.records[0].scc_sample) == {"entity", "thing"}
    assert result.record_for("body") is None
    assert not result.in_cycle("body")
    assert result.concept_set_count == 3
    assert result.line_count == len(toy_corpus)
    assert set(result.timings) == {"extract", "index", "graph", "scc", "score"}


def test_verbatim_self_definition_is_a_prime(make_corpus):
    result = discover_primes(make_corpus({"exist": ["to exist"], "rock": ["a stone"]}))

    record = result.record_for("exist")
    assert record is not None
    assert record.scc_size == 1
    assert record.has_self_loop
    assert record.is_self_reference
    assert result.record_for("rock") is None


def test_every_record_is_in_a_cycle(make_corpus):
    lines = make_corpus(
        {
            "time": ["a time when something happens"],
            "when": ["at what time"],
            "happens": ["comes about"],
            "about": ["concerning something"],
            "something": ["a thing"],
            "thing": ["something that exists"],
        }
    )
    result = discover_primes(lines)

    for record in result.records:
        assert record.scc_size > 1 or result.graph.has_self_loop(record.word)
    scores = [r.score for r in result.records]
    assert scores == sorted(scores, reverse=True)


def test_stop_words_change_the_graph(make_corpus):
    lines = make_corpus({"the": ["the article"], "article": ["a word like the"]})

    assert discover_primes(lines).record_for("the") is not None
    filtered = discover_primes(lines, DiscoveryConfig(stop_words={"the"}))
    assert filtered.record_for("the") is None


def test_pipeline_is_idempotent(make_corpus):
    lines = make_corpus(
        {
            "big": ["large in size"],
            "large": ["big in size"],
            "size": ["how big or large something is"],
            "something": ["a thing"],
            "thing": ["something"],
        }
    )
    first = discover_primes(lines)
    second = discover_primes(iter(lines))

    def partition(result):
        return {frozenset(c) for c in result.assignment.components}

    assert partition(first) == partition(second)
    assert [(r.word, r.score) for r in first.records] == [(r.word, r.score) for r in second.records]
