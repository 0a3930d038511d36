import re

from semantic_primes.utils.stats import score_summary, size_distribution
from semantic_primes.utils.text import decode_entities, extract_content_words, utcnow_iso


def test_content_words_are_case_folded_and_deduplicated():
    assert extract_content_words("A Thing that is a Thing") == ["thing", "that"]


def test_non_alphabetic_characters_split_tokens():
    assert extract_content_words("self-evident; (truth) 42nd") == ["self", "evident", "truth"]


def test_stop_words_and_min_length():
    words = extract_content_words("the cat sat on the mat", {"the", "sat"})
    assert words == ["cat", "mat"]
    assert extract_content_words("go to sea", min_length=2) == ["go", "to", "sea"]


def test_decode_entities_handles_ampersand_last():
    assert decode_entities("&amp;lt;") == "&lt;"
    assert decode_entities("&apos;&quot;&gt;") == "'\">"
    assert decode_entities("plain") == "plain"


def test_utcnow_iso_format():
    assert re.fullmatch(r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}Z", utcnow_iso())


def test_score_summary():
    assert score_summary([]) == {"count": 0}
    summary = score_summary([10.0, 20.0, 30.0])
    assert summary["count"] == 3
    assert summary["mean"] == 20.0
    assert summary["p50"] == 20.0
    assert summary["min"] == 10.0 and summary["max"] == 30.0


def test_size_distribution():
    assert size_distribution([]) == {"components": 0, "largest": 0, "mean_size": 0.0}
    assert size_distribution([2, 4]) == {"components": 2, "largest": 4, "mean_size": 3.0}
