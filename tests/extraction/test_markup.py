from semantic_primes.extraction.markup import (
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


def test_parse_attributes_decodes_values():
    attrs = parse_attributes('id="a&amp;b" dc:type="x" broken=y')
    assert attrs == {"id": "a&b", "dc:type": "x"}


def test_find_open_tag_requires_exact_name():
    assert find_open_tag('<SenseRelation relType="x"/>', "Sense") is None
    assert find_open_tag('<Sense id="s" synset="y"/>', "Sense") == {"id": "s", "synset": "y"}


def test_self_closing_detection():
    assert is_self_closing('<Synset id="a"/>', "Synset")
    assert not is_self_closing('<Synset id="a">', "Synset")


def test_spans():
    assert find_span("<Definition>text here</Definition>", "Definition") == "text here"
    assert find_span("<Definition>open only", "Definition") is None
    assert has_open_marker("  <Definition>", "Definition")
    assert not has_open_marker("<Definitions>", "Definition")
    assert span_head("  <Definition>starts here", "Definition") == "starts here"
    assert span_tail("ends here</Definition>", "Definition") == "ends here"
    assert span_tail("no close", "Definition") is None
    assert has_close_tag("</Synset>", "Synset")
    assert not has_close_tag("</SynsetRelation>", "Synset")


def test_iter_open_tags_finds_every_tag():
    line = '<Sense id="a" synset="s1"/><Sense id="b" synset="s2"/><SenseRelation relType="x"/>'
    assert [attrs["synset"] for attrs in iter_open_tags(line, "Sense")] == ["s1", "s2"]


def test_unterminated_tags():
    assert find_unterminated_tag('<Synset id="s1"', ["Lemma", "Synset"]) == ("Synset", 'id="s1"')
    assert find_unterminated_tag("  <LexicalEntry", ["LexicalEntry"]) == ("LexicalEntry", "")
    assert find_unterminated_tag('<Synset id="s1">', ["Synset"]) is None
    assert find_unterminated_tag('<SynsetRelation relType="x"', ["Synset"]) is None
    assert find_open_tag('<Synset id="s1"', "Synset") is None

    assert split_tag_end('   partOfSpeech="n">rest') == ('   partOfSpeech="n"', "rest")
    assert split_tag_end('   ili="i1"') is None
