from __future__ import annotations

from typing import Callable

import pytest


def _render(definitions: dict[str, list[str]], pos: str = "n") -> list[str]:
    lines = ['<?xml version="1.0" encoding="UTF-8"?>', "<LexicalResource>", '  <Lexicon id="test">']
    for i, word in enumerate(definitions, start=1):
        lines += [
            f'    <LexicalEntry id="w-{word}">',
            f'      <Lemma writtenForm="{word}" partOfSpeech="{pos}"/>',
            f'      <Sense id="s-{word}" synset="syn-{i}"/>',
            "    </LexicalEntry>",
        ]
    for i, (word, texts) in enumerate(definitions.items(), start=1):
        lines.append(f'    <Synset id="syn-{i}" ili="i{i}" partOfSpeech="{pos}">')
        lines += [f"      <Definition>{text}</Definition>" for text in texts]
        lines.append("    </Synset>")
    lines += ["  </Lexicon>", "</LexicalResource>"]
    return [line + "\n" for line in lines]


@pytest.fixture
def make_corpus() -> Callable[..., list[str]]:
    """Render ``{word: [definition, ...]}`` as corpus lines, one concept set per word."""

    return _render


@pytest.fixture
def toy_corpus(make_corpus) -> list[str]:
    return make_corpus(
        {
            "entity": ["a thing"],
            "thing": ["an entity"],
            "body": ["the physical structure of an entity"],
        }
    )
