from __future__ import annotations

from typing import List, Tuple

import pytest

from graphrank.data.types import Sentence, Token


def make_tokens(tagged: str, start: int = 0) -> List[Token]:
    """Build tokens from "word/TAG word/TAG ..." text."""
    out = []
    for i, item in enumerate(tagged.split()):
        word, sep, tag = item.rpartition("/")
        if not sep or not word:
            raise ValueError(f"untagged token: {item!r}")
        out.append(Token(text=word, tag=tag, order=start + i))
    return out


class TaggedAnalyzer:
    """Analyzer over pre-tagged text; a token tagged "." ends a sentence."""

    def parse(self, text: str, merge_quotations: bool = False) -> Tuple[List[Sentence], List[Token]]:
        tokens = make_tokens(text)
        sentences: List[Sentence] = []
        current: List[Token] = []
        for tok in tokens:
            current.append(tok)
            if tok.tag == ".":
                sentences.append(self._sentence(current, len(sentences)))
                current = []
        if current:
            sentences.append(self._sentence(current, len(sentences)))
        return sentences, tokens

    @staticmethod
    def _sentence(tokens: List[Token], order: int) -> Sentence:
        return Sentence(raw=" ".join(t.text for t in tokens), tokens=list(tokens), order=order)


@pytest.fixture
def analyzer():
    return TaggedAnalyzer()


@pytest.fixture
def animal_text():
    return (
        "dogs/NNS bark/VBP loudly/RB ./. "
        "birds/NNS sing/VBP songs/NNS ./. "
        "the/DT cat/NN chased/VBD a/DT mouse/NN ./."
    )
