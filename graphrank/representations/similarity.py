from __future__ import annotations

import math
from typing import Callable, Sequence, Set

from nltk.stem.snowball import SnowballStemmer

from graphrank.data.types import Token
from graphrank.representations.filters import TokenFilter

Normalizer = Callable[[str], str]
Similarity = Callable[[Sequence[Token], Sequence[Token], TokenFilter], float]

_STEMMER = SnowballStemmer("english")


def default_normalizer(text: str) -> str:
    """Lowercase and Porter2-stem a single word."""
    return _STEMMER.stem(text.lower())


def _canonical_pair(a: Sequence[Token], b: Sequence[Token]):
    # Overlap counting depends on which sequence is scanned first; fix the order
    # by content so that swapping the arguments gives the same result.
    key_a = [(t.text, t.tag) for t in a]
    key_b = [(t.text, t.tag) for t in b]
    return (a, b) if key_a <= key_b else (b, a)


def make_similarity(normalizer: Normalizer = default_normalizer) -> Similarity:
    """Build a sentence similarity function around ``normalizer``.

    The returned function counts how many filtered tokens repeat a normalized
    form already seen in the concatenation of both sequences, and divides that
    overlap by ``log10(|a|) + log10(|b|)``. Sequences shorter than two tokens
    have no meaningful denominator and score 0.
    """

    def similarity(a: Sequence[Token], b: Sequence[Token], filter: TokenFilter) -> float:
        if len(a) < 2 or len(b) < 2:
            return 0.0
        denom = math.log10(len(a)) + math.log10(len(b))
        if not math.isfinite(denom) or denom <= 0:
            return 0.0

        first, second = _canonical_pair(a, b)
        seen: Set[str] = set()
        overlap = 0
        for tok in list(first) + list(second):
            norm = normalizer(tok.text)
            if norm in seen:
                if filter(tok):
                    overlap += 1
            else:
                seen.add(norm)
        return overlap / denom

    return similarity


default_similarity = make_similarity()
