from __future__ import annotations

import math
from typing import Dict, List, Sequence

from graphrank.data.types import Keyword, Token
from graphrank.errors import InsufficientKeywords
from graphrank.models.keywords.textrank import WordGraph
from graphrank.selection.candidate_pool import topk_by_score


def _by_weight(kw: Keyword) -> float:
    return kw.weight


def merge_run(run: Sequence[Keyword]) -> Keyword:
    """Fuse consecutive keywords into one phrase.

    weight = max + log10(max) - ln(min + 1)
    """
    weights = [kw.weight for kw in run]
    hi, lo = max(weights), min(weights)
    return Keyword(
        word=" ".join(kw.word for kw in run),
        weight=hi + math.log10(hi) - math.log(lo + 1),
    )


def merge_keywords(selected: Sequence[Keyword], tokens: Sequence[Token]) -> List[Keyword]:
    """Scan ``tokens`` for runs of two or more selected keywords and return the
    new multi-word keywords, in the order they were first found."""
    by_word: Dict[str, Keyword] = {kw.word: kw for kw in selected}
    seen = set(by_word)
    merged: List[Keyword] = []
    run: List[Keyword] = []

    def flush() -> None:
        if len(run) > 1:
            kw = merge_run(run)
            if kw.word not in seen:
                seen.add(kw.word)
                merged.append(kw)
        run.clear()

    for tok in sorted(tokens, key=lambda t: t.order):
        kw = by_word.get(tok.text)
        if kw is not None:
            run.append(kw)
        else:
            flush()
    flush()
    return merged


def select_keywords(
    graph: WordGraph,
    tokens: Sequence[Token],
    words: int = -1,
    merge: bool = True,
) -> List[Keyword]:
    """Return the ``words`` highest-ranked keywords, optionally with merged phrases.

    A negative ``words`` selects a third of the ranked words.
    """
    available = len(graph.nodes)
    if words > available:
        raise InsufficientKeywords(words, available)
    if words < 0:
        words = available // 3

    # dict order is first-seen order, which breaks weight ties
    pool = [Keyword(word=w, weight=s) for w, s in graph.nodes.items()]
    pool = topk_by_score(pool, words, key=_by_weight)
    if merge:
        pool = pool + merge_keywords(pool, tokens)
    return topk_by_score(pool, words, key=_by_weight)
