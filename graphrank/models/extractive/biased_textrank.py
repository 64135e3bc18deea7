from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional

import numpy as np

from graphrank.data.types import Sentence
from graphrank.features.graph import biased_pagerank
from graphrank.representations.filters import TokenFilter
from graphrank.representations.similarity import Similarity

logger = logging.getLogger(__name__)

NEUTRAL_BIAS = 1.0


@dataclass
class SentenceGraph:
    """Undirected sentence graph.

    ``nodes`` are the caller's Sentence objects (not copies); ``edges`` is a
    symmetric matrix indexed by node position whose entries are either 0 or a
    similarity above the build threshold. ``bias`` holds one prior per node.
    """

    nodes: List[Sentence]
    edges: np.ndarray
    bias: np.ndarray

    def edge(self, i: int, j: int) -> float:
        return float(self.edges[i, j])


def compute_bias(
    sentences: List[Sentence],
    similarity: Similarity,
    filter: TokenFilter,
    focus: Optional[Sentence] = None,
    position_bias: bool = False,
) -> np.ndarray:
    n = len(sentences)
    if focus is not None:
        bias = np.array([similarity(focus.tokens, s.tokens, filter) for s in sentences], dtype=float)
    else:
        bias = np.full(n, NEUTRAL_BIAS)
    if position_bias and n:
        # earlier sentences get up to (n + 1) / n of their prior
        bias = bias * np.array([(n - i + 1) / n for i in range(n)])
    return bias


def build_sentence_graph(
    sentences: List[Sentence],
    similarity: Similarity,
    filter: TokenFilter,
    focus: Optional[Sentence] = None,
    threshold: float = 0.65,
    position_bias: bool = False,
) -> SentenceGraph:
    """Connect every pair of sentences whose similarity is strictly above ``threshold``."""
    n = len(sentences)
    edges = np.zeros((n, n), dtype=float)
    for i in range(n):
        for j in range(i):
            sim = similarity(sentences[i].tokens, sentences[j].tokens, filter)
            if sim > threshold:
                edges[i, j] = edges[j, i] = sim
    bias = compute_bias(sentences, similarity, filter, focus=focus, position_bias=position_bias)
    logger.debug("Sentence graph: %d nodes, %d edges", n, int(np.count_nonzero(edges)) // 2)
    return SentenceGraph(nodes=sentences, edges=edges, bias=bias)


def rank_sentences(graph: SentenceGraph, iters: int = 15) -> None:
    """Run Biased TextRank and write ``bias`` and ``score`` onto each sentence."""
    scores = biased_pagerank(graph.edges, graph.bias, iters=iters)
    for sent, bias, score in zip(graph.nodes, graph.bias, scores):
        sent.bias = float(bias)
        sent.score = float(score)
