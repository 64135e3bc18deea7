from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Sequence

from graphrank.data.types import Token
from graphrank.features.graph import word_pagerank
from graphrank.representations.filters import TokenFilter

logger = logging.getLogger(__name__)

INITIAL_SCORE = 1.0


@dataclass
class WordGraph:
    """Undirected word co-occurrence graph keyed by token text."""

    nodes: Dict[str, float] = field(default_factory=dict)
    edges: Dict[str, Dict[str, int]] = field(default_factory=dict)

    def add_node(self, word: str) -> None:
        self.nodes[word] = INITIAL_SCORE
        self.edges.setdefault(word, {})

    def set_edge(self, a: str, b: str, weight: int) -> None:
        self.edges[a][b] = weight
        self.edges[b][a] = weight

    def edge(self, a: str, b: str) -> int:
        return self.edges.get(a, {}).get(b, 0)


def _look_back(graph: WordGraph, window: Sequence[Token], filter: TokenFilter) -> None:
    end = len(window) - 1
    current = window[end]
    for idx, prev in enumerate(window[:end]):
        if not filter(prev):
            continue
        # closer words get heavier edges; a repeated pair keeps the latest weight
        graph.set_edge(current.text, prev.text, end // (end - idx))


def build_word_graph(tokens: Sequence[Token], filter: TokenFilter, window: int = 2) -> WordGraph:
    """Insert every filtered token as a node and link it to filtered tokens in the
    ``window`` positions before it."""
    ordered: List[Token] = sorted(tokens, key=lambda t: t.order)
    graph = WordGraph()
    for i, tok in enumerate(ordered):
        if not filter(tok):
            continue
        graph.add_node(tok.text)
        if i >= window:
            _look_back(graph, ordered[i - window: i + 1], filter)
    logger.debug("Word graph: %d nodes, window %d", len(graph.nodes), window)
    return graph


def rank_words(graph: WordGraph, iters: int = 25) -> None:
    graph.nodes.update(word_pagerank(graph.edges, graph.nodes, iters=iters))
