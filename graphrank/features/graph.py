"""
Graph-based centrality for sentences and words.
Implements the Biased TextRank update over a dense similarity matrix and the
plain TextRank update over a sparse word co-occurrence map.
"""
from typing import Dict, Mapping, Optional

import numpy as np

DAMPING = 0.85
BIAS_WEIGHT = 0.15
# Sentences whose total edge weight is below this are treated as isolated.
MIN_OUT_WEIGHT = 1e-4


def biased_pagerank(
    edges: np.ndarray,
    bias: np.ndarray,
    iters: int = 15,
    initial: Optional[np.ndarray] = None,
) -> np.ndarray:
    """
    Runs Biased TextRank for a fixed number of sweeps.

    score'(x) = bias(x) * 0.15 + 0.85 * sum_y edge(x, y) * score(y) / out(y)

    Args:
        edges: N x N symmetric, non-negative weight matrix. The diagonal is ignored.
        bias: length-N prior pulling each node towards the focus.
        iters: Exact number of full sweeps; there is no early exit.
        initial: Starting scores (zeros when omitted).

    Returns:
        Array of N scores after the last sweep.
    """
    W = np.array(edges, dtype=float, copy=True)
    N = W.shape[0]
    if N == 0:
        return np.zeros(0)
    np.fill_diagonal(W, 0.0)
    bias = np.asarray(bias, dtype=float)

    # Edges are static, so out-weights are computed once.
    out = W.sum(axis=1)
    connected = out >= MIN_OUT_WEIGHT
    safe_out = np.where(connected, out, 1.0)

    scores = np.zeros(N) if initial is None else np.array(initial, dtype=float, copy=True)
    for _ in range(max(0, iters)):
        share = np.where(connected, scores / safe_out, 0.0)
        scores = BIAS_WEIGHT * bias + DAMPING * W.dot(share)
    return scores


def word_pagerank(
    edges: Mapping[str, Mapping[str, int]],
    nodes: Mapping[str, float],
    iters: int = 25,
) -> Dict[str, float]:
    """Plain TextRank over a word graph; returns the new score of every node.

    Nodes without any outgoing weight never contribute (exact-zero guard).
    """
    out = {word: float(sum(nbrs.values())) for word, nbrs in edges.items()}
    scores = dict(nodes)
    for _ in range(max(0, iters)):
        prev = dict(scores)
        for to in scores:
            total = 0.0
            for frm, w in edges.get(to, {}).items():
                if out.get(frm, 0.0) == 0:
                    continue
                total += w * prev[frm] / out[frm]
            scores[to] = BIAS_WEIGHT + DAMPING * total
    return scores
