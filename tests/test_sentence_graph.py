"""Sentence graph construction and Biased TextRank propagation."""

import numpy as np
import pytest

from graphrank.data.types import Sentence
from graphrank.features.graph import biased_pagerank
from graphrank.models.extractive.biased_textrank import build_sentence_graph, rank_sentences
from graphrank.representations.filters import noun_verb_filter

from conftest import make_tokens


def _sentences(*names):
    return [Sentence(raw=n, tokens=make_tokens(f"{n}/NN"), order=i) for i, n in enumerate(names)]


def table_similarity(table):
    def similarity(a, b, filter):
        key = frozenset((a[0].text, b[0].text))
        return table.get(key, 0.0)

    return similarity


@pytest.fixture
def triangle():
    table = {
        frozenset(("a", "b")): 0.9,
        frozenset(("a", "c")): 0.65,
        frozenset(("b", "c")): 1.2,
        frozenset(("f", "a")): 0.5,
        frozenset(("f", "b")): 0.0,
        frozenset(("f", "c")): 2.0,
    }
    return _sentences("a", "b", "c"), table_similarity(table)


class TestBuild:
    def test_edges_symmetric_and_thresholded(self, triangle):
        sents, sim = triangle
        g = build_sentence_graph(sents, sim, noun_verb_filter, threshold=0.65)
        assert np.allclose(g.edges, g.edges.T)
        assert g.edge(0, 1) == pytest.approx(0.9)
        assert g.edge(1, 2) == pytest.approx(1.2)
        # equal to the threshold is not enough
        assert g.edge(0, 2) == 0.0

    def test_graph_holds_caller_sentences(self, triangle):
        sents, sim = triangle
        g = build_sentence_graph(sents, sim, noun_verb_filter)
        assert all(a is b for a, b in zip(g.nodes, sents))

    def test_neutral_bias_without_focus(self, triangle):
        sents, sim = triangle
        g = build_sentence_graph(sents, sim, noun_verb_filter)
        assert g.bias.tolist() == [1.0, 1.0, 1.0]

    def test_focus_bias(self, triangle):
        sents, sim = triangle
        focus = _sentences("f")[0]
        g = build_sentence_graph(sents, sim, noun_verb_filter, focus=focus)
        assert g.bias.tolist() == pytest.approx([0.5, 0.0, 2.0])

    def test_position_bias(self, triangle):
        sents, sim = triangle
        g = build_sentence_graph(sents, sim, noun_verb_filter, position_bias=True)
        assert g.bias.tolist() == pytest.approx([4 / 3, 1.0, 2 / 3])


class TestBiasedPageRank:
    def test_isolated_graph_fixed_after_one_iteration(self):
        edges = np.zeros((3, 3))
        bias = np.full(3, 2.0)
        for iters in (1, 2, 5):
            assert biased_pagerank(edges, bias, iters=iters).tolist() == pytest.approx([0.3, 0.3, 0.3])

    def test_updates_are_synchronous(self):
        edges = np.array([[0.0, 1.0], [1.0, 0.0]])
        bias = np.array([1.0, 0.0])
        # the second node only sees the first node's score from the previous sweep
        assert biased_pagerank(edges, bias, iters=1).tolist() == pytest.approx([0.15, 0.0])
        assert biased_pagerank(edges, bias, iters=2).tolist() == pytest.approx([0.15, 0.1275])

    def test_near_zero_out_weight_is_isolated(self):
        edges = np.array([[0.0, 5e-5], [5e-5, 0.0]])
        bias = np.array([1.0, 1.0])
        assert biased_pagerank(edges, bias, iters=5).tolist() == pytest.approx([0.15, 0.15])

    def test_empty_graph(self):
        assert biased_pagerank(np.zeros((0, 0)), np.zeros(0)).tolist() == []

    def test_zero_iterations_keep_initial(self):
        edges = np.array([[0.0, 1.0], [1.0, 0.0]])
        out = biased_pagerank(edges, np.ones(2), iters=0, initial=np.array([0.4, 0.6]))
        assert out.tolist() == [0.4, 0.6]


def test_rank_writes_scores_and_bias(triangle):
    sents, sim = triangle
    focus = _sentences("f")[0]
    g = build_sentence_graph(sents, sim, noun_verb_filter, focus=focus, threshold=0.65)
    rank_sentences(g, iters=15)
    assert [s.bias for s in sents] == pytest.approx([0.5, 0.0, 2.0])
    # the hub "b" has no prior of its own but collects from both neighbours
    assert max(sents, key=lambda s: s.score).raw == "b"
    assert sents[2].score > sents[0].score
    assert all(s.score >= 0 for s in sents)
