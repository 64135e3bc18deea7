from __future__ import annotations

import logging
from dataclasses import replace
from typing import List, Optional

from graphrank.data.analyzer import NltkAnalyzer, TextAnalyzer
from graphrank.data.types import Keyword, Sentence, Token
from graphrank.errors import AnalyzerFailure, InsufficientContent
from graphrank.models.extractive.biased_textrank import build_sentence_graph, rank_sentences
from graphrank.models.keywords.textrank import build_word_graph, rank_words
from graphrank.pipeline.config import RankConfig
from graphrank.selection.candidate_pool import restore_order, topk_by_score
from graphrank.selection.keyword_merge import select_keywords
from graphrank.utils.text import remove_leading_conjunction

logger = logging.getLogger(__name__)


def _parse(analyzer: TextAnalyzer, text: str, merge_quotations: bool, source: str):
    try:
        return analyzer.parse(text, merge_quotations)
    except Exception as exc:
        raise AnalyzerFailure(source, str(exc) or type(exc).__name__) from exc


class Document:
    """A parsed text that can be summarized and highlighted.

    The document owns the canonical sentence and token sequences. Every call to
    :meth:`summarize` or :meth:`highlight` builds its own graph over them.
    """

    def __init__(
        self,
        sentences: List[Sentence],
        tokens: List[Token],
        analyzer: TextAnalyzer,
        config: Optional[RankConfig] = None,
    ) -> None:
        self.sentences = sentences
        self.tokens = tokens
        self.analyzer = analyzer
        self.config = config or RankConfig()

    @classmethod
    def create(
        cls,
        text: str,
        analyzer: Optional[TextAnalyzer] = None,
        config: Optional[RankConfig] = None,
    ) -> "Document":
        analyzer = analyzer or NltkAnalyzer()
        config = config or RankConfig()
        sentences, tokens = _parse(analyzer, text, config.merge_quotations, "document")
        logger.debug("Parsed document: %d sentences, %d tokens", len(sentences), len(tokens))
        return cls(sentences, tokens, analyzer, config)

    def _focus_sentence(self, focus: Optional[str]) -> Optional[Sentence]:
        text = self.config.focus_text if focus is None else focus
        if text:
            sents, _ = _parse(self.analyzer, text, self.config.merge_quotations, "focus")
            # only the first sentence of a multi-sentence focus is used
            return sents[0] if sents else None
        if self.config.focus and self.sentences:
            return self.sentences[0]
        return None

    def summarize(self, length: int, focus: Optional[str] = None) -> List[Sentence]:
        """Return the ``length`` most central sentences in reading order.

        ``focus`` biases the ranking towards sentences similar to it; when it is
        empty and focus is enabled, the document's first sentence is used.
        """
        cfg = self.config
        if length > len(self.sentences):
            raise InsufficientContent(length, len(self.sentences))

        focus_sent = self._focus_sentence(focus)
        graph = build_sentence_graph(
            self.sentences,
            cfg.similarity,
            cfg.filter,
            focus=focus_sent,
            threshold=cfg.threshold,
            position_bias=cfg.position_bias,
        )
        rank_sentences(graph, iters=cfg.sentence_iterations)

        top = topk_by_score(self.sentences, max(0, length), key=lambda s: s.score)
        selected = restore_order(top, key=lambda s: s.order)
        if cfg.remove_conjunctions:
            # trim copies; the document keeps its tokens for later rankings
            selected = [replace(sent, tokens=list(sent.tokens)) for sent in selected]
            for sent in selected:
                remove_leading_conjunction(sent)
        return selected

    def highlight(self, words: int = -1, merge: bool = True) -> List[Keyword]:
        """Return the top ``words`` keywords; a negative count selects a third of them."""
        cfg = self.config
        graph = build_word_graph(self.tokens, cfg.filter, window=cfg.keyword_window)
        rank_words(graph, iters=cfg.keyword_iterations)
        return select_keywords(graph, self.tokens, words=words, merge=merge)


def summarize(
    text: str,
    length: int,
    focus: Optional[str] = None,
    analyzer: Optional[TextAnalyzer] = None,
    config: Optional[RankConfig] = None,
) -> List[Sentence]:
    return Document.create(text, analyzer=analyzer, config=config).summarize(length, focus=focus)


def highlight(
    text: str,
    words: int = -1,
    merge: bool = True,
    analyzer: Optional[TextAnalyzer] = None,
    config: Optional[RankConfig] = None,
) -> List[Keyword]:
    return Document.create(text, analyzer=analyzer, config=config).highlight(words, merge=merge)
