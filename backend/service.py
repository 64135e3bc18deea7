from __future__ import annotations

from typing import Optional

from graphrank.data.analyzer import NltkAnalyzer, TextAnalyzer
from graphrank.pipeline.config import RankConfig
from graphrank.pipeline.document import Document

from .models import (
    HighlightRequest,
    HighlightResponse,
    KeywordOut,
    SentenceOut,
    SummaryRequest,
    SummaryResponse,
)


class SummarizationService:
    """
    Builds a Document per request and runs summarization or highlighting on it.
    """

    def __init__(self, analyzer: Optional[TextAnalyzer] = None, config: Optional[RankConfig] = None) -> None:
        self._analyzer = analyzer
        self.config = config or RankConfig()

    @property
    def analyzer(self) -> TextAnalyzer:
        # the nltk analyzer loads its models lazily, on first use
        if self._analyzer is None:
            self._analyzer = NltkAnalyzer()
        return self._analyzer

    def summarize(self, request: SummaryRequest) -> SummaryResponse:
        cfg = self.config.with_options(
            threshold=request.threshold,
            focus=request.focus_enabled,
            merge_quotations=request.merge_quotations,
        )
        doc = Document.create(request.text, analyzer=self.analyzer, config=cfg)
        selected = doc.summarize(request.length, focus=request.focus)
        return SummaryResponse(
            summary=" ".join(s.raw for s in selected),
            sentences=[SentenceOut(text=s.raw, score=s.score, order=s.order) for s in selected],
        )

    def highlight(self, request: HighlightRequest) -> HighlightResponse:
        doc = Document.create(request.text, analyzer=self.analyzer, config=self.config)
        keywords = doc.highlight(request.words, merge=request.merge)
        return HighlightResponse(keywords=[KeywordOut(word=k.word, weight=k.weight) for k in keywords])
