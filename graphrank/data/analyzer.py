from __future__ import annotations

import logging
from typing import List, Optional, Protocol, Tuple

import nltk
from nltk.sentiment.vader import SentimentIntensityAnalyzer

from graphrank.data.types import Sentence, Token

logger = logging.getLogger(__name__)

QUOTE_MARKS = ("“", "”", "″", '"')

NLTK_RESOURCES = ("punkt", "punkt_tab", "averaged_perceptron_tagger", "averaged_perceptron_tagger_eng", "vader_lexicon")


class TextAnalyzer(Protocol):
    def parse(self, text: str, merge_quotations: bool = False) -> Tuple[List[Sentence], List[Token]]:
        ...


def count_quotes(text: str) -> int:
    return sum(text.count(q) for q in QUOTE_MARKS)


def _prim(text: str) -> str:
    return text.replace("\n", " ").strip()


def merge_quoted_sentences(sentences: List[str]) -> List[str]:
    """Join sentences that sit inside an open quotation into one sentence.

    A sentence with an odd number of quote marks opens (or closes) a quotation;
    every following sentence is appended to it until the quotation closes.
    """
    merged: List[str] = []
    inside = False
    for sent in sentences:
        text = _prim(sent)
        if inside:
            merged[-1] = merged[-1] + " " + text
        else:
            merged.append(text)
        if count_quotes(sent) % 2 == 1:
            inside = not inside
    return merged


def download_resources(quiet: bool = True) -> None:
    """Fetch the nltk models used by :class:`NltkAnalyzer`."""
    for name in NLTK_RESOURCES:
        nltk.download(name, quiet=quiet)


def _safe_sentiment_analyzer() -> Optional[SentimentIntensityAnalyzer]:
    try:
        return SentimentIntensityAnalyzer()
    except LookupError:
        logger.warning("vader_lexicon not available; sentence sentiment defaults to 0.0")
        return None


class NltkAnalyzer:
    """Split, tokenize, POS-tag and score sentiment with nltk (English)."""

    def __init__(self, language: str = "english") -> None:
        self.language = language
        self._sentiment = _safe_sentiment_analyzer()

    def sentiment(self, text: str) -> float:
        if self._sentiment is None:
            return 0.0
        return float(self._sentiment.polarity_scores(text)["compound"])

    def parse(self, text: str, merge_quotations: bool = False) -> Tuple[List[Sentence], List[Token]]:
        raw_sents = [s.strip() for s in nltk.sent_tokenize(text, language=self.language)]
        if merge_quotations:
            raw_sents = merge_quoted_sentences(raw_sents)

        sentences: List[Sentence] = []
        tokens: List[Token] = []
        for idx, raw in enumerate(s for s in raw_sents if s):
            words = nltk.word_tokenize(raw, language=self.language)
            tagged = nltk.pos_tag(words)
            sent_tokens = [
                Token(text=word, tag=tag, order=len(tokens) + i) for i, (word, tag) in enumerate(tagged)
            ]
            tokens.extend(sent_tokens)
            sentences.append(
                Sentence(raw=raw, tokens=sent_tokens, sentiment=self.sentiment(raw), order=idx)
            )
        return sentences, tokens
