from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field


class SummaryRequest(BaseModel):
    text: str = Field(..., min_length=1)
    length: int = Field(default=3, ge=0)
    focus: Optional[str] = None
    threshold: Optional[float] = Field(default=None, ge=0.0)
    focus_enabled: bool = True
    merge_quotations: bool = False


class SentenceOut(BaseModel):
    text: str
    score: float
    order: int


class SummaryResponse(BaseModel):
    summary: str
    sentences: List[SentenceOut]


class HighlightRequest(BaseModel):
    text: str = Field(..., min_length=1)
    words: int = -1
    merge: bool = True


class KeywordOut(BaseModel):
    word: str
    weight: float


class HighlightResponse(BaseModel):
    keywords: List[KeywordOut]
