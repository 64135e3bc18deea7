from __future__ import annotations

from dataclasses import dataclass, field
from typing import List


@dataclass(frozen=True)
class Token:
    text: str
    tag: str
    order: int  # document-global position, assigned by the analyzer


@dataclass
class Sentence:
    raw: str
    tokens: List[Token] = field(default_factory=list)
    sentiment: float = 0.0
    score: float = 0.0  # written by ranking only
    bias: float = 0.0  # written by ranking only
    order: int = 0


@dataclass(frozen=True)
class Keyword:
    word: str
    weight: float
