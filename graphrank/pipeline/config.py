from __future__ import annotations

from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, Dict, Optional, Union

from graphrank.representations.filters import TokenFilter, get_filter, noun_verb_filter
from graphrank.representations.similarity import Similarity, default_similarity
from graphrank.utils.io import load_yaml


@dataclass
class RankConfig:
    """Options for summarization and highlighting.

    The threshold default follows Biased TextRank's recommended value; higher
    thresholds give sparser sentence graphs.
    """

    filter: TokenFilter = field(default=noun_verb_filter)
    similarity: Similarity = field(default=default_similarity)
    threshold: float = 0.65
    focus: bool = True
    focus_text: str = ""
    merge_quotations: bool = False
    remove_conjunctions: bool = False
    position_bias: bool = False
    keyword_window: int = 2
    keyword_iterations: int = 25
    sentence_iterations: int = 5

    def __post_init__(self) -> None:
        if self.keyword_window < 1:
            raise ValueError("keyword_window must be at least 1")
        if self.keyword_iterations < 0 or self.sentence_iterations < 0:
            raise ValueError("iteration counts must be non-negative")

    def with_options(self, **overrides: Any) -> "RankConfig":
        return replace(self, **{k: v for k, v in overrides.items() if v is not None})

    @classmethod
    def from_dict(cls, cfg: Optional[Dict[str, Any]]) -> "RankConfig":
        cfg = cfg or {}
        scfg = cfg.get("summarize", {}) or {}
        hcfg = cfg.get("highlight", {}) or {}
        base = cls()
        return cls(
            filter=get_filter(cfg["filter"]) if cfg.get("filter") else base.filter,
            similarity=base.similarity,
            threshold=float(scfg.get("threshold", base.threshold)),
            focus=bool(scfg.get("focus", base.focus)),
            focus_text=str(scfg.get("focus_text", base.focus_text) or ""),
            merge_quotations=bool(cfg.get("merge_quotations", base.merge_quotations)),
            remove_conjunctions=bool(scfg.get("remove_conjunctions", base.remove_conjunctions)),
            position_bias=bool(scfg.get("position_bias", base.position_bias)),
            keyword_window=int(hcfg.get("window", base.keyword_window)),
            keyword_iterations=int(hcfg.get("iterations", base.keyword_iterations)),
            sentence_iterations=int(scfg.get("iterations", base.sentence_iterations)),
        )


def load_config(path: Union[str, Path]) -> RankConfig:
    return RankConfig.from_dict(load_yaml(path))
