from __future__ import annotations
import logging
import math
import re
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Sequence, Union
from .datatypes import RankResult
from .graphing import matrix_to_graph
from .preprocessing import split_sentences, word_count
from .scoring import (DEFAULT_DAMPING, DEFAULT_MAX_ITER, DEFAULT_TOLERANCE,
                      centroid_scores, pagerank_result)
from .selection import rank_by_score, restore_order, select_top_indices
from .similarity import build_overlap_matrix, build_similarity_matrix

logger = logging.getLogger(__name__)

SummaryValue = Union[int, float, str, None]

DEFAULT_RATIO = 0.99
_LEADING_INT_RE = re.compile(r"^\s*([+-]?\d+)")

class Algorithm(str, Enum):
    TEXTRANK = "textrank"
    CENTROID = "centroid"

@dataclass
class SummarizerConfig:
    algorithm: Algorithm = Algorithm.TEXTRANK
    preserve_order: bool = True
    separator: str = "\n"
    list_style: Optional[str] = None          # None | "none" | "ordered" | "unordered"
    skip_min_words: Optional[int] = None      # drop sentences with <= this many words
    skip_max_words: Optional[int] = None      # drop sentences with >= this many words
    damping: float = DEFAULT_DAMPING
    tolerance: float = DEFAULT_TOLERANCE
    max_iter: int = DEFAULT_MAX_ITER

class SummarizationStrategy(ABC):
    """Common contract of the ranking algorithms."""

    name: str = ""

    @abstractmethod
    def scores(self, sentences: Sequence[str]) -> List[float]:
        """One score per sentence, in sentence order."""

    @abstractmethod
    def pick(self, scores: Sequence[float], count: int) -> List[int]:
        """Indices of the ``count`` best scores, best first."""

    def select(self, sentences: Sequence[str], count: int) -> List[int]:
        if not sentences or count <= 0:
            return []
        return self.pick(self.scores(sentences), count)

    def summarize(self, sentences: Sequence[str], count: int) -> List[str]:
        return [sentences[i] for i in self.select(sentences, count)]

class TextRankStrategy(SummarizationStrategy):
    """Edit-distance graph ranked with PageRank."""

    name = Algorithm.TEXTRANK.value

    def __init__(self, damping: float = DEFAULT_DAMPING, tolerance: float = DEFAULT_TOLERANCE,
                 max_iter: int = DEFAULT_MAX_ITER):
        self.damping = damping
        self.tolerance = tolerance
        self.max_iter = max_iter

    def rank(self, sentences: Sequence[str]) -> RankResult:
        simM = build_similarity_matrix(sentences)
        graph = matrix_to_graph(simM)
        return pagerank_result(graph, damping=self.damping, tolerance=self.tolerance,
                               max_iter=self.max_iter)

    def scores(self, sentences: Sequence[str]) -> List[float]:
        result = self.rank(sentences)
        return [result.scores[i] for i in range(len(sentences))]

    def pick(self, scores: Sequence[float], count: int) -> List[int]:
        return select_top_indices(scores, count)

class CentroidRankStrategy(SummarizationStrategy):
    """Single-pass ranking by word overlap with the rest of the document."""

    name = Algorithm.CENTROID.value

    def scores(self, sentences: Sequence[str]) -> List[float]:
        return centroid_scores(build_overlap_matrix(sentences))

    def pick(self, scores: Sequence[float], count: int) -> List[int]:
        return rank_by_score(scores, count)

def get_strategy(cfg: Optional[SummarizerConfig] = None) -> SummarizationStrategy:
    cfg = cfg or SummarizerConfig()
    algorithm = Algorithm(cfg.algorithm)
    if algorithm is Algorithm.TEXTRANK:
        return TextRankStrategy(damping=cfg.damping, tolerance=cfg.tolerance, max_iter=cfg.max_iter)
    return CentroidRankStrategy()

def _normalize_value(value: SummaryValue) -> float:
    # A result >= 1 is a sentence count, anything below is a ratio of N.
    if value is None or (isinstance(value, str) and value.strip().lower() in ("", "none")):
        return DEFAULT_RATIO
    if isinstance(value, bool):
        raise ValueError(f"Unrecognized summary value: {value!r}")
    if isinstance(value, (int, float)):
        return max(value, 0)

    text = value.strip()
    if "sentence" in text:
        m = _LEADING_INT_RE.match(text)
        if not m:
            raise ValueError(f"Unrecognized summary value: {value!r}")
        return max(int(m.group(1)), 0)
    try:
        if text.endswith("%"):
            ratio = float(text[:-1]) / 100
        else:
            ratio = float(text)
    except ValueError:
        raise ValueError(f"Unrecognized summary value: {value!r}") from None
    ratio = min(max(ratio, 0.0), 1.0)
    # "1" as a ratio would mean every sentence
    if ratio == 1.0:
        ratio = DEFAULT_RATIO
    return ratio

def resolve_count(value: SummaryValue, n: int) -> int:
    """
    Turn a summary value into a sentence count for a document of ``n`` sentences.

    Accepts 3, 0.3, "3 sentences", "30%", "0.3", or None/"none" (keep almost
    everything). Numeric strings without a unit are ratios.
    """
    v = _normalize_value(value)
    if v >= 1:
        return int(v)
    return int(math.ceil(n * v))

def filter_sentences(sentences: Sequence[str],
                     skip_min_words: Optional[int] = None,
                     skip_max_words: Optional[int] = None) -> List[str]:
    kept = list(sentences)
    if skip_min_words:
        kept = [s for s in kept if word_count(s) > skip_min_words]
    if skip_max_words:
        kept = [s for s in kept if word_count(s) < skip_max_words]
    return kept

def summarize_sentences(sentences: Sequence[str], count: int,
                        cfg: Optional[SummarizerConfig] = None) -> List[str]:
    cfg = cfg or SummarizerConfig()
    strategy = get_strategy(cfg)
    return arrange(strategy.select(sentences, count), sentences, cfg.preserve_order)

def arrange(indices: Sequence[int], sentences: Sequence[str], preserve_order: bool = True) -> List[str]:
    # document order, or the rank order the strategy returned
    if preserve_order:
        return restore_order(indices, sentences)
    return [sentences[i] for i in indices]

def summarize(text: str, value: SummaryValue = None,
              cfg: Optional[SummarizerConfig] = None) -> List[str]:
    # Pipeline glue
    cfg = cfg or SummarizerConfig()
    sentences = split_sentences(text)
    sentences = filter_sentences(sentences, cfg.skip_min_words, cfg.skip_max_words)
    count = resolve_count(value, len(sentences))
    logger.debug("Summarizing %d sentences down to %d with %s",
                 len(sentences), count, Algorithm(cfg.algorithm).value)
    return summarize_sentences(sentences, count, cfg)

def format_summary(sentences: Sequence[str], separator: str = "\n",
                   list_style: Optional[str] = None) -> str:
    if list_style is None or list_style == "none":
        return separator.join(sentences)
    if list_style not in ("ordered", "unordered"):
        raise ValueError(f"Unknown list_style: {list_style}")
    tag = "ol" if list_style == "ordered" else "ul"
    items = separator.join(f"<li>{s}</li>" for s in sentences)
    return f'<{tag} class="text-summary">{items}</{tag}>'
