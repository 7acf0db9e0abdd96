"""
Unigram and bigram candidates from a tokenised title.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import AbstractSet, List, Literal, Optional, Sequence

from .config import TrendingConfig
from .utils import STOPWORDS

NgramKind = Literal["unigram", "bigram"]


@dataclass(frozen=True)
class Ngram:
    """One occurrence of a candidate term inside a document."""

    term: str
    kind: NgramKind
    weight: float


def _within(word: str, low: int, high: int) -> bool:
    return low <= len(word) <= high


def extract_ngrams(
    tokens: Sequence[str],
    stop_words: Optional[AbstractSet[str]] = None,
    config: Optional[TrendingConfig] = None,
) -> List[Ngram]:
    """
    Return every qualifying unigram and bigram occurrence, in title order.

    Repeated terms are returned once per occurrence; callers dedupe per
    document when they need document frequency.
    """
    config = config or TrendingConfig()
    if stop_words is None:
        stop_words = STOPWORDS

    out: List[Ngram] = []
    for tok in tokens:
        if _within(tok, config.unigram_min_length, config.unigram_max_length):
            out.append(Ngram(tok, "unigram", config.unigram_weight))

    for left, right in zip(tokens, tokens[1:]):
        if left in stop_words or right in stop_words:
            continue
        low, high = config.bigram_word_min_length, config.bigram_word_max_length
        if _within(left, low, high) and _within(right, low, high):
            out.append(Ngram(f"{left} {right}", "bigram", config.bigram_weight))
    return out
