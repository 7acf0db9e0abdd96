"""
Top-keyword ("Topik Populer") computation over a snapshot of headlines.
"""

from __future__ import annotations

import datetime as dt
import logging
import math
from typing import AbstractSet, Iterable, List, Optional

from .config import MAX_KEYWORDS, TrendingConfig
from .decay import time_weight
from .models import Keyword, NewsItem
from .ngrams import extract_ngrams
from .scorer import score_terms
from .selector import select_diverse
from .stats import CorpusStats
from .utils import STOPWORDS, tokenize

logger = logging.getLogger(__name__)


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def _normalize_stop_words(stop_words: Optional[Iterable[str]]) -> AbstractSet[str]:
    if stop_words is None:
        return STOPWORDS
    return frozenset(w.lower() for w in stop_words)


def build_corpus_stats(
    items: Iterable[NewsItem],
    now: dt.datetime,
    stop_words: Optional[AbstractSet[str]] = None,
    config: Optional[TrendingConfig] = None,
) -> CorpusStats:
    """Tokenise, weight and fold every item into a fresh ``CorpusStats``."""
    config = config or TrendingConfig()
    if stop_words is None:
        stop_words = STOPWORDS
    stats = CorpusStats()
    for item in items:
        weight = time_weight(item.published_at, now, config)
        tokens = tokenize(item.title, stop_words, config.min_token_length)
        stats.add_document(extract_ngrams(tokens, stop_words, config), weight)
    return stats


def compute_top_keywords(
    items: Iterable[NewsItem],
    now: Optional[dt.datetime] = None,
    stop_words: Optional[Iterable[str]] = None,
    config: Optional[TrendingConfig] = None,
) -> List[Keyword]:
    """
    Rank the headlines' unigrams and bigrams and return up to
    ``config.max_keywords`` topics (never more than ``MAX_KEYWORDS``), no
    two of which share a word.

    Pure function of its arguments: pass ``now`` for reproducible output.
    """
    config = config or TrendingConfig()
    now = now or dt.datetime.now(dt.timezone.utc)
    words = _normalize_stop_words(stop_words)

    stats = build_corpus_stats(items, now, words, config)
    scored = score_terms(stats, config)
    selected = select_diverse(scored.values(), limit=min(config.max_keywords, MAX_KEYWORDS))
    logger.debug(
        "Trending: %d documents, %d terms, %d selected",
        stats.total_documents,
        len(scored),
        len(selected),
    )
    return [
        Keyword(word=s.term, count=_round_half_up(s.term_frequency), score=s.score)
        for s in selected
    ]
