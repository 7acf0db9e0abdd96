"""
Trending-topic extraction over news headlines.

Pipeline:
- Title normalisation and stop-word filtering
- Unigram/bigram extraction with per-document dedup
- Step-function recency weighting
- TF-IDF scoring with recency and bigram bonuses
- Greedy diversity selection (no shared words)
"""

from .cache import KeywordCache
from .config import MAX_KEYWORDS, TrendingConfig
from .decay import parse_published, time_weight
from .keywords import build_corpus_stats, compute_top_keywords
from .models import Keyword, NewsItem
from .ngrams import Ngram, extract_ngrams
from .scorer import ScoredTerm, score_terms
from .selector import has_overlap, select_diverse
from .stats import CorpusStats, TermStats
from .utils import STOPWORDS, iter_tokens, normalize_title, tokenize

__all__ = [
    "build_corpus_stats",
    "compute_top_keywords",
    "CorpusStats",
    "extract_ngrams",
    "has_overlap",
    "iter_tokens",
    "Keyword",
    "KeywordCache",
    "MAX_KEYWORDS",
    "NewsItem",
    "Ngram",
    "normalize_title",
    "parse_published",
    "score_terms",
    "ScoredTerm",
    "select_diverse",
    "STOPWORDS",
    "TermStats",
    "time_weight",
    "tokenize",
    "TrendingConfig",
]
