"""
TF-IDF scoring with recency and phrase bonuses.

    idf      = ln(N / (df + 1))
    tfidf    = tf * idf
    recency  = total_recency_weight / max(tf, 1)
    score    = tfidf * (1 + recency) * type_bonus

IDF is not floored at zero: a term present in (almost) every document gets
a zero or negative score and sinks below rarer terms.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Dict, Optional

from .config import TrendingConfig
from .ngrams import NgramKind
from .stats import CorpusStats


@dataclass(frozen=True)
class ScoredTerm:
    term: str
    kind: NgramKind
    score: float
    term_frequency: float
    document_frequency: int
    idf: float


def score_terms(
    stats: CorpusStats,
    config: Optional[TrendingConfig] = None,
) -> Dict[str, ScoredTerm]:
    """Score every term in ``stats``; an empty corpus yields an empty mapping."""
    config = config or TrendingConfig()
    total_docs = stats.total_documents
    if total_docs == 0:
        return {}

    scored: Dict[str, ScoredTerm] = {}
    for term, data in stats.terms.items():
        df = stats.df(term)
        if df == 0:
            continue
        idf = math.log(total_docs / (df + 1))
        tfidf = data.term_frequency * idf
        recency_bonus = data.total_recency_weight / max(data.term_frequency, 1.0)
        type_bonus = config.bigram_type_bonus if data.kind == "bigram" else 1.0
        score = tfidf * (1.0 + recency_bonus) * type_bonus
        if not math.isfinite(score):
            continue
        scored[term] = ScoredTerm(
            term=term,
            kind=data.kind,
            score=score,
            term_frequency=data.term_frequency,
            document_frequency=df,
            idf=idf,
        )
    return scored
