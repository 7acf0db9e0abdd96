"""
Corpus-wide term statistics for keyword scoring.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Set

from .ngrams import Ngram, NgramKind


@dataclass
class TermStats:
    """Decay-weighted accumulators for a single term."""

    kind: NgramKind
    term_frequency: float = 0.0
    total_recency_weight: float = 0.0


@dataclass
class CorpusStats:
    """
    Term statistics accumulated over a snapshot of documents.

    ``document_terms[i]`` holds the distinct terms of document ``i``;
    ``document_frequency`` is maintained alongside it so lookups do not
    rescan the documents.
    """

    terms: Dict[str, TermStats] = field(default_factory=dict)
    document_terms: List[Set[str]] = field(default_factory=list)
    document_frequency: Counter = field(default_factory=Counter)

    @property
    def total_documents(self) -> int:
        return len(self.document_terms)

    def add_document(self, ngrams: Iterable[Ngram], time_weight: float) -> Set[str]:
        """Fold one document's n-gram occurrences into the corpus totals."""
        seen: Set[str] = set()
        for ng in ngrams:
            stats = self.terms.get(ng.term)
            if stats is None:
                stats = TermStats(kind=ng.kind)
                self.terms[ng.term] = stats
            stats.term_frequency += ng.weight * time_weight
            stats.total_recency_weight += time_weight
            seen.add(ng.term)
        self.document_terms.append(seen)
        self.document_frequency.update(seen)
        return seen

    def df(self, term: str) -> int:
        return self.document_frequency.get(term, 0)
