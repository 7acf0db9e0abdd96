"""
Greedy diversity filter over ranked terms.
"""

from __future__ import annotations

from typing import Iterable, List

from .scorer import ScoredTerm


def has_overlap(first: str, second: str) -> bool:
    """True when the two terms share at least one word."""
    return not set(first.split(" ")).isdisjoint(second.split(" "))


def rank_terms(scored: Iterable[ScoredTerm]) -> List[ScoredTerm]:
    """Sort by score descending; equal scores fall back to term order."""
    return sorted(scored, key=lambda s: (-s.score, s.term))


def select_diverse(scored: Iterable[ScoredTerm], limit: int = 10) -> List[ScoredTerm]:
    """
    Walk the ranked terms and keep each one that shares no word with an
    already selected term, stopping after ``limit`` picks.
    """
    selected: List[ScoredTerm] = []
    if limit <= 0:
        return selected
    for candidate in rank_terms(scored):
        if any(has_overlap(s.term, candidate.term) for s in selected):
            continue
        selected.append(candidate)
        if len(selected) >= limit:
            break
    return selected
