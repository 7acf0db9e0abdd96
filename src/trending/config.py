"""
Configuration for trending-topic extraction.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Tuple

# Upper bound on topics returned, whatever the configuration asks for.
MAX_KEYWORDS = 10


@dataclass
class TrendingConfig:
    """Thresholds and weights for the keyword ranking engine."""

    max_keywords: int = MAX_KEYWORDS
    min_token_length: int = 3
    unigram_min_length: int = 4
    unigram_max_length: int = 15
    bigram_word_min_length: int = 3
    bigram_word_max_length: int = 15
    unigram_weight: float = 1.0
    bigram_weight: float = 1.3
    bigram_type_bonus: float = 1.3
    # (age in hours strictly above which, weight), checked in order
    decay_steps: Tuple[Tuple[float, float], ...] = field(
        default_factory=lambda: ((24.0, 0.2), (12.0, 0.4), (6.0, 0.7))
    )
    fresh_weight: float = 1.0
    stale_weight: float = 0.2

    @classmethod
    def from_env(cls) -> "TrendingConfig":
        """Defaults, with TRENDING_MAX_KEYWORDS lowering the output size when set."""
        config = cls()
        value = os.getenv("TRENDING_MAX_KEYWORDS")
        if value is not None:
            try:
                config.max_keywords = min(int(value), MAX_KEYWORDS)
            except ValueError:
                pass
        return config
