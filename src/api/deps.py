"""
Shared state for the API (built in lifespan).
"""

from __future__ import annotations

import os
from typing import List

from src.feeds import RSS_SOURCES, FeedSource
from src.trending import KeywordCache, TrendingConfig


def build_state() -> tuple[List[FeedSource], KeywordCache]:
    """
    Return (sources, keyword_cache).

    The cache is keyed on the headline snapshot, so repeated /trending
    calls over unchanged feeds skip the ranking pass.
    """
    config = TrendingConfig.from_env()
    return list(RSS_SOURCES), KeywordCache(config=config)


def cors_origins() -> List[str]:
    """Allowed origins from FRONTEND_URL (comma separated), "*" when unset."""
    raw = os.getenv("FRONTEND_URL", "*")
    return [origin.strip() for origin in raw.split(",") if origin.strip()] or ["*"]
