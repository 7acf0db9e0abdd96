"""
Input and output records for trending-topic extraction.
"""

from __future__ import annotations

import datetime as dt
from dataclasses import dataclass
from typing import Optional, Union

from .decay import parse_published


@dataclass(frozen=True)
class NewsItem:
    """A headline and its publish time (None when the date was unparsable)."""

    title: str
    published_at: Optional[dt.datetime] = None

    @classmethod
    def from_raw(cls, title: str, published: Union[str, dt.datetime, None]) -> "NewsItem":
        return cls(title=title or "", published_at=parse_published(published))


@dataclass(frozen=True)
class Keyword:
    """A selected topic; ``count`` is the rounded decay-weighted frequency."""

    word: str
    count: int
    score: float = 0.0
