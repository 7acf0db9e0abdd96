"""
Recency weighting for news items.

Weights follow a step function on the item's age in hours:

    age > 24h        -> 0.2
    12h < age <= 24h -> 0.4
    6h  < age <= 12h -> 0.7
    age <= 6h        -> 1.0

Items whose publish date cannot be parsed are treated as fully decayed.
"""

from __future__ import annotations

import datetime as dt
from email.utils import parsedate_to_datetime
from typing import Optional, Union

from .config import TrendingConfig


def _as_utc(value: dt.datetime) -> dt.datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=dt.timezone.utc)
    return value.astimezone(dt.timezone.utc)


def parse_published(value: Union[str, dt.datetime, None]) -> Optional[dt.datetime]:
    """
    Parse an RFC-822 (RSS pubDate) or ISO-8601 timestamp into an aware UTC datetime.

    Returns None when the value is empty, unparsable or outside the UTC range.
    """
    if value is None:
        return None
    if isinstance(value, dt.datetime):
        try:
            return _as_utc(value)
        except OverflowError:
            return None
    text = str(value).strip()
    if not text:
        return None
    try:
        return _as_utc(parsedate_to_datetime(text))
    except (TypeError, ValueError, IndexError, OverflowError):
        pass
    iso = text[:-1] + "+00:00" if text.endswith(("Z", "z")) else text
    try:
        return _as_utc(dt.datetime.fromisoformat(iso))
    except (ValueError, OverflowError):
        return None


def hours_since(published_at: dt.datetime, now: dt.datetime) -> float:
    return (_as_utc(now) - _as_utc(published_at)).total_seconds() / 3600.0


def time_weight(
    published_at: Optional[dt.datetime],
    now: dt.datetime,
    config: Optional[TrendingConfig] = None,
) -> float:
    """Return the recency weight in (0, 1] for an item published at ``published_at``."""
    config = config or TrendingConfig()
    if published_at is None:
        return config.stale_weight
    hours = hours_since(published_at, now)
    for threshold, weight in config.decay_steps:
        if hours > threshold:
            return weight
    return config.fresh_weight
