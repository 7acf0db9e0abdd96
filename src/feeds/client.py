"""
Fetch, merge and filter the configured RSS feeds.
"""

from __future__ import annotations

import datetime as dt
import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Iterable, List, Optional, Sequence

import requests

from src.kurs.utils import get_env_int
from src.trending import parse_published

from .parser import FeedItem, parse_feed
from .sources import ALL_SOURCES, RSS_SOURCES, FeedSource

logger = logging.getLogger(__name__)

FEED_TIMEOUT_SECONDS = get_env_int("FEED_TIMEOUT_SECONDS", 10)
FEED_HEADERS = {"User-Agent": "Mozilla/5.0"}

_EPOCH = dt.datetime(1970, 1, 1, tzinfo=dt.timezone.utc)


def fetch_feed(source: FeedSource, timeout: Optional[int] = None) -> List[FeedItem]:
    """Download and parse one source. Failures are logged and yield no items."""
    try:
        response = requests.get(
            source.url,
            headers=FEED_HEADERS,
            timeout=timeout or FEED_TIMEOUT_SECONDS,
        )
        response.raise_for_status()
        items = parse_feed(response.content, source)
    except Exception as e:
        logger.error("Error fetching %s: %s", source.name, e)
        return []
    logger.info("Fetched %d items from %s", len(items), source.name)
    return items


def sort_newest_first(items: Iterable[FeedItem]) -> List[FeedItem]:
    """Newest first; items with unparsable dates go last, in input order."""

    def _key(item: FeedItem) -> tuple[int, float]:
        published = parse_published(item.pub_date)
        if published is None:
            return (1, 0.0)
        return (0, -(published - _EPOCH).total_seconds())

    return sorted(items, key=_key)


def fetch_all_feeds(sources: Optional[Sequence[FeedSource]] = None) -> List[FeedItem]:
    """Fetch every source concurrently and merge the results newest first."""
    sources = list(RSS_SOURCES if sources is None else sources)
    if not sources:
        return []
    with ThreadPoolExecutor(max_workers=len(sources)) as pool:
        batches = list(pool.map(fetch_feed, sources))
    merged = [item for batch in batches for item in batch]
    return sort_newest_first(merged)


def filter_items(
    items: Iterable[FeedItem],
    *,
    source: Optional[str] = None,
    query: Optional[str] = None,
    start: Optional[dt.date] = None,
    end: Optional[dt.date] = None,
) -> List[FeedItem]:
    """
    Narrow feed items by source name, free-text query and publish date range.

    The date range is inclusive of the whole ``end`` day (UTC). It applies
    only when both ends are given; undated items are then excluded.
    """
    out = list(items)
    if source and source != ALL_SOURCES:
        out = [it for it in out if it.source == source]
    if query:
        q = query.lower()
        out = [it for it in out if q in it.title.lower() or q in it.description.lower()]
    if start and end:
        lo = dt.datetime.combine(start, dt.time.min, tzinfo=dt.timezone.utc)
        hi = dt.datetime.combine(end, dt.time.min, tzinfo=dt.timezone.utc) + dt.timedelta(days=1)
        kept = []
        for it in out:
            published = parse_published(it.pub_date)
            if published is not None and lo <= published < hi:
                kept.append(it)
        out = kept
    return out
