"""
RSS aggregation for Indonesian financial news.
"""

from .client import fetch_all_feeds, fetch_feed, filter_items, sort_newest_first
from .parser import FeedItem, parse_feed
from .sources import ALL_SOURCES, RSS_SOURCES, FeedSource, get_source

__all__ = [
    "ALL_SOURCES",
    "fetch_all_feeds",
    "fetch_feed",
    "FeedItem",
    "FeedSource",
    "filter_items",
    "get_source",
    "parse_feed",
    "RSS_SOURCES",
    "sort_newest_first",
]
