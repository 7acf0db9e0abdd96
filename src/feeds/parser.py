"""
Normalise RSS documents into flat feed items.
"""

from __future__ import annotations

import html
import re
from dataclasses import dataclass
from typing import Any, List, Optional, Union

import feedparser

from src.trending import NewsItem

from .sources import (
    IMAGE_ELEMENT,
    IMAGE_ENCLOSURE,
    IMAGE_MEDIA_CONTENT,
    IMAGE_MEDIA_THUMBNAIL,
    FeedSource,
)

_CDATA_RE = re.compile(r"<!\[CDATA\[|\]\]>")


@dataclass
class FeedItem:
    """One article from an RSS feed, tagged with its source."""

    title: str
    description: str
    link: str
    pub_date: str
    source: str
    logo: str
    language: str
    image: str = ""
    logo_url: Optional[str] = None

    def to_news_item(self) -> NewsItem:
        return NewsItem.from_raw(self.title, self.pub_date)


def _clean_text(value: Any) -> str:
    if not value:
        return ""
    return _CDATA_RE.sub("", str(value)).strip()


def _first_url(entries: Any, key: str) -> str:
    for entry in entries or []:
        url = entry.get(key) if hasattr(entry, "get") else None
        if url:
            return str(url)
    return ""


def _extract_image(entry: Any, source: FeedSource) -> str:
    for kind in source.image_fields:
        if kind == IMAGE_ENCLOSURE:
            url = _first_url(entry.get("enclosures"), "href")
            if not url:
                url = _first_url(
                    [link for link in entry.get("links", []) if link.get("rel") == "enclosure"],
                    "href",
                )
        elif kind == IMAGE_MEDIA_CONTENT:
            url = _first_url(entry.get("media_content"), "url")
        elif kind == IMAGE_MEDIA_THUMBNAIL:
            url = _first_url(entry.get("media_thumbnail"), "url")
        elif kind == IMAGE_ELEMENT:
            url = _clean_text(entry.get("img"))
        else:
            url = ""
        if url:
            return url
    return ""


def parse_feed(content: Union[bytes, str], source: FeedSource) -> List[FeedItem]:
    """Parse raw RSS bytes/text for ``source``; malformed documents yield what feedparser recovers."""
    parsed = feedparser.parse(content)
    items: List[FeedItem] = []
    for entry in parsed.entries:
        items.append(
            FeedItem(
                title=html.unescape(_clean_text(entry.get("title"))),
                description=_clean_text(entry.get("description") or entry.get("summary")),
                link=_clean_text(entry.get("link")),
                pub_date=_clean_text(entry.get("published") or entry.get("updated")),
                image=_extract_image(entry, source),
                source=source.name,
                logo=source.logo,
                logo_url=source.logo_url,
                language=source.language,
            )
        )
    return items
