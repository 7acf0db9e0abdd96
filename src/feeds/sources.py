"""
RSS sources aggregated by the service.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple

# Image lookups understood by the parser, probed in the order a source lists them.
IMAGE_ENCLOSURE = "enclosure"
IMAGE_MEDIA_CONTENT = "media_content"
IMAGE_MEDIA_THUMBNAIL = "media_thumbnail"
IMAGE_ELEMENT = "img"


@dataclass(frozen=True)
class FeedSource:
    """A news site's RSS endpoint and display metadata."""

    name: str
    url: str
    logo: str
    language: str = "Indonesia"
    logo_url: Optional[str] = None
    image_fields: Tuple[str, ...] = (IMAGE_ENCLOSURE,)


RSS_SOURCES: List[FeedSource] = [
    FeedSource(
        name="Detik",
        url="https://finance.detik.com/rss",
        logo="\U0001F534",
        image_fields=(IMAGE_ENCLOSURE,),
    ),
    FeedSource(
        name="Tempo",
        url="https://rss.tempo.co/bisnis",
        logo="\U0001F7E2",
        image_fields=(IMAGE_ELEMENT,),
    ),
    FeedSource(
        name="CNBC Indonesia",
        url="https://www.cnbcindonesia.com/market/rss/",
        logo="\U0001F535",
        image_fields=(IMAGE_ENCLOSURE, IMAGE_MEDIA_CONTENT),
    ),
]

ALL_SOURCES = "Semua"


def get_source(name: str) -> Optional[FeedSource]:
    for source in RSS_SOURCES:
        if source.name == name:
            return source
    return None
