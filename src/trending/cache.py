"""
Memoise the keyword list until the underlying headline snapshot changes.
"""

from __future__ import annotations

import datetime as dt
import logging
import threading
from typing import Callable, List, Optional, Sequence, Tuple

from .config import TrendingConfig
from .keywords import compute_top_keywords
from .models import Keyword, NewsItem

logger = logging.getLogger(__name__)

SnapshotKey = Tuple[Tuple[str, Optional[dt.datetime]], ...]


def snapshot_key(items: Sequence[NewsItem]) -> SnapshotKey:
    return tuple((item.title, item.published_at) for item in items)


class KeywordCache:
    """
    Holds the last computed keyword list and the snapshot it was built from.

    ``get`` recomputes only when the (title, published_at) sequence differs
    from the previous call, mirroring "refresh on data change".
    """

    def __init__(
        self,
        config: Optional[TrendingConfig] = None,
        clock: Optional[Callable[[], dt.datetime]] = None,
    ) -> None:
        self.config = config or TrendingConfig()
        self._clock = clock or (lambda: dt.datetime.now(dt.timezone.utc))
        self._key: Optional[SnapshotKey] = None
        self._keywords: List[Keyword] = []
        self._lock = threading.Lock()

    def get(self, items: Sequence[NewsItem]) -> List[Keyword]:
        snapshot = tuple(items)
        key = snapshot_key(snapshot)
        with self._lock:
            if key == self._key:
                logger.debug("Keyword cache hit (%d items)", len(snapshot))
                return list(self._keywords)
            keywords = compute_top_keywords(snapshot, now=self._clock(), config=self.config)
            self._key = key
            self._keywords = keywords
            return list(keywords)

    def clear(self) -> None:
        with self._lock:
            self._key = None
            self._keywords = []
