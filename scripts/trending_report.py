"""
Print the current trending topics across the configured RSS feeds.

Usage (from the repository root):

    python -m scripts.trending_report
    python -m scripts.trending_report --source Detik --limit 5 --json
"""

from __future__ import annotations

import argparse
import datetime as dt
import json
import logging

from src.feeds import RSS_SOURCES, fetch_all_feeds, filter_items
from src.trending import MAX_KEYWORDS, TrendingConfig, compute_top_keywords


def main() -> None:
    ap = argparse.ArgumentParser(description="Show trending topics from Indonesian financial news feeds.")
    ap.add_argument("--source", default=None, help="Only use this source (e.g. Detik, Tempo)")
    ap.add_argument("--limit", type=int, default=None, help=f"Maximum number of topics (at most {MAX_KEYWORDS})")
    ap.add_argument("--json", action="store_true", help="Emit JSON instead of a text list")
    ap.add_argument("--verbose", action="store_true", help="Log fetch details")
    args = ap.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = TrendingConfig.from_env()
    if args.limit is not None:
        config.max_keywords = min(args.limit, MAX_KEYWORDS)

    items = filter_items(fetch_all_feeds(RSS_SOURCES), source=args.source)
    now = dt.datetime.now(dt.timezone.utc)
    keywords = compute_top_keywords([it.to_news_item() for it in items], now=now, config=config)

    if args.json:
        payload = {
            "generated_at": now.isoformat(),
            "items": len(items),
            "data": [{"word": k.word, "count": k.count} for k in keywords],
        }
        print(json.dumps(payload, ensure_ascii=False, indent=2))
        return

    print(f"Topik Populer ({len(keywords)}) from {len(items)} headlines")
    for rank, k in enumerate(keywords, 1):
        print(f"{rank:2d}. #{k.word} ({k.count})")


if __name__ == "__main__":
    main()
