"""
API routes: health, sources, feeds, trending, exchange rates.
"""

from __future__ import annotations

import asyncio
import dataclasses
import datetime as dt
import logging
from typing import Any, List, Optional

import requests
from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from src.auth.dependencies import require_api_key
from src.feeds import RSS_SOURCES, FeedItem, FeedSource, fetch_all_feeds, filter_items
from src.kurs import KursScrapeError, fetch_kurs_bi, fetch_kurs_pajak
from src.trending import KeywordCache, NewsItem, TrendingConfig, compute_top_keywords

from .models import (
    FeedItemOut,
    FeedsResponse,
    HealthResponse,
    KeywordOut,
    KursBIResponse,
    KursPajakResponse,
    SourceOut,
    SourcesResponse,
    TrendingRequest,
    TrendingResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["api"])
protected = [Depends(require_api_key)]


def _get_state(request: Request) -> tuple[List[FeedSource], KeywordCache]:
    sources = getattr(request.app.state, "sources", None)
    if sources is None:
        sources = list(RSS_SOURCES)
    cache = getattr(request.app.state, "keyword_cache", None)
    if cache is None:
        request.app.state.keyword_cache = KeywordCache(config=TrendingConfig.from_env())
        cache = request.app.state.keyword_cache
    return sources, cache


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"success": False, "error": message})


def _feed_out(item: FeedItem) -> FeedItemOut:
    return FeedItemOut(**dataclasses.asdict(item))


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    """Liveness check (no API key)."""
    return HealthResponse()


@router.get("/sources", response_model=SourcesResponse, dependencies=protected)
async def sources(request: Request) -> SourcesResponse:
    """Configured news sources."""
    configured, _ = _get_state(request)
    return SourcesResponse(
        data=[
            SourceOut(name=s.name, logo=s.logo, logo_url=s.logo_url, language=s.language)
            for s in configured
        ]
    )


@router.get("/feeds", response_model=FeedsResponse, dependencies=protected)
async def feeds(
    request: Request,
    source: Optional[str] = None,
    q: Optional[str] = None,
    start: Optional[dt.date] = None,
    end: Optional[dt.date] = None,
) -> FeedsResponse:
    """All sources merged newest first, optionally filtered by source, text and date range."""
    configured, _ = _get_state(request)
    items = await asyncio.to_thread(fetch_all_feeds, configured)
    items = filter_items(items, source=source, query=q, start=start, end=end)
    return FeedsResponse(count=len(items), data=[_feed_out(it) for it in items])


@router.get("/trending", response_model=TrendingResponse, dependencies=protected)
async def trending(request: Request, source: Optional[str] = None) -> TrendingResponse:
    """Top keywords over the current headlines of every source (or one source)."""
    configured, cache = _get_state(request)
    items = await asyncio.to_thread(fetch_all_feeds, configured)
    items = filter_items(items, source=source)
    keywords = cache.get([it.to_news_item() for it in items])
    data = [KeywordOut(word=k.word, count=k.count) for k in keywords]
    return TrendingResponse(count=len(data), data=data)


@router.post("/trending", response_model=TrendingResponse, dependencies=protected)
async def trending_for_items(request: Request, body: TrendingRequest) -> TrendingResponse:
    """Top keywords over caller-supplied headlines."""
    _, cache = _get_state(request)
    news = [NewsItem.from_raw(it.title, it.pub_date) for it in body.items]
    keywords = compute_top_keywords(news, now=body.now, config=cache.config)
    data = [KeywordOut(word=k.word, count=k.count) for k in keywords]
    return TrendingResponse(count=len(data), data=data)


async def _scrape(fetcher: Any, fallback_message: str) -> Any:
    try:
        return await asyncio.to_thread(fetcher)
    except (KursScrapeError, requests.RequestException) as e:
        logger.error("%s: %s", fallback_message, e)
        return _error(500, str(e) or fallback_message)
    except Exception:
        logger.exception(fallback_message)
        return _error(500, fallback_message)


@router.get("/kurs-bi", response_model=KursBIResponse, dependencies=protected)
async def kurs_bi() -> KursBIResponse | JSONResponse:
    """Bank Indonesia transaction rates."""
    result = await _scrape(fetch_kurs_bi, "Gagal mengambil data Kurs BI")
    if isinstance(result, JSONResponse):
        return result
    return KursBIResponse(**dataclasses.asdict(result))


@router.get("/kurs-pajak", response_model=KursPajakResponse, dependencies=protected)
async def kurs_pajak() -> KursPajakResponse | JSONResponse:
    """Ministry of Finance tax rates for the current validity period."""
    result = await _scrape(fetch_kurs_pajak, "Gagal mengambil data Kurs Pajak")
    if isinstance(result, JSONResponse):
        return result
    return KursPajakResponse(**dataclasses.asdict(result))
