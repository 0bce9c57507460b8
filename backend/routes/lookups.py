"""Cached proxies for Wikipedia and YouTube lookups.

GET /api/wiki-page?term=       → {title, url, cached}   (cached 7 days)
GET /api/youtube-oembed?url=   → {title, cached}        (cached 24 hours)
GET /api/youtube-top?q=        → {title, url, cached}   (cached 24 hours)
"""

import logging

import httpx
from fastapi import APIRouter, Depends, Query

from config import Settings
from errors import MissingParameterError
from routes.deps import get_settings, lookup_client, wiki_cache, youtube_oembed_cache, youtube_top_cache
from services.cache import TTLCache
from services.lookups import fetch_wiki_page, fetch_youtube_oembed, fetch_youtube_top

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api")


def _required(value: str, name: str) -> str:
    value = value.strip()
    if not value:
        raise MissingParameterError(f"{name} is required")
    return value


@router.get("/wiki-page")
async def wiki_page(
    term: str = Query(""),
    client: httpx.AsyncClient = Depends(lookup_client),
    cache: TTLCache = Depends(wiki_cache),
    settings: Settings = Depends(get_settings),
) -> dict:
    """Wikipedia article URL and title for a plant or topic."""
    term = _required(term, "term")
    key = term.lower()

    cached = cache.get(key)
    if cached is not None:
        return {**cached.to_dict(), "cached": True}

    result = await fetch_wiki_page(client, term)
    cache.set(key, result, ttl_seconds=settings.wiki_cache_ttl_seconds)
    return {**result.to_dict(), "cached": False}


@router.get("/youtube-oembed")
async def youtube_oembed(
    url: str = Query(""),
    client: httpx.AsyncClient = Depends(lookup_client),
    cache: TTLCache = Depends(youtube_oembed_cache),
    settings: Settings = Depends(get_settings),
) -> dict:
    """Title of a YouTube video via oEmbed (no API key required)."""
    url = _required(url, "url")

    cached = cache.get(url)
    if cached is not None:
        return {"title": cached.title, "cached": True}

    result = await fetch_youtube_oembed(client, url)
    cache.set(url, result, ttl_seconds=settings.youtube_cache_ttl_seconds)
    return {"title": result.title, "cached": False}


@router.get("/youtube-top")
async def youtube_top(
    q: str = Query(""),
    client: httpx.AsyncClient = Depends(lookup_client),
    cache: TTLCache = Depends(youtube_top_cache),
    settings: Settings = Depends(get_settings),
) -> dict:
    """Most-viewed YouTube video for a search query."""
    query = _required(q, "q")
    key = query.lower()

    cached = cache.get(key)
    if cached is not None:
        return {**cached.to_dict(), "cached": True}

    result = await fetch_youtube_top(client, query)
    cache.set(key, result, ttl_seconds=settings.youtube_cache_ttl_seconds)
    return {**result.to_dict(), "cached": False}
