"""FastAPI dependencies for per-request HTTP clients and app-owned state."""

from collections.abc import AsyncIterator

import httpx
from fastapi import Request

from config import Settings
from services.cache import TTLCache
from services.submissions import SubmissionStore


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


async def lookup_client(request: Request) -> AsyncIterator[httpx.AsyncClient]:
    timeout = request.app.state.settings.lookup_timeout_seconds
    async with httpx.AsyncClient(timeout=timeout, follow_redirects=True) as client:
        yield client


async def weather_client(request: Request) -> AsyncIterator[httpx.AsyncClient]:
    timeout = request.app.state.settings.weather_timeout_seconds
    async with httpx.AsyncClient(timeout=timeout) as client:
        yield client


def wiki_cache(request: Request) -> TTLCache:
    return request.app.state.wiki_cache


def youtube_oembed_cache(request: Request) -> TTLCache:
    return request.app.state.youtube_oembed_cache


def youtube_top_cache(request: Request) -> TTLCache:
    return request.app.state.youtube_top_cache


def submission_store(request: Request) -> SubmissionStore:
    return request.app.state.submissions
