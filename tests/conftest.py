"""Shared fixtures: an app per test with a fake clock and mocked upstreams."""

import os
import sys

import httpx
import pytest
from fastapi.testclient import TestClient

# Ensure backend/ is importable when running pytest from the repo root
sys.path.insert(0, os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "backend"))

os.environ.setdefault("ENVIRONMENT", "test")

from app import create_app  # noqa: E402
from config import Settings  # noqa: E402
from routes.deps import lookup_client, weather_client  # noqa: E402


class FakeClock:
    def __init__(self, now: float = 1_700_000_000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class Upstream:
    """MockTransport handler that records every outbound request."""

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self.handler = lambda request: httpx.Response(500)

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.handler(request)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def settings():
    s = Settings()
    s.weather_api_key = "test-weather-key"
    s.supabase_url = None
    s.supabase_anon_key = None
    return s


@pytest.fixture
def app(settings, clock):
    return create_app(settings=settings, clock=clock)


@pytest.fixture
def upstream(app):
    up = Upstream()

    async def _client():
        async with httpx.AsyncClient(transport=httpx.MockTransport(up)) as client:
            yield client

    app.dependency_overrides[lookup_client] = _client
    app.dependency_overrides[weather_client] = _client
    return up


@pytest.fixture
def client(app):
    with TestClient(app, raise_server_exceptions=False) as c:
        yield c
