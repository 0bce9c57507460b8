"""Tests for the Wikipedia/YouTube proxies and their response adapters."""

import httpx
import pytest

from errors import UpstreamError
from services.lookups import LookupResult, first_video_url, parse_oembed, parse_opensearch

SEVEN_DAYS = 7 * 24 * 3600
ONE_DAY = 24 * 3600

TOMATO_OPENSEARCH = ["Tomato", ["Tomato"], [""], ["https://en.wikipedia.org/wiki/Tomato"]]


# ---------------------------------------------------------------------------
# Adapters
# ---------------------------------------------------------------------------

def test_parse_opensearch_takes_first_title_and_url():
    assert parse_opensearch(TOMATO_OPENSEARCH) == LookupResult(
        title="Tomato", url="https://en.wikipedia.org/wiki/Tomato"
    )


def test_parse_opensearch_no_match_is_none():
    assert parse_opensearch(["Zzzx", [], [], []]) is None


@pytest.mark.parametrize("data", [{"title": "x"}, ["Tomato", ["Tomato"]], None])
def test_parse_opensearch_malformed_raises(data):
    with pytest.raises(UpstreamError):
        parse_opensearch(data)


def test_parse_oembed():
    assert parse_oembed({"title": "How to grow garlic"}) == "How to grow garlic"
    assert parse_oembed({"title": 42}) is None
    assert parse_oembed([]) is None


def test_first_video_url():
    html = '<a href="/watch?v=short">x</a><a href="/watch?v=dQw4w9WgXcQ&list=1">y</a>'
    assert first_video_url(html) == "https://www.youtube.com/watch?v=dQw4w9WgXcQ"
    assert first_video_url("<html>no videos</html>") is None


# ---------------------------------------------------------------------------
# /api/wiki-page
# ---------------------------------------------------------------------------

def test_wiki_page_then_cached(client, upstream, clock):
    upstream.handler = lambda request: httpx.Response(200, json=TOMATO_OPENSEARCH)

    first = client.get("/api/wiki-page", params={"term": "Tomato"})
    assert first.status_code == 200
    assert first.json() == {
        "title": "Tomato",
        "url": "https://en.wikipedia.org/wiki/Tomato",
        "cached": False,
    }

    clock.advance(SEVEN_DAYS - 1)
    second = client.get("/api/wiki-page", params={"term": "tomato"})
    assert second.json() == {
        "title": "Tomato",
        "url": "https://en.wikipedia.org/wiki/Tomato",
        "cached": True,
    }
    assert len(upstream.requests) == 1

    request = upstream.requests[0]
    assert request.url.host == "en.wikipedia.org"
    assert request.url.params["action"] == "opensearch"
    assert request.url.params["search"] == "Tomato"
    assert request.headers["Cache-Control"] == "no-cache"


def test_wiki_page_refetches_after_expiry(client, upstream, clock):
    upstream.handler = lambda request: httpx.Response(200, json=TOMATO_OPENSEARCH)

    client.get("/api/wiki-page", params={"term": "Tomato"})
    clock.advance(SEVEN_DAYS)
    resp = client.get("/api/wiki-page", params={"term": "Tomato"})

    assert resp.json()["cached"] is False
    assert len(upstream.requests) == 2


@pytest.mark.parametrize("params", [{}, {"term": "   "}])
def test_wiki_page_requires_term(client, upstream, params):
    resp = client.get("/api/wiki-page", params=params)
    assert resp.status_code == 400
    assert resp.json() == {"error": "term is required"}
    assert upstream.requests == []


def test_wiki_page_not_found(client, upstream):
    upstream.handler = lambda request: httpx.Response(200, json=["Zzzx", [], [], []])
    resp = client.get("/api/wiki-page", params={"term": "Zzzx"})
    assert resp.status_code == 404
    assert resp.json()["error"] == "No Wikipedia page found"


def test_wiki_page_upstream_failure(client, upstream):
    upstream.handler = lambda request: httpx.Response(503)
    resp = client.get("/api/wiki-page", params={"term": "Tomato"})
    assert resp.status_code == 502
    assert resp.json()["error"] == "Wikipedia request failed (503)"


def test_wiki_page_unexpected_shape(client, upstream):
    upstream.handler = lambda request: httpx.Response(200, json={"oops": True})
    resp = client.get("/api/wiki-page", params={"term": "Tomato"})
    assert resp.status_code == 502


def test_wiki_page_invalid_json(client, upstream):
    upstream.handler = lambda request: httpx.Response(200, text="<html>")
    resp = client.get("/api/wiki-page", params={"term": "Tomato"})
    assert resp.status_code == 502


def test_wiki_page_network_failure(client, upstream):
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    upstream.handler = handler
    resp = client.get("/api/wiki-page", params={"term": "Tomato"})
    assert resp.status_code == 503


def test_wiki_page_timeout(client, upstream):
    def handler(request):
        raise httpx.ReadTimeout("too slow", request=request)

    upstream.handler = handler
    resp = client.get("/api/wiki-page", params={"term": "Tomato"})
    assert resp.status_code == 504


def test_failures_are_not_cached(client, upstream):
    upstream.handler = lambda request: httpx.Response(500)
    client.get("/api/wiki-page", params={"term": "Tomato"})

    upstream.handler = lambda request: httpx.Response(200, json=TOMATO_OPENSEARCH)
    resp = client.get("/api/wiki-page", params={"term": "Tomato"})
    assert resp.json()["cached"] is False


def test_unexpected_error_is_500(client, upstream):
    def handler(request):
        raise RuntimeError("kaboom")

    upstream.handler = handler
    resp = client.get("/api/wiki-page", params={"term": "Tomato"})
    assert resp.status_code == 500
    assert resp.json() == {"error": "Internal server error"}


# ---------------------------------------------------------------------------
# /api/youtube-oembed
# ---------------------------------------------------------------------------

VIDEO_URL = "https://www.youtube.com/watch?v=dQw4w9WgXcQ"


def test_youtube_oembed_then_cached(client, upstream, clock):
    upstream.handler = lambda request: httpx.Response(200, json={"title": "Pruning roses"})

    first = client.get("/api/youtube-oembed", params={"url": VIDEO_URL})
    assert first.json() == {"title": "Pruning roses", "cached": False}
    assert upstream.requests[0].url.params["url"] == VIDEO_URL

    clock.advance(ONE_DAY - 1)
    second = client.get("/api/youtube-oembed", params={"url": VIDEO_URL})
    assert second.json() == {"title": "Pruning roses", "cached": True}
    assert len(upstream.requests) == 1

    clock.advance(1)
    client.get("/api/youtube-oembed", params={"url": VIDEO_URL})
    assert len(upstream.requests) == 2


def test_youtube_oembed_missing_title(client, upstream):
    upstream.handler = lambda request: httpx.Response(200, json={"author_name": "someone"})
    resp = client.get("/api/youtube-oembed", params={"url": VIDEO_URL})
    assert resp.status_code == 404
    assert resp.json()["error"] == "No title found"


def test_youtube_oembed_requires_url(client, upstream):
    resp = client.get("/api/youtube-oembed")
    assert resp.status_code == 400
    assert resp.json() == {"error": "url is required"}


# ---------------------------------------------------------------------------
# /api/youtube-top
# ---------------------------------------------------------------------------

RESULTS_HTML = '<html><a href="/watch?v=abcdefghijk">first</a><a href="/watch?v=zyxwvutsrqp">2</a></html>'


def _youtube(oembed_status=200):
    def handler(request):
        if request.url.path == "/results":
            return httpx.Response(200, text=RESULTS_HTML)
        if request.url.path == "/oembed":
            return httpx.Response(oembed_status, json={"title": "Growing tomatoes from seed"})
        return httpx.Response(404)

    return handler


def test_youtube_top_finds_first_video_and_title(client, upstream):
    upstream.handler = _youtube()

    resp = client.get("/api/youtube-top", params={"q": "Tomato seedlings"})
    assert resp.status_code == 200
    assert resp.json() == {
        "title": "Growing tomatoes from seed",
        "url": "https://www.youtube.com/watch?v=abcdefghijk",
        "cached": False,
    }

    search = upstream.requests[0]
    assert search.url.params["search_query"] == "Tomato seedlings"
    assert search.url.params["sp"] == "CAMSAhAB"
    assert "Mozilla" in search.headers["User-Agent"]


def test_youtube_top_cache_key_ignores_case(client, upstream):
    upstream.handler = _youtube()
    client.get("/api/youtube-top", params={"q": "Tomato seedlings"})
    resp = client.get("/api/youtube-top", params={"q": "TOMATO SEEDLINGS"})

    assert resp.json()["cached"] is True
    assert len(upstream.requests) == 2  # search + oEmbed, once


def test_youtube_top_title_falls_back_to_query(client, upstream):
    upstream.handler = _youtube(oembed_status=401)
    resp = client.get("/api/youtube-top", params={"q": "Compost tea"})
    assert resp.status_code == 200
    assert resp.json()["title"] == "Compost tea"


def test_youtube_top_no_video(client, upstream):
    upstream.handler = lambda request: httpx.Response(200, text="<html>nothing</html>")
    resp = client.get("/api/youtube-top", params={"q": "Compost tea"})
    assert resp.status_code == 404
    body = resp.json()
    assert body["error"] == "No video found"
    assert body["searchUrl"].startswith("https://www.youtube.com/results?search_query=Compost")


def test_youtube_top_upstream_failure_carries_search_url(client, upstream):
    upstream.handler = lambda request: httpx.Response(429)
    resp = client.get("/api/youtube-top", params={"q": "Compost tea"})
    assert resp.status_code == 502
    assert resp.json()["error"] == "YouTube request failed (429)"
    assert "searchUrl" in resp.json()


def test_youtube_top_requires_q(client, upstream):
    resp = client.get("/api/youtube-top", params={"q": ""})
    assert resp.status_code == 400
    assert resp.json() == {"error": "q is required"}
