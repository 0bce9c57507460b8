"""Wikipedia and YouTube lookups behind the ``/api/wiki-page`` and ``/api/youtube-*`` proxies.

Each provider has a pure adapter that turns its response shape into a
``LookupResult`` (or None when nothing matched), so a change in a provider's
format touches one function. Callers own caching.
"""

import logging
import re
from dataclasses import asdict, dataclass

import httpx

from errors import GardenError, NotFoundError, UpstreamError
from services.http import fetch, json_body

logger = logging.getLogger(__name__)

WIKI_SEARCH_URL = "https://en.wikipedia.org/w/api.php"
YOUTUBE_OEMBED_URL = "https://www.youtube.com/oembed"
YOUTUBE_RESULTS_URL = "https://www.youtube.com/results"

# sp=CAMSAhAB sorts search results by view count
YOUTUBE_SORT_BY_VIEWS = "CAMSAhAB"

# Without a browser UA YouTube serves a consent/redirect page instead of results.
BROWSER_HEADERS = {
    "User-Agent": (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/120 Safari/537.36"
    ),
    "Accept": "text/html",
}

_VIDEO_ID = re.compile(r"/watch\?v=([a-zA-Z0-9_-]{11})", re.IGNORECASE)


@dataclass(frozen=True)
class LookupResult:
    title: str
    url: str

    def to_dict(self) -> dict:
        return asdict(self)


# ---------------------------------------------------------------------------
# Response adapters
# ---------------------------------------------------------------------------

def parse_opensearch(data) -> LookupResult | None:
    """Parse ``[term, [titles], [descriptions], [urls]]`` from OpenSearch."""
    if not isinstance(data, list) or len(data) < 4:
        raise UpstreamError("Unexpected Wikipedia response")

    titles, urls = data[1], data[3]
    title = titles[0] if isinstance(titles, list) and titles and isinstance(titles[0], str) else None
    page_url = urls[0] if isinstance(urls, list) and urls and isinstance(urls[0], str) else None
    if not title or not page_url:
        return None
    return LookupResult(title=title, url=page_url)


def parse_oembed(data) -> str | None:
    title = data.get("title") if isinstance(data, dict) else None
    return title if isinstance(title, str) and title else None


def first_video_url(html: str) -> str | None:
    """First plausible 11-character video id linked from a results page."""
    match = _VIDEO_ID.search(html)
    if not match:
        return None
    return f"https://www.youtube.com/watch?v={match.group(1)}"


# ---------------------------------------------------------------------------
# Clients
# ---------------------------------------------------------------------------

async def fetch_wiki_page(client: httpx.AsyncClient, term: str) -> LookupResult:
    url = httpx.URL(
        WIKI_SEARCH_URL,
        params={
            "action": "opensearch",
            "limit": 1,
            "namespace": 0,
            "format": "json",
            "search": term,
        },
    )
    resp = await fetch(client, url, "Wikipedia")
    if not resp.is_success:
        raise UpstreamError(f"Wikipedia request failed ({resp.status_code})")

    result = parse_opensearch(json_body(resp, "Wikipedia"))
    if result is None:
        raise NotFoundError("No Wikipedia page found")
    return result


async def fetch_youtube_oembed(client: httpx.AsyncClient, video_url: str) -> LookupResult:
    url = httpx.URL(YOUTUBE_OEMBED_URL, params={"url": video_url, "format": "json"})
    resp = await fetch(client, url, "YouTube oEmbed")
    if not resp.is_success:
        raise UpstreamError(f"oEmbed request failed ({resp.status_code})")

    title = parse_oembed(json_body(resp, "YouTube oEmbed"))
    if title is None:
        raise NotFoundError("No title found")
    return LookupResult(title=title, url=video_url)


async def fetch_youtube_top(client: httpx.AsyncClient, query: str) -> LookupResult:
    """Most-viewed video for a search query, titled via oEmbed when possible."""
    search_url = httpx.URL(
        YOUTUBE_RESULTS_URL,
        params={"search_query": query, "sp": YOUTUBE_SORT_BY_VIEWS},
    )
    extra = {"searchUrl": str(search_url)}

    resp = await fetch(client, search_url, "YouTube", headers=BROWSER_HEADERS, extra=extra)
    if not resp.is_success:
        raise UpstreamError(f"YouTube request failed ({resp.status_code})", extra=extra)

    video_url = first_video_url(resp.text)
    if video_url is None:
        raise NotFoundError("No video found", extra=extra)

    title = query
    try:
        title = (await fetch_youtube_oembed(client, video_url)).title
    except GardenError as e:
        logger.info("No oEmbed title for %s, using query text: %s", video_url, e)

    return LookupResult(title=title, url=video_url)
