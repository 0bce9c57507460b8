"""Outbound GET shared by the proxy clients.

Maps transport failures onto the API error taxonomy. Status checking is left
to the caller since each provider words its failures differently.
"""

import asyncio
import logging

import httpx

from errors import NetworkError, UpstreamError, UpstreamTimeoutError

logger = logging.getLogger(__name__)

# Always ask intermediaries for a fresh copy; caching is done by us.
NO_CACHE_HEADERS = {"Cache-Control": "no-cache", "Accept": "application/json"}


async def fetch(
    client: httpx.AsyncClient,
    url: str | httpx.URL,
    service: str,
    headers: dict | None = None,
    extra: dict | None = None,
    deadline: float | None = None,
) -> httpx.Response:
    """GET ``url``. ``deadline`` bounds the whole exchange, on top of the client's per-phase timeouts."""
    request = client.get(url, headers={**NO_CACHE_HEADERS, **(headers or {})})
    try:
        if deadline is None:
            return await request
        return await asyncio.wait_for(request, timeout=deadline)
    except (httpx.TimeoutException, asyncio.TimeoutError) as e:
        logger.warning("%s request timed out: %r", service, e)
        raise UpstreamTimeoutError(f"{service} request timed out. Please try again.", extra=extra) from e
    except httpx.TransportError as e:
        logger.warning("Network error calling %s: %s", service, e)
        raise NetworkError(f"Network error: unable to reach {service}", extra=extra) from e


def json_body(resp: httpx.Response, service: str):
    try:
        return resp.json()
    except ValueError as e:
        logger.warning("Invalid JSON from %s: %s", service, e)
        raise UpstreamError(f"Invalid response from {service}") from e
