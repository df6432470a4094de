"""Raw HTTP access to the Star Wars API (swapi.dev).

One GET per call, no retries. TLS certificate verification is disabled to
match the deployed behaviour against swapi.dev; see DESIGN.md.
"""

import logging

import httpx

from config import Settings
from errors import HttpStatusError, RequestTimeoutError, TransportError
from services.context import AppContext

logger = logging.getLogger(__name__)

USER_AGENT = "swapi-demo/1.0"


def build_async_client(settings: Settings) -> httpx.AsyncClient:
    """Create an `httpx.AsyncClient` with the configured timeout."""
    return httpx.AsyncClient(
        timeout=httpx.Timeout(settings.timeout_seconds),
        verify=False,
        headers={"User-Agent": USER_AGENT, "Accept": "application/json"},
    )


def build_url(settings: Settings, endpoint: str) -> str:
    # Endpoint is appended verbatim, query string included.
    return f"{settings.base_url}{endpoint}"


async def fetch_raw(ctx: AppContext, endpoint: str) -> bytes:
    """GET an endpoint and return the full response body.

    Raises HttpStatusError, RequestTimeoutError or TransportError; each one
    is counted in ctx.stats.errors.
    """
    url = build_url(ctx.settings, endpoint)
    try:
        async with build_async_client(ctx.settings) as client:
            resp = await client.get(url)
    except httpx.TimeoutException as e:
        ctx.stats.errors += 1
        logger.warning("Timeout fetching %s: %s", url, e)
        raise RequestTimeoutError(endpoint) from e
    except httpx.TransportError as e:
        ctx.stats.errors += 1
        logger.warning("Network error fetching %s: %s", url, e)
        raise TransportError(endpoint, str(e) or type(e).__name__) from e
    except (httpx.HTTPError, httpx.InvalidURL) as e:
        # Decoding, protocol and URL errors.
        ctx.stats.errors += 1
        logger.warning("Request failed for %s: %s", url, e)
        raise TransportError(endpoint, str(e) or type(e).__name__) from e

    if resp.status_code >= 400:
        ctx.stats.errors += 1
        raise HttpStatusError(endpoint, resp.status_code)

    return resp.content
