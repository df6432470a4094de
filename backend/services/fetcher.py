"""Cache-first fetch of parsed SWAPI resources."""

import json
import logging
from typing import Any

from errors import ParseError
from services.context import AppContext
from services.swapi_client import fetch_raw

logger = logging.getLogger(__name__)


async def fetch(ctx: AppContext, endpoint: str) -> Any:
    """Return the parsed JSON for an endpoint, from cache when present.

    The check-then-fetch is not atomic: two interleaved callers missing the
    same endpoint both hit the network and the last write wins.
    """
    cached = ctx.cache.get(endpoint)
    if cached is not None:
        if ctx.settings.debug:
            logger.info("Using cached data for %s", endpoint)
        return cached

    body = await fetch_raw(ctx, endpoint)
    try:
        data = json.loads(body)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        ctx.stats.errors += 1
        raise ParseError(endpoint, str(e)) from e

    ctx.cache.set(endpoint, data)
    if ctx.settings.debug:
        logger.info("Successfully fetched data for %s", endpoint)
        logger.info("Cache size: %d", len(ctx.cache))
    return data
