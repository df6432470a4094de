"""The fixed fetch sequence triggered by GET /api.

Stages run serially: character, starships, planets, films, then a vehicle
once the cursor has moved past 4. A failure in the first four stages aborts
the run; the vehicle stage fails on its own.
"""

import json
import logging
from datetime import datetime, timezone
from typing import Any

from dateutil import parser as date_parser

from services.context import AppContext
from services.fetcher import fetch
from services.reports import (
    print_character,
    print_films,
    print_large_planets,
    print_starships,
    print_vehicle,
)
from services.resources import Character, Film, FilmPage, PlanetPage, StarshipPage, Vehicle

logger = logging.getLogger(__name__)

VEHICLE_MIN_ID = 5


def payload_size(value: Any) -> int:
    """Length of the compact JSON serialization of a parsed payload."""
    return len(json.dumps(value, separators=(",", ":"), ensure_ascii=False))


# Fields a bare year or month leaves out default to January 1st, as in JS Date.
_DATE_DEFAULT = datetime(1970, 1, 1)


def parse_release_date(value) -> datetime | None:
    """Parse ISO (full or partial, e.g. "1980", "1980-05") and textual dates."""
    if value is None or str(value).strip() == "":
        return None
    try:
        parsed = date_parser.parse(str(value), default=_DATE_DEFAULT)
    except (ValueError, OverflowError):
        return None
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
    return parsed


def _release_key(film: Film) -> tuple[int, datetime]:
    parsed = parse_release_date(film.release_date)
    return (0, parsed) if parsed is not None else (1, datetime.max)


def sort_films_by_release(films: list[Film | None]) -> list[Film]:
    """Stable ascending sort by release date; unparseable dates go last."""
    return sorted((f for f in films if f is not None), key=_release_key)


async def _fetch_counted(ctx: AppContext, endpoint: str) -> Any:
    data = await fetch(ctx, endpoint)
    ctx.stats.data_size += payload_size(data)
    return data


async def _fetch_vehicle_if_needed(ctx: AppContext) -> None:
    if ctx.last_id < VEHICLE_MIN_ID:
        return
    try:
        data = await _fetch_counted(ctx, f"vehicles/{ctx.last_id}")
        print_vehicle(Vehicle.model_validate(data))
        ctx.last_id += 1
    except Exception as e:
        logger.error("Failed to fetch vehicle: %s", e)
        ctx.stats.errors += 1


def log_stats(ctx: AppContext) -> None:
    logger.info("Stats:")
    logger.info("API Calls: %d", ctx.stats.api_calls)
    logger.info("Cache Size: %d", len(ctx.cache))
    logger.info("Total Data Size: %d bytes", ctx.stats.data_size)
    logger.info("Error Count: %d", ctx.stats.errors)


async def run_fetch_sequence(ctx: AppContext) -> bool:
    """Run one sequence invocation. Returns False if a stage 1-4 failure aborted it."""
    if ctx.settings.debug:
        logger.info("Starting data fetch...")
    ctx.stats.api_calls += 1

    completed = True
    try:
        person = await _fetch_counted(ctx, f"people/{ctx.last_id}")
        print_character(Character.model_validate(person))

        starships = await _fetch_counted(ctx, "starships/?page=1")
        print_starships(StarshipPage.model_validate(starships))

        planets = await _fetch_counted(ctx, "planets/?page=1")
        print_large_planets(PlanetPage.model_validate(planets))

        films = await _fetch_counted(ctx, "films/")
        print_films(sort_films_by_release(FilmPage.model_validate(films).results))
    except Exception as e:
        logger.error("Error: %s", e)
        ctx.stats.errors += 1
        completed = False

    if completed:
        await _fetch_vehicle_if_needed(ctx)

    if ctx.settings.debug:
        log_stats(ctx)
    return completed
