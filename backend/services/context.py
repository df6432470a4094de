"""Process-wide application state shared by the routes and the fetch sequence."""

from dataclasses import dataclass, field

from fastapi import Request

from config import Settings
from services.cache import ResponseCache


@dataclass
class Stats:
    """Monotonic counters; reset only by restarting the process."""

    api_calls: int = 0
    data_size: int = 0
    errors: int = 0


@dataclass
class AppContext:
    settings: Settings
    cache: ResponseCache = field(default_factory=ResponseCache)
    stats: Stats = field(default_factory=Stats)
    # Character id for the next sequence; vehicles are fetched once it passes 4.
    last_id: int = 1

    def snapshot(self) -> dict:
        """Counters and configuration as served by /stats."""
        return {
            "api_calls": self.stats.api_calls,
            "cache_size": len(self.cache),
            "data_size": self.stats.data_size,
            "errors": self.stats.errors,
            "debug": self.settings.debug,
            "timeout": self.settings.timeout_ms,
        }


def get_context(request: Request) -> AppContext:
    """FastAPI dependency returning the context attached at app creation."""
    return request.app.state.context
