"""Centralized configuration — env vars plus the two startup CLI flags."""

import argparse
import logging
import os
import re
import sys

logger = logging.getLogger(__name__)

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def parse_leading_int(value) -> int | None:
    """Parse the leading integer of a value, e.g. "12abc" -> 12.

    Returns None when the value does not start with digits ("unknown", "", None).
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if value is None:
        return None
    match = _LEADING_INT.match(str(value))
    return int(match.group(1)) if match else None


class Settings:
    """Application settings loaded from environment variables."""

    def __init__(self):
        self.port: int = int(os.getenv("PORT", "3000"))
        self.host: str = os.getenv("HOST", "0.0.0.0")
        self.environment: str = os.getenv("ENVIRONMENT", "local")

        # SWAPI
        self.base_url: str = os.getenv("SWAPI_BASE_URL", "https://swapi.dev/api/")
        self.timeout_ms: int | None = parse_leading_int(os.getenv("SWAPI_TIMEOUT_MS", "5000"))
        self.debug: bool = True

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    @property
    def timeout_seconds(self) -> float | None:
        """Timeout for httpx; None (no timeout) when unset or not positive."""
        if self.timeout_ms is None or self.timeout_ms <= 0:
            return None
        return self.timeout_ms / 1000

    def apply_cli_args(self, argv: list[str] | None = None) -> None:
        """Apply --no-debug and --timeout <ms>. Unknown arguments are ignored.

        The token after --timeout is always taken as its value, even when it
        looks like another flag.
        """
        if argv is None:
            argv = sys.argv[1:]
        parser = argparse.ArgumentParser(prog="swapi-demo", add_help=False, allow_abbrev=False)
        parser.add_argument("--no-debug", action="store_true")
        args, _unknown = parser.parse_known_args(argv)

        if args.no_debug:
            self.debug = False
        if "--timeout" in argv:
            index = argv.index("--timeout")
            if index < len(argv) - 1:
                self._apply_timeout(argv[index + 1])

    def _apply_timeout(self, raw: str) -> None:
        # A bad value disables the timeout instead of failing fast.
        self.timeout_ms = parse_leading_int(raw)
        if self.timeout_ms is None:
            logger.warning("Non-numeric --timeout %r: request timeout disabled", raw)
        elif self.timeout_ms <= 0:
            logger.warning("Non-positive --timeout %d: request timeout disabled", self.timeout_ms)


settings = Settings()
