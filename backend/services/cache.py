"""Simple in-memory response cache keyed by SWAPI endpoint.

Entries live for the whole process: no TTL, no size bound, no eviction.
Run uvicorn with a single worker; each worker would otherwise hold its own
cache and counters.
"""

from typing import Any


class ResponseCache:
    def __init__(self):
        self._store: dict[str, Any] = {}

    def get(self, key: str) -> Any | None:
        return self._store.get(key)

    def set(self, key: str, value: Any) -> None:
        self._store[key] = value

    def __len__(self) -> int:
        return len(self._store)
