"""Simple in-memory TTL cache. No Redis needed.

Each lookup endpoint owns one instance, created in ``create_app`` and kept on
``app.state``. Note: each uvicorn worker has its own instances, so a term may
be fetched once per worker. Entries are evicted lazily on read; there is no
size bound and no background sweep.
"""

import time
from collections.abc import Callable
from typing import Any


class TTLCache:
    def __init__(self, clock: Callable[[], float] = time.time):
        self._clock = clock
        self._store: dict[str, tuple[float, Any]] = {}

    def get(self, key: str) -> Any | None:
        if key in self._store:
            expires_at, value = self._store[key]
            if self._clock() < expires_at:
                return value
            del self._store[key]
        return None

    def set(self, key: str, value: Any, ttl_seconds: int = 60) -> None:
        self._store[key] = (self._clock() + ttl_seconds, value)

    def __len__(self) -> int:
        return len(self._store)
