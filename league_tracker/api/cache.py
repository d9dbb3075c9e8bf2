"""In-memory response cache for Riot API requests."""

import time
from typing import Any, Callable, Dict, Optional, Tuple


class ResponseCache:
    """Keeps decoded JSON responses keyed by request URL for a fixed TTL.

    A TTL of 0 disables caching entirely. Expired entries are dropped on
    read and whenever a new response is stored.
    """

    def __init__(self, ttl: float = 120, clock: Callable[[], float] = time.monotonic) -> None:
        self.ttl = ttl
        self._clock = clock
        self._entries: Dict[str, Tuple[float, Any]] = {}

    @property
    def enabled(self) -> bool:
        return self.ttl > 0

    def _expired(self, stored_at: float, now: float) -> bool:
        return now - stored_at > self.ttl

    def get(self, key: str) -> Optional[Any]:
        if not self.enabled:
            return None
        entry = self._entries.get(key)
        if entry is None:
            return None
        stored_at, data = entry
        if self._expired(stored_at, self._clock()):
            del self._entries[key]
            return None
        return data

    def set(self, key: str, data: Any) -> None:
        if not self.enabled:
            return
        now = self._clock()
        self._entries = {
            k: entry for k, entry in self._entries.items()
            if not self._expired(entry[0], now)
        }
        self._entries[key] = (now, data)

    def __len__(self) -> int:
        return len(self._entries)
