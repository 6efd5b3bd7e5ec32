import threading
import time
from collections import OrderedDict
from dataclasses import dataclass
from typing import Optional, Tuple

_MISSING = object()


@dataclass(frozen=True)
class _RobotsCacheEntry:
    rules: Optional[Tuple[str, ...]]
    stored_at: float


class RobotsCache:
    """
    Thread-safe cache of parsed Disallow rules keyed by robots.txt URL.

    A cached value of None records that the fetch failed, so the site is
    treated as allowing everything until the entry expires.
    """

    def __init__(self, *, max_size: int = 2048, ttl_seconds: int = 3600, clock=time.monotonic):
        """Create a robots.txt cache.

        - `max_size` bounds the number of robots.txt URLs cached (LRU eviction).
        - `ttl_seconds` bounds staleness; entries older than TTL are treated as missing.
        """
        self._max_size = int(max_size) if max_size is not None else 2048
        if self._max_size <= 0:
            self._max_size = 1

        self._ttl_seconds = int(ttl_seconds) if ttl_seconds is not None else 3600
        if self._ttl_seconds <= 0:
            # Treat non-positive TTL as "don't cache" by expiring immediately.
            self._ttl_seconds = 0

        self._clock = clock
        self._lock = threading.Lock()
        self._cache: "OrderedDict[str, _RobotsCacheEntry]" = OrderedDict()

    def _is_expired(self, entry: _RobotsCacheEntry) -> bool:
        if self._ttl_seconds == 0:
            return True
        return (self._clock() - entry.stored_at) > self._ttl_seconds

    def _evict_if_needed(self) -> None:
        while len(self._cache) > self._max_size:
            self._cache.popitem(last=False)

    def get(self, robots_url: str, default=_MISSING):
        """Return cached rules for `robots_url`, or `default` if not cached.

        When no default is given a miss raises KeyError, which keeps a cached
        None (failed fetch) distinguishable from a miss.
        """
        with self._lock:
            entry = self._cache.get(robots_url)
            if entry is not None and self._is_expired(entry):
                del self._cache[robots_url]
                entry = None
            if entry is None:
                if default is _MISSING:
                    raise KeyError(robots_url)
                return default
            # Refresh LRU order on hit
            self._cache.move_to_end(robots_url)
            return entry.rules

    def set(self, robots_url: str, rules: Optional[Tuple[str, ...]]) -> None:
        """Cache the Disallow rules for `robots_url`. None indicates fetch failed."""
        with self._lock:
            self._cache[robots_url] = _RobotsCacheEntry(rules=rules, stored_at=self._clock())
            self._cache.move_to_end(robots_url)
            self._evict_if_needed()

    def __len__(self) -> int:
        with self._lock:
            return len(self._cache)
