from __future__ import annotations

import time
from collections import OrderedDict
from collections.abc import Callable
from typing import Any

DEFAULT_MAX_ITEMS = 200
DEFAULT_TTL_MS = 24 * 60 * 60 * 1000  # 24 hours

_MISSING = object()


def _monotonic_ms() -> float:
    return time.monotonic() * 1000


class LruTtlCache:
    """In-process LRU cache with a per-entry TTL.

    The ordering of the underlying OrderedDict is the recency order: the first
    key is the least recently used, the last key the most recently used.
    Expiry is lazy; expired entries are only purged by get/has/size.
    No locking: all operations are synchronous and run on the event loop.
    """

    def __init__(
        self,
        max_items: int = DEFAULT_MAX_ITEMS,
        ttl_ms: int = DEFAULT_TTL_MS,
        clock: Callable[[], float] | None = None,
    ) -> None:
        self._max_items = max_items
        self._ttl_ms = ttl_ms  # <= 0 means entries never expire
        self._clock = clock or _monotonic_ms
        self._store: OrderedDict[str, tuple[Any, float | None]] = OrderedDict()
        # Value tuple: (data, expires_at_ms or None)

    @property
    def max_items(self) -> int:
        return self._max_items

    @property
    def ttl_ms(self) -> int:
        return self._ttl_ms

    def _is_expired(self, expires_at: float | None, now: float) -> bool:
        return expires_at is not None and now > expires_at

    def get(self, key: str, default: Any = None) -> Any:
        """Return the cached value and mark it most recently used.

        Returns ``default`` when the key is missing or expired; an expired entry
        is removed on the way out.
        """
        entry = self._store.get(key)
        if entry is None:
            return default
        data, expires_at = entry
        if self._is_expired(expires_at, self._clock()):
            del self._store[key]
            return default
        self._store.move_to_end(key)
        return data

    def set(self, key: str, value: Any) -> None:
        """Store value as the freshest entry, evicting the LRU entries over capacity."""
        self._store.pop(key, None)
        expires_at = self._clock() + self._ttl_ms if self._ttl_ms > 0 else None
        self._store[key] = (value, expires_at)
        # Eviction ignores expiry: the oldest entry goes first.
        while len(self._store) > self._max_items:
            self._store.popitem(last=False)

    def has(self, key: str) -> bool:
        """Same as get(): refreshes recency and purges the key if expired."""
        return self.get(key, _MISSING) is not _MISSING

    def delete(self, key: str) -> bool:
        """Remove a key; return True when something was removed."""
        return self._store.pop(key, _MISSING) is not _MISSING

    def clear(self) -> None:
        """Remove all cached entries."""
        self._store.clear()

    def size(self) -> int:
        """Purge every expired entry, then return the number of entries left."""
        now = self._clock()
        expired_keys = [
            k for k, (_, expires_at) in self._store.items() if self._is_expired(expires_at, now)
        ]
        for k in expired_keys:
            del self._store[k]
        return len(self._store)

    def keys(self) -> list[str]:
        """Tracked keys, least recently used first. Does not purge expired entries."""
        return list(self._store)
