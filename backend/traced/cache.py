"""
Thread-safe response caching for the Traced API.

Caches are size-bounded (maxsize) and time-bounded (ttl seconds). The
catalog is immutable, so a rendered listing only changes with its query
context and the reference day; callers put both in the key.
"""
import threading

from cachetools import TTLCache

CARDS_CACHE = "vendor_cards"


class AppCache:
    """Application-wide cache registry. Thread-safe with size and TTL bounds."""

    def __init__(self):
        self._lock = threading.Lock()
        self._caches: dict[str, TTLCache] = {}

    def get_cache(self, name: str, maxsize: int = 256, ttl: int = 600) -> TTLCache:
        """Get or create a named TTLCache."""
        with self._lock:
            if name not in self._caches:
                self._caches[name] = TTLCache(maxsize=maxsize, ttl=ttl)
            return self._caches[name]

    def get(self, cache_name: str, key: str):
        """Get a cached value, or None if missing or expired."""
        cache = self._caches.get(cache_name)
        if cache is None:
            return None
        with self._lock:
            return cache.get(key)

    def set(self, cache_name: str, key: str, value, maxsize: int = 256, ttl: int = 600):
        """Store a value, creating the named cache if needed."""
        cache = self.get_cache(cache_name, maxsize=maxsize, ttl=ttl)
        with self._lock:
            cache[key] = value

    def invalidate(self, cache_name: str, key: str | None = None):
        """Drop one key, or the whole named cache when key is None."""
        cache = self._caches.get(cache_name)
        if cache is None:
            return
        with self._lock:
            if key is None:
                cache.clear()
            else:
                cache.pop(key, None)

    def stats(self) -> dict:
        """Cache sizes and bounds for /metrics."""
        return {
            name: {"size": len(cache), "maxsize": cache.maxsize, "ttl": cache.ttl}
            for name, cache in self._caches.items()
        }


# Global cache instance
app_cache = AppCache()
