"""Short-lived read cache scoped to a single request.

Entries expire ``ttl_ms`` milliseconds after insertion. Expired entries are not
removed, only overwritten by the next load for the same key. Writes to the
underlying rows never invalidate an entry, so a read may be stale for up to the
TTL.
"""
import logging
import time
from typing import Any, Callable, Iterator

from worktracker.config import settings

logger = logging.getLogger(__name__)

_MISSING = object()


def _monotonic_ms() -> float:
    return time.monotonic() * 1000


class RequestCache:
    def __init__(self, ttl_ms: int | None = None, clock: Callable[[], float] = _monotonic_ms):
        self.ttl_ms = settings.CACHE_TTL_MS if ttl_ms is None else ttl_ms
        self._clock = clock
        self._entries: dict[str, tuple[Any, float]] = {}

    def get(self, key: str, default: Any = None) -> Any:
        entry = self._entries.get(key)
        if entry is None:
            return default
        value, stored_at = entry
        if self._clock() - stored_at < self.ttl_ms:
            return value
        return default

    def set(self, key: str, value: Any) -> None:
        self._entries[key] = (value, self._clock())

    def get_or_load(self, key: str, loader: Callable[[], Any]) -> Any:
        cached = self.get(key, _MISSING)
        if cached is not _MISSING:
            logger.debug(f"Cache hit: {key}")
            return cached
        value = loader()
        self.set(key, value)
        return value

    def __contains__(self, key: str) -> bool:
        return self.get(key, _MISSING) is not _MISSING

    def __len__(self) -> int:
        return len(self._entries)


def get_request_cache() -> Iterator[RequestCache]:
    cache = RequestCache()
    try:
        yield cache
    finally:
        cache._entries.clear()
