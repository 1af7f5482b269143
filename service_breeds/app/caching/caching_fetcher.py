"""
Memoizing BreedFetcher decorator.
"""

import asyncio
from typing import Any, Dict, Optional, Tuple, TYPE_CHECKING
import sys
import os

# Add shared directory to path
sys.path.append(os.path.join(os.path.dirname(__file__), '..', '..', '..'))

from shared.logging import get_logger

from ..fetchers.base import BreedFetcher

if TYPE_CHECKING:  # pragma: no cover - imported for typing only
    from shared.metrics import MetricsCollector


CACHE_TYPE = "sub_breeds"


class CachingBreedFetcher(BreedFetcher):
    """
    BreedFetcher that caches the results of a delegate fetcher.

    Successful lookups are cached for the lifetime of this object and served
    without touching the delegate again. BreedNotFoundError is never cached:
    it propagates unchanged and the next call for that breed asks the delegate
    again. Every delegate call, failed or not, is counted in ``calls_made``.

    Cached values are stored and returned as tuples, so neither the delegate
    nor a caller can change what is cached.

    Concurrent lookups of the same breed are serialized so that a single miss
    produces a single delegate call. Lookups of different breeds do not wait
    on each other.
    """

    def __init__(self, fetcher: BreedFetcher, *, metrics: Optional["MetricsCollector"] = None):
        self.fetcher = fetcher
        self.metrics = metrics
        self.logger = get_logger("breeds.caching_fetcher")
        self._cache: Dict[str, Tuple[str, ...]] = {}
        self._locks: Dict[str, asyncio.Lock] = {}
        self._waiters: Dict[str, int] = {}
        self._calls_made = 0
        self._hits = 0

    async def get_sub_breeds(self, breed: str) -> Tuple[str, ...]:
        """Return the sub-breeds of ``breed``, asking the delegate only on a miss."""
        if breed in self._cache:
            return self._hit(breed)

        lock = self._locks.setdefault(breed, asyncio.Lock())
        self._waiters[breed] = self._waiters.get(breed, 0) + 1
        try:
            async with lock:
                # Another caller may have filled the entry while we waited
                if breed in self._cache:
                    return self._hit(breed)
                return await self._fetch(breed)
        finally:
            self._release(breed)

    async def _fetch(self, breed: str) -> Tuple[str, ...]:
        self._calls_made += 1
        if self.metrics:
            self.metrics.increment_counter("cache_misses_total", cache_type=CACHE_TYPE)
        self.logger.debug("Sub-breed cache miss", breed=breed, calls_made=self._calls_made)

        try:
            result = await self.fetcher.get_sub_breeds(breed)
        except Exception as exc:
            self.logger.info(
                "Delegate lookup failed; not caching",
                breed=breed,
                error=str(exc),
                error_type=type(exc).__name__
            )
            raise

        sub_breeds = tuple(result)
        self._cache[breed] = sub_breeds
        return sub_breeds

    def _release(self, breed: str) -> None:
        # A lock lives only while some caller holds it or waits on it
        remaining = self._waiters[breed] - 1
        if remaining:
            self._waiters[breed] = remaining
        else:
            del self._waiters[breed]
            del self._locks[breed]

    def _hit(self, breed: str) -> Tuple[str, ...]:
        self._hits += 1
        if self.metrics:
            self.metrics.increment_counter("cache_hits_total", cache_type=CACHE_TYPE)
        self.logger.debug("Sub-breed cache hit", breed=breed)
        return self._cache[breed]

    def get_calls_made(self) -> int:
        """Number of times the delegate fetcher has been called."""
        return self._calls_made

    @property
    def calls_made(self) -> int:
        return self._calls_made

    def is_cached(self, breed: str) -> bool:
        return breed in self._cache

    def cache_stats(self) -> Dict[str, Any]:
        """
        Get statistics about the cache.

        Returns:
            dict: calls_made, cached_breeds (sorted), cache_size, hits and
                misses. Misses equal calls_made.
        """
        return {
            "calls_made": self._calls_made,
            "cached_breeds": sorted(self._cache),
            "cache_size": len(self._cache),
            "hits": self._hits,
            "misses": self._calls_made,
        }
