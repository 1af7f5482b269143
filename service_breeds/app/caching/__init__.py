"""
Breeds caching package.

Provides the memoizing BreedFetcher used in front of the remote catalog.
Entries are never expired or evicted; failures are never cached.
"""

from .caching_fetcher import CachingBreedFetcher

__all__ = ["CachingBreedFetcher"]
