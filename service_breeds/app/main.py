"""
Breeds service for the Breed Catalog.
"""

import sys
import os
from typing import Optional

# Add shared directory to path
sys.path.append(os.path.join(os.path.dirname(__file__), '..', '..'))

from shared.base_service import BaseService
from shared.errors import CacheDisabledError

from .adapters.dog_api_client import DogApiBreedFetcher
from .caching.caching_fetcher import CachingBreedFetcher
from .fetchers.base import BreedFetcher, StaticBreedFetcher, SAMPLE_BREEDS
from .models import SubBreedsResponse, CacheStatsResponse


class BreedsService(BaseService):
    """Breeds service implementation."""

    def __init__(self, fetcher: Optional[BreedFetcher] = None):
        super().__init__("breeds", 8020)

        self.source = fetcher or self._build_source()
        self.fetcher: BreedFetcher = self.source
        self.cache: Optional[CachingBreedFetcher] = None
        if self.config.enable_cache:
            self.cache = CachingBreedFetcher(self.source, metrics=self.metrics)
            self.fetcher = self.cache

        self.logger.info(
            "Breeds service configured",
            backend=type(self.source).__name__,
            cache_enabled=self.cache is not None
        )

        self._setup_breeds_routes()

    def _build_source(self) -> BreedFetcher:
        """Build the delegate fetcher selected by configuration."""
        backend = self.config.fetcher_backend.lower()
        if backend == "static":
            return StaticBreedFetcher(SAMPLE_BREEDS)
        if backend == "remote":
            return DogApiBreedFetcher(
                self.config.dog_api_base_url,
                timeout=self.config.dog_api_timeout,
                metrics=self.metrics
            )
        raise ValueError(f"Unknown fetcher backend: {self.config.fetcher_backend}")

    def _setup_breeds_routes(self):
        """Set up breeds-specific routes."""

        @self.app.get("/")
        async def root():
            """Root endpoint."""
            return {
                "service": "breeds",
                "message": "Breed Catalog - Breeds Service",
                "version": "1.0.0",
                "capabilities": ["sub_breeds"] + (["caching"] if self.cache else [])
            }

        @self.app.get("/breeds/{breed}/sub-breeds", response_model=SubBreedsResponse)
        async def get_sub_breeds(breed: str):
            """Get the sub-breeds of a breed."""
            cached = self.cache is not None and self.cache.is_cached(breed)
            # BreedNotFoundError is rendered as a 404 by the shared handler
            sub_breeds = await self.fetcher.get_sub_breeds(breed)
            return SubBreedsResponse(breed=breed, sub_breeds=list(sub_breeds), cached=cached)

        @self.app.get("/cache/stats", response_model=CacheStatsResponse)
        async def cache_stats():
            """Get sub-breed cache statistics."""
            if self.cache is None:
                raise CacheDisabledError()
            return CacheStatsResponse(**self.cache.cache_stats())

    async def _check_dependencies(self):
        return {
            "fetcher": type(self.source).__name__,
            "cache": "enabled" if self.cache else "disabled"
        }


def create_app():
    """Create breeds service application."""
    service = BreedsService()
    return service.app


if __name__ == "__main__":
    service = BreedsService()
    service.run()
