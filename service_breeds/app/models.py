"""
API models for the Breeds Service.
"""

from typing import List

from pydantic import BaseModel, Field


class SubBreedsResponse(BaseModel):
    """Sub-breed lookup response."""
    breed: str
    sub_breeds: List[str]
    cached: bool = Field(False, description="Whether the answer was already cached before this request")


class CacheStatsResponse(BaseModel):
    """Sub-breed cache statistics."""
    calls_made: int
    cached_breeds: List[str]
    cache_size: int
    hits: int
    misses: int
