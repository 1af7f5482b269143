"""
Fetchers package for the Breeds Service.

Defines the BreedFetcher contract every sub-breed source implements.
"""

from .base import BreedFetcher, StaticBreedFetcher

__all__ = ["BreedFetcher", "StaticBreedFetcher"]
