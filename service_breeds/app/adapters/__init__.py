"""
Adapters package for the Breeds Service.

Contains the HTTP client for the remote dog.ceo catalog. Adapters map every
transport and payload failure onto the shared BreedNotFoundError.
"""

from .dog_api_client import DogApiBreedFetcher

__all__ = ["DogApiBreedFetcher"]
