"""
BreedFetcher contract for the Breeds Service.
"""

from abc import ABC, abstractmethod
from typing import Dict, Iterable, List, Sequence
import sys
import os

# Add shared directory to path
sys.path.append(os.path.join(os.path.dirname(__file__), '..', '..', '..'))

from shared.errors import BreedNotFoundError


class BreedFetcher(ABC):
    """Source of sub-breed names for a breed."""

    @abstractmethod
    async def get_sub_breeds(self, breed: str) -> Sequence[str]:
        """
        Fetch the sub-breeds of ``breed``.

        Returns the sub-breed names in source order, possibly empty. Raises
        BreedNotFoundError when the breed is unknown or the source cannot
        answer for any reason.
        """


class StaticBreedFetcher(BreedFetcher):
    """BreedFetcher backed by an in-memory mapping."""

    def __init__(self, breeds: Dict[str, Iterable[str]]):
        self._breeds: Dict[str, List[str]] = {
            breed: list(sub_breeds) for breed, sub_breeds in breeds.items()
        }

    async def get_sub_breeds(self, breed: str) -> List[str]:
        if breed not in self._breeds:
            raise BreedNotFoundError(breed)
        return list(self._breeds[breed])


# Snapshot of a few dog.ceo entries, served when the remote catalog is disabled
SAMPLE_BREEDS: Dict[str, List[str]] = {
    "bulldog": ["boston", "english", "french"],
    "hound": ["afghan", "basset", "blood", "english", "ibizan", "plott", "walker"],
    "husky": [],
    "retriever": ["chesapeake", "curly", "flatcoated", "golden"],
    "terrier": ["american", "australian", "bedlington", "border", "cairn", "dandie"],
}
