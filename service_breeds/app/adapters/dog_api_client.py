"""
dog.ceo catalog client for the Breeds Service.
"""

from typing import Any, List, NoReturn, Optional, TYPE_CHECKING
import httpx
import sys
import os

# Add shared directory to path
sys.path.append(os.path.join(os.path.dirname(__file__), '..', '..', '..'))

from shared.logging import get_logger
from shared.errors import BreedNotFoundError

from ..fetchers.base import BreedFetcher

if TYPE_CHECKING:  # pragma: no cover - imported for typing only
    from shared.metrics import MetricsCollector


DEFAULT_DOG_API_URL = "https://dog.ceo/api"


class DogApiBreedFetcher(BreedFetcher):
    """
    BreedFetcher backed by the dog.ceo API.

    Every failure (unknown breed, non-2xx status, transport error, unreadable
    body) is reported as BreedNotFoundError so callers only handle one kind.
    """

    def __init__(
        self,
        base_url: str = DEFAULT_DOG_API_URL,
        timeout: float = 10.0,
        *,
        metrics: Optional["MetricsCollector"] = None,
    ):
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout
        self.metrics = metrics
        self.logger = get_logger("breeds.dog_api_client")

    def breed_url(self, breed: str) -> str:
        """Build the sub-breed list URL for a breed."""
        return f"{self.base_url}/breed/{breed}/list"

    async def get_sub_breeds(self, breed: str) -> List[str]:
        """Fetch the sub-breeds of a breed from dog.ceo."""
        url = self.breed_url(breed)

        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.get(url)
        except httpx.HTTPError as exc:
            self._fail(breed, url, "http_error", error=str(exc))

        if not response.content:
            self._fail(breed, url, "empty_body", status_code=response.status_code)

        if not response.is_success:
            self._fail(breed, url, "bad_status", status_code=response.status_code)

        try:
            payload = response.json()
        except ValueError as exc:
            self._fail(breed, url, "invalid_json", error=str(exc))

        if not isinstance(payload, dict):
            self._fail(breed, url, "invalid_json", error="response is not a JSON object")

        status = payload.get("status", "")
        if status != "success":
            # {"status":"error","message":"Breed not found (main breed does not exist)","code":404}
            self._fail(breed, url, "error_status", status=status, message=payload.get("message"))

        message = payload.get("message")
        if not isinstance(message, list):
            self.logger.warning(
                "Catalog success without a sub-breed array; treating as empty",
                breed=breed,
                url=url
            )
            self._record("success")
            return []

        sub_breeds = self._parse_sub_breeds(breed, url, message)
        self.logger.debug("Sub-breeds retrieved", breed=breed, count=len(sub_breeds))
        self._record("success")
        return sub_breeds

    def _parse_sub_breeds(self, breed: str, url: str, message: List[Any]) -> List[str]:
        sub_breeds = []
        for item in message:
            if not isinstance(item, str):
                self._fail(breed, url, "invalid_json", error=f"non-string sub-breed {item!r}")
            sub_breeds.append(item)
        return sub_breeds

    def _fail(self, breed: str, url: str, reason: str, **context: Any) -> NoReturn:
        self.logger.info("Catalog lookup failed", breed=breed, url=url, reason=reason, **context)
        self._record(reason)
        raise BreedNotFoundError(breed, details={"reason": reason})

    def _record(self, outcome: str) -> None:
        if self.metrics:
            self.metrics.increment_counter("remote_fetch_total", outcome=outcome)
