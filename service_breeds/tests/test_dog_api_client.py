"""
Unit tests for the dog.ceo catalog client.
"""

import pytest
import httpx
from unittest.mock import AsyncMock, patch
import json

import sys
import os
sys.path.append(os.path.join(os.path.dirname(__file__), '..', '..'))

from service_breeds.app.adapters.dog_api_client import DogApiBreedFetcher
from shared.errors import BreedNotFoundError
from shared.metrics import MetricsCollector


BASE_URL = "https://dog.ceo/api"


def make_response(status_code: int, body, url: str = f"{BASE_URL}/breed/hound/list") -> httpx.Response:
    """Build an httpx response with a JSON (or raw string) body."""
    content = body if isinstance(body, (str, bytes)) else json.dumps(body)
    return httpx.Response(
        status_code=status_code,
        content=content,
        request=httpx.Request("GET", url)
    )


class TestDogApiBreedFetcher:
    """Test cases for DogApiBreedFetcher."""

    @pytest.fixture
    def dog_api(self):
        """Create DogApiBreedFetcher instance."""
        return DogApiBreedFetcher(BASE_URL)

    def test_breed_url(self, dog_api):
        """Test URL construction."""
        assert dog_api.breed_url("hound") == "https://dog.ceo/api/breed/hound/list"
        assert DogApiBreedFetcher("http://localhost:9000/api/").breed_url("pug") == \
            "http://localhost:9000/api/breed/pug/list"

    @pytest.mark.asyncio
    async def test_get_sub_breeds_success(self, dog_api):
        """Test successful sub-breed lookup."""
        body = {"message": ["afghan", "basset", "blood", "english"], "status": "success"}

        with patch('httpx.AsyncClient') as mock_client:
            mock_get = AsyncMock(return_value=make_response(200, body))
            mock_client.return_value.__aenter__.return_value.get = mock_get

            result = await dog_api.get_sub_breeds("hound")

            assert result == ["afghan", "basset", "blood", "english"]
            mock_get.assert_awaited_once_with("https://dog.ceo/api/breed/hound/list")
            mock_client.assert_called_once_with(timeout=10.0)

    @pytest.mark.asyncio
    async def test_get_sub_breeds_empty(self, dog_api):
        """Test a breed without sub-breeds."""
        body = {"message": [], "status": "success"}

        with patch('httpx.AsyncClient') as mock_client:
            mock_client.return_value.__aenter__.return_value.get = AsyncMock(
                return_value=make_response(200, body)
            )

            assert await dog_api.get_sub_breeds("husky") == []

    @pytest.mark.asyncio
    async def test_non_array_message_is_empty(self, dog_api):
        """Test a success payload without an array is treated as no sub-breeds."""
        body = {"message": {"unexpected": "shape"}, "status": "success"}

        with patch('httpx.AsyncClient') as mock_client:
            mock_client.return_value.__aenter__.return_value.get = AsyncMock(
                return_value=make_response(200, body)
            )

            assert await dog_api.get_sub_breeds("hound") == []

    @pytest.mark.asyncio
    async def test_missing_message_is_empty(self, dog_api):
        """Test a success payload without a message field."""
        with patch('httpx.AsyncClient') as mock_client:
            mock_client.return_value.__aenter__.return_value.get = AsyncMock(
                return_value=make_response(200, {"status": "success"})
            )

            assert await dog_api.get_sub_breeds("hound") == []

    @pytest.mark.asyncio
    async def test_error_status_payload(self, dog_api):
        """Test the catalog's error envelope maps to BreedNotFoundError."""
        body = {"status": "error", "message": "Breed not found (main breed does not exist)", "code": 404}

        with patch('httpx.AsyncClient') as mock_client:
            mock_client.return_value.__aenter__.return_value.get = AsyncMock(
                return_value=make_response(200, body)
            )

            with pytest.raises(BreedNotFoundError) as exc_info:
                await dog_api.get_sub_breeds("unknownbreed")

            assert exc_info.value.breed == "unknownbreed"
            assert exc_info.value.details["reason"] == "error_status"

    @pytest.mark.asyncio
    async def test_missing_status(self, dog_api):
        """Test a payload without a status field."""
        with patch('httpx.AsyncClient') as mock_client:
            mock_client.return_value.__aenter__.return_value.get = AsyncMock(
                return_value=make_response(200, {"message": ["afghan"]})
            )

            with pytest.raises(BreedNotFoundError):
                await dog_api.get_sub_breeds("hound")

    @pytest.mark.asyncio
    async def test_http_404(self, dog_api):
        """Test non-2xx response."""
        body = {"status": "error", "message": "Breed not found (main breed does not exist)", "code": 404}

        with patch('httpx.AsyncClient') as mock_client:
            mock_client.return_value.__aenter__.return_value.get = AsyncMock(
                return_value=make_response(404, body)
            )

            with pytest.raises(BreedNotFoundError) as exc_info:
                await dog_api.get_sub_breeds("unknownbreed")

            assert exc_info.value.details["reason"] == "bad_status"

    @pytest.mark.asyncio
    async def test_http_500_with_success_body(self, dog_api):
        """Test a server error is a failure regardless of the body."""
        with patch('httpx.AsyncClient') as mock_client:
            mock_client.return_value.__aenter__.return_value.get = AsyncMock(
                return_value=make_response(500, {"status": "success", "message": ["afghan"]})
            )

            with pytest.raises(BreedNotFoundError):
                await dog_api.get_sub_breeds("hound")

    @pytest.mark.asyncio
    async def test_empty_body(self, dog_api):
        """Test an empty response body."""
        with patch('httpx.AsyncClient') as mock_client:
            mock_client.return_value.__aenter__.return_value.get = AsyncMock(
                return_value=make_response(200, b"")
            )

            with pytest.raises(BreedNotFoundError) as exc_info:
                await dog_api.get_sub_breeds("hound")

            assert exc_info.value.details["reason"] == "empty_body"

    @pytest.mark.asyncio
    async def test_invalid_json(self, dog_api):
        """Test an unparsable response body."""
        with patch('httpx.AsyncClient') as mock_client:
            mock_client.return_value.__aenter__.return_value.get = AsyncMock(
                return_value=make_response(200, "<html>oops</html>")
            )

            with pytest.raises(BreedNotFoundError) as exc_info:
                await dog_api.get_sub_breeds("hound")

            assert exc_info.value.details["reason"] == "invalid_json"

    @pytest.mark.asyncio
    async def test_non_object_json(self, dog_api):
        """Test a JSON body that is not an object."""
        with patch('httpx.AsyncClient') as mock_client:
            mock_client.return_value.__aenter__.return_value.get = AsyncMock(
                return_value=make_response(200, ["afghan"])
            )

            with pytest.raises(BreedNotFoundError):
                await dog_api.get_sub_breeds("hound")

    @pytest.mark.asyncio
    async def test_non_string_sub_breed(self, dog_api):
        """Test a sub-breed array holding something other than strings."""
        with patch('httpx.AsyncClient') as mock_client:
            mock_client.return_value.__aenter__.return_value.get = AsyncMock(
                return_value=make_response(200, {"status": "success", "message": ["afghan", 7]})
            )

            with pytest.raises(BreedNotFoundError):
                await dog_api.get_sub_breeds("hound")

    @pytest.mark.asyncio
    async def test_http_error(self, dog_api):
        """Test HTTP error during lookup."""
        with patch('httpx.AsyncClient') as mock_client:
            mock_client.return_value.__aenter__.return_value.get = AsyncMock(
                side_effect=httpx.HTTPError("Connection failed")
            )

            with pytest.raises(BreedNotFoundError) as exc_info:
                await dog_api.get_sub_breeds("hound")

            assert exc_info.value.details["reason"] == "http_error"

    @pytest.mark.asyncio
    async def test_timeout(self, dog_api):
        """Test a timed out lookup."""
        with patch('httpx.AsyncClient') as mock_client:
            mock_client.return_value.__aenter__.return_value.get = AsyncMock(
                side_effect=httpx.ReadTimeout("timed out")
            )

            with pytest.raises(BreedNotFoundError):
                await dog_api.get_sub_breeds("hound")

    @pytest.mark.asyncio
    async def test_records_fetch_outcomes(self):
        """Test remote fetch outcome counters."""
        metrics = MetricsCollector("breeds")
        dog_api = DogApiBreedFetcher(BASE_URL, metrics=metrics)

        with patch('httpx.AsyncClient') as mock_client:
            mock_client.return_value.__aenter__.return_value.get = AsyncMock(
                side_effect=[
                    make_response(200, {"status": "success", "message": ["afghan"]}),
                    make_response(404, {"status": "error", "message": "nope"}),
                ]
            )

            await dog_api.get_sub_breeds("hound")
            with pytest.raises(BreedNotFoundError):
                await dog_api.get_sub_breeds("nope")

        assert metrics.registry.get_sample_value("remote_fetch_total", {"outcome": "success"}) == 1.0
        assert metrics.registry.get_sample_value("remote_fetch_total", {"outcome": "bad_status"}) == 1.0
