"""
Shared error handling for the Breed Catalog service.
"""

from typing import Dict, Any, Optional
from pydantic import BaseModel

from shared.logging import request_id_var


class ErrorResponse(BaseModel):
    """Standard error response format."""

    trace_id: Optional[str] = None
    code: str
    message: str
    details: Dict[str, Any] = {}


class BreedServiceException(Exception):
    """Base exception for Breed Catalog services."""

    status_code: int = 400

    def __init__(self, code: str, message: str, details: Optional[Dict[str, Any]] = None):
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def to_response(self) -> ErrorResponse:
        """Convert to error response."""
        return ErrorResponse(
            trace_id=request_id_var.get(),
            code=self.code,
            message=self.message,
            details=self.details
        )


class BreedNotFoundError(BreedServiceException):
    """No sub-breed data is available for a breed right now.

    Raised for a breed unknown to the catalog as well as for any transport,
    status or parse failure while asking the catalog about it.
    """

    status_code = 404

    def __init__(self, breed: str, details: Optional[Dict[str, Any]] = None):
        self.breed = breed
        super().__init__(
            "BREED_NOT_FOUND",
            f"Breed not found: {breed}",
            {"breed": breed, **(details or {})}
        )



class CacheDisabledError(BreedServiceException):
    """The service runs without a sub-breed cache."""

    status_code = 404

    def __init__(self, message: str = "Cache is disabled", details: Optional[Dict[str, Any]] = None):
        super().__init__("CACHE_DISABLED", message, details)
