from __future__ import annotations

from typing import Any


class PlacesError(Exception):
    """Base exception for place search and geocoding failures."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class PlacesNetworkError(PlacesError):
    """The request never got a response (connection error, timeout)."""


class PlacesStatusError(PlacesError):
    """The service answered, but not with success."""

    def __init__(self, status: str, message: str, details: dict[str, Any] | None = None):
        self.status = status
        super().__init__(f"[{status}] {message}", details)


class PlacesPayloadError(PlacesError):
    """The response body could not be understood."""


class GeocodeNotFoundError(PlacesError):
    """Geocoding found no match for the address."""
