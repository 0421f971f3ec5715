from __future__ import annotations

import logging
from typing import Any, Protocol

import httpx

from ..restaurants.models import Coordinate, RawPlace
from .config import DEFAULT_PLACES_CONFIG, PlacesConfig
from .errors import (
    GeocodeNotFoundError,
    PlacesNetworkError,
    PlacesPayloadError,
    PlacesStatusError,
)

logger = logging.getLogger(__name__)


class PlaceSearch(Protocol):
    """What discovery needs from a place search service."""

    def nearby_places(self, coord: Coordinate, radius_m: int | None = None) -> list[RawPlace]:
        ...

    def geocode(self, address: str) -> Coordinate:
        ...

    def photo_url(self, reference: str) -> str:
        ...


def _parse_place(item: dict[str, Any]) -> RawPlace:
    try:
        location = item["geometry"]["location"]
        photos = item.get("photos") or []
        return RawPlace(
            place_id=item["place_id"],
            name=item.get("name", ""),
            coordinate=Coordinate(latitude=location["lat"], longitude=location["lng"]),
            popularity=item.get("user_ratings_total"),
            types=item.get("types") or [],
            vicinity=item.get("vicinity"),
            photo_reference=photos[0].get("photo_reference") if photos else None,
        )
    except (AttributeError, KeyError, TypeError, ValueError) as exc:
        raise PlacesPayloadError(
            "Malformed place record",
            {"place_id": item.get("place_id") if isinstance(item, dict) else None},
        ) from exc


class PlacesClient:
    """
    Synchronous client for the Google Places Nearby Search and Geocoding APIs.

    Example:
        with PlacesClient() as places:
            reference = places.geocode("1400 Defense Pentagon, Washington, DC")
            raw = places.nearby_places(reference)
    """

    def __init__(
        self,
        config: PlacesConfig = DEFAULT_PLACES_CONFIG,
        http: httpx.Client | None = None,
    ) -> None:
        self._config = config
        self._owns_http = http is None
        self._http = http or httpx.Client(timeout=httpx.Timeout(config.timeout))

    def __enter__(self) -> "PlacesClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def close(self) -> None:
        if self._owns_http:
            self._http.close()

    def _get(self, url: str, params: dict[str, Any]) -> dict[str, Any]:
        """
        GET a Google Maps JSON endpoint and return the decoded body.

        Raises:
            PlacesStatusError: No API key, or an HTTP error status.
            PlacesNetworkError: The request failed before a response arrived.
            PlacesPayloadError: The body is not a JSON object.
        """
        if not self._config.api_key:
            raise PlacesStatusError("REQUEST_DENIED", "Google Maps API key not configured")

        try:
            response = self._http.get(url, params={**params, "key": self._config.api_key})
        except httpx.RequestError as exc:
            logger.warning("Request to %s failed", url, exc_info=True)
            raise PlacesNetworkError(
                f"Network error: {exc.__class__.__name__}", {"url": url},
            ) from exc

        if response.status_code >= 400:
            logger.warning("Request to %s returned HTTP %s", url, response.status_code)
            raise PlacesStatusError(
                str(response.status_code),
                "HTTP error from Google Maps API",
                {"url": url, "status_code": response.status_code},
            )

        try:
            data = response.json()
        except ValueError as exc:
            raise PlacesPayloadError("Response is not valid JSON", {"url": url}) from exc
        if not isinstance(data, dict):
            raise PlacesPayloadError("Response is not a JSON object", {"url": url})
        return data

    def nearby_places(self, coord: Coordinate, radius_m: int | None = None) -> list[RawPlace]:
        """Restaurants around *coord*. Zero results is an empty list, not an error."""
        radius = radius_m if radius_m is not None else self._config.search_radius_m
        data = self._get(self._config.nearby_search_url, {
            "location": f"{coord.latitude},{coord.longitude}",
            "radius": radius,
            "type": self._config.place_type,
        })

        status = data.get("status")
        if status == "ZERO_RESULTS":
            return []
        if status != "OK":
            logger.warning("Nearby search returned status %s", status)
            raise PlacesStatusError(
                status or "UNKNOWN",
                data.get("error_message") or "Nearby search failed",
            )

        results = data.get("results")
        if not isinstance(results, list):
            raise PlacesPayloadError("Nearby search response has no results list")
        return [_parse_place(item) for item in results]

    def geocode(self, address: str) -> Coordinate:
        """Resolve *address* to the coordinate of its best match."""
        data = self._get(self._config.geocode_url, {"address": address})

        status = data.get("status")
        if status == "ZERO_RESULTS":
            raise GeocodeNotFoundError("No geocoding results found", {"address": address})
        if status != "OK":
            logger.warning("Geocoding returned status %s", status)
            raise PlacesStatusError(
                status or "UNKNOWN",
                data.get("error_message") or "Geocoding failed",
                {"address": address},
            )

        results = data.get("results") or []
        if not results:
            raise GeocodeNotFoundError("No geocoding results found", {"address": address})

        try:
            location = results[0]["geometry"]["location"]
            return Coordinate(latitude=location["lat"], longitude=location["lng"])
        except (KeyError, TypeError, ValueError) as exc:
            raise PlacesPayloadError("Malformed geocoding result", {"address": address}) from exc

    def photo_url(self, reference: str) -> str:
        url = httpx.URL(self._config.photo_url, params={
            "maxwidth": self._config.photo_max_width,
            "photoreference": reference,
            "key": self._config.api_key,
        })
        return str(url)
