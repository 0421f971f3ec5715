from __future__ import annotations

from datetime import date
from typing import Iterator

from fastapi import Depends, FastAPI, HTTPException, Query

from .geo import meters_to_miles
from .places.client import PlacesClient, PlaceSearch
from .places.errors import (
    GeocodeNotFoundError,
    PlacesError,
    PlacesNetworkError,
)
from .restaurants.config import DEFAULT_DISCOVERY_CONFIG
from .restaurants.history import VolumeHistorySource, VolumeHistorySynthesizer
from .restaurants.landmarks import DEFAULT_LANDMARK_INDEX
from .restaurants.models import (
    Coordinate,
    DiscoveryResponse,
    NearbyResponse,
    VolumeHistoryResponse,
)
from .restaurants.query import FILTER_NAMES, detail_markers
from .restaurants.service import (
    discover_restaurants,
    filter_and_sort,
    markers_for,
    nearby_landmarks,
    volume_history_for,
)

app = FastAPI(title="WaitWatch Restaurant API", version="1.0.0")


# ── Dependencies ─────────────────────────────────────────────────────────


def get_place_search() -> Iterator[PlaceSearch]:
    with PlacesClient() as places:
        yield places


def get_history_source() -> VolumeHistorySource:
    return VolumeHistorySynthesizer()


def _http_error(exc: PlacesError) -> HTTPException:
    if isinstance(exc, GeocodeNotFoundError):
        return HTTPException(status_code=404, detail=exc.message)
    if isinstance(exc, PlacesNetworkError):
        return HTTPException(status_code=503, detail=exc.message)
    return HTTPException(status_code=502, detail=exc.message)


def _resolve_reference(
    lat: float | None,
    lng: float | None,
    address: str | None,
    search: PlaceSearch,
) -> Coordinate:
    if (lat is None) != (lng is None):
        raise HTTPException(status_code=422, detail="lat and lng must be given together")
    if lat is not None and lng is not None:
        return Coordinate(latitude=lat, longitude=lng)
    if address:
        return search.geocode(address)
    return Coordinate(
        latitude=DEFAULT_DISCOVERY_CONFIG.default_latitude,
        longitude=DEFAULT_DISCOVERY_CONFIG.default_longitude,
    )


# ── Public endpoints ─────────────────────────────────────────────────────


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/landmarks")
def landmarks() -> dict:
    primary = DEFAULT_LANDMARK_INDEX.primary
    return {
        "primary": primary.name if primary else None,
        "landmarks": [lm.model_dump(mode="json") for lm in DEFAULT_LANDMARK_INDEX.landmarks],
        "filters": list(FILTER_NAMES),
    }


@app.get("/geocode", response_model=Coordinate)
def geocode(
    address: str = Query(..., min_length=1),
    search: PlaceSearch = Depends(get_place_search),
) -> Coordinate:
    try:
        return search.geocode(address)
    except PlacesError as exc:
        raise _http_error(exc) from exc


# ── Discovery endpoints ──────────────────────────────────────────────────


@app.get("/restaurants", response_model=DiscoveryResponse)
def restaurants(
    lat: float | None = Query(default=None, ge=-90.0, le=90.0),
    lng: float | None = Query(default=None, ge=-180.0, le=180.0),
    address: str | None = None,
    filter: str = "all",
    search: PlaceSearch = Depends(get_place_search),
) -> DiscoveryResponse:
    try:
        reference = _resolve_reference(lat, lng, address, search)
        discovered = discover_restaurants(reference, search)
    except PlacesError as exc:
        raise _http_error(exc) from exc

    ordered = filter_and_sort(discovered, filter)
    return DiscoveryResponse(
        reference=reference,
        filter=filter,
        restaurants=ordered,
        markers=markers_for(ordered),
        total_candidates=len(discovered),
    )


@app.get("/landmarks/nearby", response_model=NearbyResponse)
def landmarks_nearby(
    lat: float = Query(..., ge=-90.0, le=90.0),
    lng: float = Query(..., ge=-180.0, le=180.0),
    radius_m: float = Query(default=DEFAULT_DISCOVERY_CONFIG.nearby_radius_m, ge=0.0),
) -> NearbyResponse:
    subject = Coordinate(latitude=lat, longitude=lng)
    radius_miles = meters_to_miles(radius_m)
    locations = nearby_landmarks(subject, radius_miles)
    return NearbyResponse(
        subject=subject,
        radius_miles=round(radius_miles, 2),
        locations=locations,
        markers=detail_markers(subject, locations),
    )


@app.get("/restaurants/{restaurant_id}/volume-history", response_model=VolumeHistoryResponse)
def volume_history(
    restaurant_id: str,
    day: date | None = None,
    source: VolumeHistorySource = Depends(get_history_source),
) -> VolumeHistoryResponse:
    day = day or date.today()
    return VolumeHistoryResponse(
        restaurant_id=restaurant_id,
        day=day,
        samples=volume_history_for(restaurant_id, day, source),
    )
