from __future__ import annotations

from datetime import date
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class Coordinate(BaseModel):
    model_config = ConfigDict(frozen=True)

    latitude: float = Field(..., ge=-90.0, le=90.0)
    longitude: float = Field(..., ge=-180.0, le=180.0)


class LandmarkCategory(str, Enum):
    government = "government"
    shopping = "shopping"
    transit = "transit"
    airport = "airport"


class VolumeTier(str, Enum):
    low = "Low"
    medium = "Medium"
    high = "High"

    @property
    def color(self) -> str:
        return _TIER_COLORS[self]


_TIER_COLORS = {
    VolumeTier.low: "#4CAF50",
    VolumeTier.medium: "#FF9800",
    VolumeTier.high: "#F44336",
}


class Landmark(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1)
    coordinate: Coordinate
    category: LandmarkCategory


class RawPlace(BaseModel):
    """A place record as returned by the search service, before annotation."""

    model_config = ConfigDict(frozen=True)

    place_id: str
    name: str
    coordinate: Coordinate
    popularity: float | None = Field(default=None, ge=0.0)
    types: list[str] = Field(default_factory=list)
    vicinity: str | None = None
    photo_reference: str | None = None


class Restaurant(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    coordinate: Coordinate
    distance_miles: float = Field(..., ge=0.0)
    wait_time_minutes: int = Field(..., gt=0)
    volume_score: int = Field(..., ge=0, le=100)
    volume_tier: VolumeTier
    cuisine: str
    address: str
    near_primary: bool
    photo_url: str | None = None


class NearbyLocation(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    distance_miles: float = Field(..., ge=0.0)
    category: LandmarkCategory
    coordinate: Coordinate


class VolumeSample(BaseModel):
    model_config = ConfigDict(frozen=True)

    time: str
    score: int = Field(..., ge=10, le=95)


class MapMarker(BaseModel):
    model_config = ConfigDict(frozen=True)

    coordinate: Coordinate
    label: str
    color: str


# ── API payloads ─────────────────────────────────────────────────────────


class DiscoveryResponse(BaseModel):
    reference: Coordinate
    filter: str
    restaurants: list[Restaurant]
    markers: list[MapMarker]
    total_candidates: int


class NearbyResponse(BaseModel):
    subject: Coordinate
    radius_miles: float
    locations: list[NearbyLocation]
    markers: list[MapMarker]


class VolumeHistoryResponse(BaseModel):
    restaurant_id: str
    day: date
    samples: list[VolumeSample]
