from __future__ import annotations

from typing import Iterable

from ..geo import distance
from .config import DEFAULT_DISCOVERY_CONFIG
from .models import Coordinate, Landmark, LandmarkCategory, NearbyLocation


def _landmark(name: str, lat: float, lng: float, category: LandmarkCategory) -> Landmark:
    return Landmark(
        name=name,
        coordinate=Coordinate(latitude=lat, longitude=lng),
        category=category,
    )


# Declaration order is the tie-break order for equal distances.
KEY_LANDMARKS: tuple[Landmark, ...] = (
    _landmark("Pentagon", 38.8719, -77.0563, LandmarkCategory.government),
    _landmark("Capitol", 38.8899, -77.0091, LandmarkCategory.government),
    _landmark("White House", 38.8977, -77.0365, LandmarkCategory.government),
    _landmark("Reagan National Airport", 38.8512, -77.0402, LandmarkCategory.airport),
    _landmark("Union Station", 38.8977, -77.0074, LandmarkCategory.transit),
    _landmark("Pentagon City Mall", 38.8629, -77.0595, LandmarkCategory.shopping),
)


class LandmarkIndex:
    """Immutable registry of reference points used for badges and lookups."""

    def __init__(
        self,
        landmarks: Iterable[Landmark] = KEY_LANDMARKS,
        primary_name: str | None = DEFAULT_DISCOVERY_CONFIG.primary_landmark,
        proximity_radius_miles: float = DEFAULT_DISCOVERY_CONFIG.proximity_radius_miles,
    ) -> None:
        self._landmarks = tuple(landmarks)
        names = [lm.name for lm in self._landmarks]
        if len(set(names)) != len(names):
            raise ValueError("Landmark names must be unique")
        self._primary = next(
            (lm for lm in self._landmarks if lm.name == primary_name), None
        )
        self._proximity_radius = proximity_radius_miles

    @property
    def landmarks(self) -> tuple[Landmark, ...]:
        return self._landmarks

    @property
    def primary(self) -> Landmark | None:
        return self._primary

    def is_near_primary(self, coord: Coordinate) -> bool:
        if self._primary is None:
            return False
        return distance(coord, self._primary.coordinate) <= self._proximity_radius

    def nearby_to(self, coord: Coordinate, radius_miles: float) -> list[NearbyLocation]:
        """Landmarks within *radius_miles* of *coord*, closest first."""
        if radius_miles <= 0:
            return []

        nearby: list[NearbyLocation] = []
        for lm in self._landmarks:
            d = distance(coord, lm.coordinate)
            if d <= radius_miles:
                nearby.append(NearbyLocation(
                    name=lm.name,
                    distance_miles=d,
                    category=lm.category,
                    coordinate=lm.coordinate,
                ))

        # list.sort is stable, so ties keep registry order
        nearby.sort(key=lambda loc: loc.distance_miles)
        return nearby


DEFAULT_LANDMARK_INDEX = LandmarkIndex()
