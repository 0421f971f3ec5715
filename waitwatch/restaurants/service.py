"""
Discovery entry points used by the API layer.

Every call works on its own inputs; nothing is cached between queries.
"""
from __future__ import annotations

import logging
from datetime import date
from typing import Sequence

from ..places.client import PlaceSearch
from .catalog import build
from .history import VolumeHistorySource, VolumeHistorySynthesizer
from .landmarks import DEFAULT_LANDMARK_INDEX, LandmarkIndex
from .models import Coordinate, MapMarker, NearbyLocation, Restaurant, VolumeSample
from .query import derive_markers, filter_restaurants, sort_restaurants

logger = logging.getLogger(__name__)


def discover_restaurants(
    reference: Coordinate,
    search: PlaceSearch,
    landmarks: LandmarkIndex = DEFAULT_LANDMARK_INDEX,
) -> list[Restaurant]:
    """
    Search around *reference* and annotate the results.

    Search failures propagate unchanged; an empty search is an empty list.
    """
    raw_places = search.nearby_places(reference)
    restaurants = build(raw_places, reference, landmarks, photo_url=search.photo_url)
    logger.info(
        "Discovered %d restaurants around (%s, %s)",
        len(restaurants), reference.latitude, reference.longitude,
    )
    return restaurants


def filter_and_sort(restaurants: Sequence[Restaurant], predicate_name: str) -> list[Restaurant]:
    return sort_restaurants(filter_restaurants(restaurants, predicate_name))


def markers_for(
    ordered_restaurants: Sequence[Restaurant],
    landmarks: LandmarkIndex = DEFAULT_LANDMARK_INDEX,
) -> list[MapMarker]:
    return derive_markers(ordered_restaurants, landmarks.primary)


def nearby_landmarks(
    coord: Coordinate,
    radius_miles: float,
    landmarks: LandmarkIndex = DEFAULT_LANDMARK_INDEX,
) -> list[NearbyLocation]:
    return landmarks.nearby_to(coord, radius_miles)


def volume_history_for(
    restaurant_id: str,
    day: date,
    source: VolumeHistorySource | None = None,
) -> list[VolumeSample]:
    """Hourly volume samples for one restaurant and day."""
    source = source or VolumeHistorySynthesizer()
    return source.history_for(restaurant_id, day)
