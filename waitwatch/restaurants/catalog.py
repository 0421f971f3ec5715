"""
Turns raw search results into annotated restaurants.

Each place gets its distance from the reference point, a volume score and
tier, a wait-time estimate and the proximity badge. Output order follows the
input; ranking is left to the query layer.
"""
from __future__ import annotations

from typing import Callable, Sequence

from ..geo import distance
from .estimation import volume_score, volume_tier, wait_time
from .landmarks import DEFAULT_LANDMARK_INDEX, LandmarkIndex
from .models import Coordinate, RawPlace, Restaurant

DEFAULT_CUISINE = "restaurant"


def _annotate(
    place: RawPlace,
    reference: Coordinate,
    landmarks: LandmarkIndex,
    photo_url: Callable[[str], str] | None,
) -> Restaurant:
    miles = distance(reference, place.coordinate)
    score = volume_score(place.popularity)

    url = None
    if place.photo_reference:
        url = photo_url(place.photo_reference) if photo_url else place.photo_reference

    return Restaurant(
        id=place.place_id,
        name=place.name,
        coordinate=place.coordinate,
        distance_miles=miles,
        wait_time_minutes=wait_time(score, miles),
        volume_score=score,
        volume_tier=volume_tier(score),
        cuisine=place.types[0] if place.types else DEFAULT_CUISINE,
        address=place.vicinity or "",
        near_primary=landmarks.is_near_primary(place.coordinate),
        photo_url=url,
    )


def build(
    raw_places: Sequence[RawPlace],
    reference: Coordinate,
    landmarks: LandmarkIndex = DEFAULT_LANDMARK_INDEX,
    photo_url: Callable[[str], str] | None = None,
) -> list[Restaurant]:
    """
    Annotate every raw place relative to *reference*.

    *photo_url* turns a photo reference into a fetchable URL; without it the
    reference is passed through as-is.
    """
    return [_annotate(p, reference, landmarks, photo_url) for p in raw_places]
