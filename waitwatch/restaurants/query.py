"""
Filtering, ordering and map markers over an annotated restaurant list.

Responsibilities:
- Apply one of the named list filters.
- Order restaurants by distance, keeping input order for equal distances.
- Derive the bounded marker set shown on the list map and the detail map.
"""
from __future__ import annotations

from typing import Sequence

import pandas as pd

from .config import DEFAULT_DISCOVERY_CONFIG
from .estimation import HIGH_VOLUME_THRESHOLD
from .models import (
    Coordinate,
    Landmark,
    LandmarkCategory,
    MapMarker,
    NearbyLocation,
    Restaurant,
)

FILTER_NAMES = ("all", "nearPrimary", "quick", "highVolume")

PRIMARY_MARKER_LABEL = "P"
PRIMARY_MARKER_COLOR = "#FF5722"
SUBJECT_MARKER_LABEL = "R"
SUBJECT_MARKER_COLOR = "#0066CC"

CATEGORY_COLORS: dict[LandmarkCategory, str] = {
    LandmarkCategory.government: "#F44336",
    LandmarkCategory.shopping: "#4CAF50",
    LandmarkCategory.transit: "#FF9800",
    LandmarkCategory.airport: "#9C27B0",
}


def _frame(restaurants: Sequence[Restaurant]) -> pd.DataFrame:
    """One row per restaurant, indexed by its position in *restaurants*."""
    return pd.DataFrame({
        "distance": pd.Series([r.distance_miles for r in restaurants], dtype="float64"),
        "wait_time": pd.Series([r.wait_time_minutes for r in restaurants], dtype="int64"),
        "volume_score": pd.Series([r.volume_score for r in restaurants], dtype="int64"),
        "near_primary": pd.Series([r.near_primary for r in restaurants], dtype="bool"),
    })


def _pick(restaurants: Sequence[Restaurant], positions: pd.Index) -> list[Restaurant]:
    return [restaurants[i] for i in positions]


def filter_restaurants(
    restaurants: Sequence[Restaurant],
    name: str,
    quick_wait_minutes: int = DEFAULT_DISCOVERY_CONFIG.quick_wait_minutes,
) -> list[Restaurant]:
    """
    Keep the restaurants matching the named filter, in their original order.

    Unknown filter names behave like ``all``.
    """
    if not restaurants:
        return []

    df = _frame(restaurants)

    if name == "nearPrimary":
        mask = df["near_primary"]
    elif name == "quick":
        mask = df["wait_time"] <= quick_wait_minutes
    elif name == "highVolume":
        mask = df["volume_score"] > HIGH_VOLUME_THRESHOLD
    else:
        mask = pd.Series(True, index=df.index)

    return _pick(restaurants, df.loc[mask].index)


def sort_restaurants(restaurants: Sequence[Restaurant]) -> list[Restaurant]:
    """Closest first. Equal distances keep their input order."""
    if not restaurants:
        return []

    df = _frame(restaurants)
    # mergesort is pandas' stable sort
    ordered = df.sort_values("distance", kind="mergesort")
    return _pick(restaurants, ordered.index)


def derive_markers(
    restaurants: Sequence[Restaurant],
    primary: Landmark | None,
    limit: int = DEFAULT_DISCOVERY_CONFIG.marker_limit,
) -> list[MapMarker]:
    """
    Markers for the list map: the primary landmark, then the first *limit*
    restaurants of an already ordered list, labelled with their wait time.
    """
    markers: list[MapMarker] = []
    if primary is not None:
        markers.append(MapMarker(
            coordinate=primary.coordinate,
            label=PRIMARY_MARKER_LABEL,
            color=PRIMARY_MARKER_COLOR,
        ))

    for r in restaurants[:limit]:
        markers.append(MapMarker(
            coordinate=r.coordinate,
            label=str(r.wait_time_minutes),
            color=r.volume_tier.color,
        ))
    return markers


def detail_markers(subject: Coordinate, nearby: Sequence[NearbyLocation]) -> list[MapMarker]:
    """Markers for the detail map: the restaurant, then each nearby landmark."""
    markers = [MapMarker(
        coordinate=subject,
        label=SUBJECT_MARKER_LABEL,
        color=SUBJECT_MARKER_COLOR,
    )]
    for loc in nearby:
        markers.append(MapMarker(
            coordinate=loc.coordinate,
            label=loc.name[:1],
            color=CATEGORY_COLORS[loc.category],
        ))
    return markers
