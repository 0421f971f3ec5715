from __future__ import annotations

import math
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..restaurants.models import Coordinate

EARTH_RADIUS_MILES = 3958.8
METERS_PER_MILE = 1609.344


def round_half_up(value: float, digits: int = 0) -> float:
    """Round with ties going up (2.5 -> 3), unlike the built-in ``round``."""
    factor = 10 ** digits
    return math.floor(value * factor + 0.5) / factor


def distance(a: Coordinate, b: Coordinate) -> float:
    """Return the haversine distance between two coordinates in miles, to 1 dp."""
    lat1, lon1, lat2, lon2 = map(
        math.radians, [a.latitude, a.longitude, b.latitude, b.longitude]
    )

    dlat = lat2 - lat1
    dlon = lon2 - lon1

    h = math.sin(dlat / 2) ** 2 + math.cos(lat1) * math.cos(lat2) * math.sin(dlon / 2) ** 2
    h = min(1.0, h)  # float error near antipodes
    c = 2 * math.atan2(math.sqrt(h), math.sqrt(1 - h))

    return round_half_up(EARTH_RADIUS_MILES * c, 1)


def meters_to_miles(meters: float) -> float:
    return meters / METERS_PER_MILE
