"""
Geodesic helpers.

Responsibilities:
- Great-circle distance between two coordinates, in miles.
- Unit conversion between metres and miles for radius parameters.
"""
from .distance import (
    EARTH_RADIUS_MILES,
    METERS_PER_MILE,
    distance,
    meters_to_miles,
    round_half_up,
)

__all__ = [
    "EARTH_RADIUS_MILES",
    "METERS_PER_MILE",
    "distance",
    "meters_to_miles",
    "round_half_up",
]
