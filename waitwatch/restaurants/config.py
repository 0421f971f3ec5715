from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class DiscoveryConfig:
    """
    Tunables for restaurant discovery and the detail view.
    """

    # Primary landmark; used when the caller supplies no reference point.
    default_latitude: float = 38.8719
    default_longitude: float = -77.0563
    primary_landmark: str = "Pentagon"
    proximity_radius_miles: float = 1.0
    nearby_radius_m: float = 2000.0
    marker_limit: int = 5
    quick_wait_minutes: int = 15
    default_volume_score: int = 50


DEFAULT_DISCOVERY_CONFIG = DiscoveryConfig()
