from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root
load_dotenv(Path(__file__).resolve().parent.parent.parent / ".env")


@dataclass(frozen=True)
class PlacesConfig:
    api_key: str = os.getenv("GOOGLE_MAPS_API_KEY", "")
    nearby_search_url: str = "https://maps.googleapis.com/maps/api/place/nearbysearch/json"
    geocode_url: str = "https://maps.googleapis.com/maps/api/geocode/json"
    photo_url: str = "https://maps.googleapis.com/maps/api/place/photo"
    timeout: float = 10.0
    search_radius_m: int = 11265  # ~7 miles
    place_type: str = "restaurant"
    photo_max_width: int = 400


DEFAULT_PLACES_CONFIG = PlacesConfig()
