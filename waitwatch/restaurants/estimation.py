"""
Order volume and wait-time estimates.

The volume score is a 0-100 proxy for how busy a restaurant is, taken from
the place's popularity signal. ``volume_tier`` is the one place the score is
bucketed into Low/Medium/High; list cards, chart bars and map markers all get
their label and colour from it.
"""
from __future__ import annotations

from ..geo import round_half_up
from .config import DEFAULT_DISCOVERY_CONFIG
from .models import VolumeTier

HIGH_VOLUME_THRESHOLD = 70
MEDIUM_VOLUME_THRESHOLD = 40
MAX_DISTANCE_MINUTES = 10.0


def volume_score(popularity: float | None) -> int:
    """Clamp the popularity signal into [0, 100]; unknown signals score 50."""
    if popularity is None:
        return DEFAULT_DISCOVERY_CONFIG.default_volume_score
    clamped = max(0.0, min(100.0, float(popularity)))
    return int(round_half_up(clamped))


def volume_tier(score: float) -> VolumeTier:
    if score > HIGH_VOLUME_THRESHOLD:
        return VolumeTier.high
    if score > MEDIUM_VOLUME_THRESHOLD:
        return VolumeTier.medium
    return VolumeTier.low


def wait_time(score: float, distance_miles: float) -> int:
    """
    Estimate the wait in whole minutes.

    Five minutes plus a tenth of the volume score, plus two minutes per mile
    of travel capped at ten minutes.
    """
    base = 5 + score / 10
    travel = min(distance_miles * 2, MAX_DISTANCE_MINUTES)
    return int(round_half_up(base + travel))
