"""
Hourly order-volume history for the detail view.

There is no historical data service behind this yet: ``VolumeHistorySynthesizer``
generates a plausible day shape (lunch and dinner rushes) from a random
source. Anything implementing ``VolumeHistorySource`` can replace it.
"""
from __future__ import annotations

import random
from datetime import date
from typing import Protocol

from .models import VolumeSample

FIRST_HOUR = 8
LAST_HOUR = 21
MIN_SAMPLE_SCORE = 10
MAX_SAMPLE_SCORE = 95

LUNCH_HOURS = range(11, 14)
DINNER_HOURS = range(17, 20)


class VolumeHistorySource(Protocol):
    def history_for(self, restaurant_id: str, day: date) -> list[VolumeSample]:
        ...


def format_hour(hour: int) -> str:
    """Render a 24h hour as ``H:00 AM|PM``; noon is 12:00 PM."""
    suffix = "AM" if hour < 12 else "PM"
    display = hour % 12 or 12
    return f"{display}:00 {suffix}"


class VolumeHistorySynthesizer:
    """Synthetic estimator; pass a seeded ``random.Random`` for repeatable output."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng or random.Random()

    def _base_score(self, hour: int) -> int:
        if hour in LUNCH_HOURS:
            return 75 + self._rng.randrange(20)
        if hour in DINNER_HOURS:
            return 80 + self._rng.randrange(15)
        return 30 + self._rng.randrange(30)

    def synthesize(self, day: date) -> list[VolumeSample]:
        # The day does not shape the curve yet; every day gets the same rushes.
        samples: list[VolumeSample] = []
        for hour in range(FIRST_HOUR, LAST_HOUR + 1):
            score = self._base_score(hour) + self._rng.randrange(10) - 5
            score = max(MIN_SAMPLE_SCORE, min(MAX_SAMPLE_SCORE, score))
            samples.append(VolumeSample(time=format_hour(hour), score=score))
        return samples

    def history_for(self, restaurant_id: str, day: date) -> list[VolumeSample]:
        return self.synthesize(day)
