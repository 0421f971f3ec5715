from __future__ import annotations

import pytest

from waitwatch.restaurants.models import Coordinate, RawPlace

# Offsets below are in degrees of latitude from the Pentagon (~69.09 miles/degree).


@pytest.fixture
def pentagon() -> Coordinate:
    return Coordinate(latitude=38.8719, longitude=-77.0563)


@pytest.fixture
def busy_near_place() -> RawPlace:
    # 0.8 miles north, popularity 85
    return RawPlace(
        place_id="busy",
        name="Fort Myer Grill",
        coordinate=Coordinate(latitude=38.88348, longitude=-77.0563),
        popularity=85,
        types=["cafe", "restaurant", "food"],
        vicinity="100 Army Navy Dr",
        photo_reference="photo-busy",
    )


@pytest.fixture
def unknown_far_place() -> RawPlace:
    # 3.2 miles south, no popularity signal
    return RawPlace(
        place_id="far",
        name="Del Ray Diner",
        coordinate=Coordinate(latitude=38.8256, longitude=-77.0563),
        vicinity="2200 Mt Vernon Ave",
    )


@pytest.fixture
def quiet_close_place() -> RawPlace:
    # 0.2 miles north, popularity 10
    return RawPlace(
        place_id="quiet",
        name="Corridor Deli",
        coordinate=Coordinate(latitude=38.8748, longitude=-77.0563),
        popularity=10,
        types=["meal_takeaway"],
    )


@pytest.fixture
def raw_places(busy_near_place, unknown_far_place, quiet_close_place) -> list[RawPlace]:
    return [busy_near_place, unknown_far_place, quiet_close_place]
