import pytest

from waitwatch.geo import distance, meters_to_miles, round_half_up
from waitwatch.restaurants.landmarks import KEY_LANDMARKS
from waitwatch.restaurants.models import Coordinate

PENTAGON = Coordinate(latitude=38.8719, longitude=-77.0563)
CAPITOL = Coordinate(latitude=38.8899, longitude=-77.0091)


def test_distance_to_self_is_zero():
    assert distance(PENTAGON, PENTAGON) == 0.0


def test_distance_is_symmetric():
    for a in KEY_LANDMARKS:
        for b in KEY_LANDMARKS:
            assert distance(a.coordinate, b.coordinate) == distance(b.coordinate, a.coordinate)


def test_distance_known_pair():
    assert distance(PENTAGON, CAPITOL) == 2.8


def test_distance_rounds_to_one_decimal():
    d = distance(PENTAGON, Coordinate(latitude=38.88348, longitude=-77.0563))
    assert d == 0.8
    assert round(d, 1) == d


def test_distance_across_hemispheres_is_non_negative():
    d = distance(Coordinate(latitude=-33.86, longitude=151.21), PENTAGON)
    assert d > 9000


@pytest.mark.parametrize(
    "value,digits,expected",
    [(2.5, 0, 3.0), (15.1, 0, 15.0), (16.4, 0, 16.0), (0.25, 1, 0.3), (0.04, 1, 0.0)],
)
def test_round_half_up(value, digits, expected):
    assert round_half_up(value, digits) == expected


def test_meters_to_miles():
    assert meters_to_miles(1609.344) == 1.0
    assert meters_to_miles(2000) == pytest.approx(1.2427, abs=1e-4)
