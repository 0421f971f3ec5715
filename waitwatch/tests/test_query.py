from waitwatch.restaurants.catalog import build
from waitwatch.restaurants.estimation import volume_tier
from waitwatch.restaurants.landmarks import DEFAULT_LANDMARK_INDEX
from waitwatch.restaurants.models import (
    Coordinate,
    LandmarkCategory,
    NearbyLocation,
    Restaurant,
    VolumeTier,
)
from waitwatch.restaurants.query import (
    derive_markers,
    detail_markers,
    filter_restaurants,
    sort_restaurants,
)


def _restaurant(rid, miles, wait=10, score=50, near=False):
    return Restaurant(
        id=rid,
        name=rid.title(),
        coordinate=Coordinate(latitude=38.87, longitude=-77.05),
        distance_miles=miles,
        wait_time_minutes=wait,
        volume_score=score,
        volume_tier=volume_tier(score),
        cuisine="restaurant",
        address="",
        near_primary=near,
    )


# ── Filters ──────────────────────────────────────────────────────────────


def test_filter_all_is_identity(pentagon, raw_places):
    restaurants = build(raw_places, pentagon)
    assert filter_restaurants(restaurants, "all") == restaurants


def test_filter_near_primary(pentagon, raw_places):
    restaurants = build(raw_places, pentagon)
    assert [r.id for r in filter_restaurants(restaurants, "nearPrimary")] == ["busy", "quiet"]


def test_filter_quick_includes_fifteen_minutes(pentagon, raw_places):
    restaurants = build(raw_places, pentagon)
    assert [r.id for r in filter_restaurants(restaurants, "quick")] == ["busy", "quiet"]


def test_filter_high_volume(pentagon, raw_places):
    restaurants = build(raw_places, pentagon)
    assert [r.id for r in filter_restaurants(restaurants, "highVolume")] == ["busy"]


def test_filter_high_volume_boundary():
    restaurants = [_restaurant("a", 1.0, score=70), _restaurant("b", 1.0, score=71)]
    assert [r.id for r in filter_restaurants(restaurants, "highVolume")] == ["b"]


def test_unknown_filter_behaves_like_all(pentagon, raw_places):
    restaurants = build(raw_places, pentagon)
    assert filter_restaurants(restaurants, "pentagon") == restaurants
    assert filter_restaurants(restaurants, "") == restaurants


def test_filters_return_order_preserving_subsequences():
    restaurants = [
        _restaurant("a", 2.0, wait=20, score=90, near=True),
        _restaurant("b", 0.5, wait=8, score=20, near=True),
        _restaurant("c", 1.1, wait=15, score=75),
        _restaurant("d", 0.5, wait=30, score=40, near=True),
    ]
    for name in ("all", "nearPrimary", "quick", "highVolume"):
        picked = filter_restaurants(restaurants, name)
        positions = [restaurants.index(r) for r in picked]
        assert positions == sorted(positions)


def test_filter_empty_list():
    assert filter_restaurants([], "quick") == []


# ── Sorting ──────────────────────────────────────────────────────────────


def test_sort_by_distance(pentagon, raw_places):
    restaurants = build(raw_places, pentagon)
    assert [r.id for r in sort_restaurants(restaurants)] == ["quiet", "busy", "far"]


def test_sort_is_stable_for_equal_distances():
    restaurants = [
        _restaurant("first", 0.4),
        _restaurant("closest", 0.1),
        _restaurant("second", 0.4),
        _restaurant("third", 0.4),
    ]
    assert [r.id for r in sort_restaurants(restaurants)] == ["closest", "first", "second", "third"]


def test_sort_is_idempotent():
    restaurants = [_restaurant(str(i), miles) for i, miles in enumerate([3.0, 0.2, 0.2, 1.5, 0.0])]
    once = sort_restaurants(restaurants)
    assert sort_restaurants(once) == once


def test_sort_empty_list():
    assert sort_restaurants([]) == []


# ── Markers ──────────────────────────────────────────────────────────────


def test_markers_start_with_primary(pentagon, raw_places):
    ordered = sort_restaurants(build(raw_places, pentagon))
    markers = derive_markers(ordered, DEFAULT_LANDMARK_INDEX.primary)

    assert len(markers) == 4
    assert markers[0].label == "P"
    assert markers[0].color == "#FF5722"
    assert markers[0].coordinate == pentagon
    assert [m.label for m in markers[1:]] == ["6", "15", "16"]
    assert [m.color for m in markers[1:]] == [
        VolumeTier.low.color,
        VolumeTier.high.color,
        VolumeTier.medium.color,
    ]


def test_markers_capped_at_five_restaurants():
    restaurants = [_restaurant(str(i), i / 10, wait=i + 5) for i in range(12)]
    markers = derive_markers(restaurants, DEFAULT_LANDMARK_INDEX.primary)
    assert len(markers) == 6
    assert [m.label for m in markers[1:]] == ["5", "6", "7", "8", "9"]


def test_markers_without_primary_or_restaurants():
    assert derive_markers([], None) == []
    assert len(derive_markers([], DEFAULT_LANDMARK_INDEX.primary)) == 1


def test_detail_markers(pentagon):
    nearby = [
        NearbyLocation(
            name="Pentagon City Mall",
            distance_miles=0.6,
            category=LandmarkCategory.shopping,
            coordinate=Coordinate(latitude=38.8629, longitude=-77.0595),
        ),
        NearbyLocation(
            name="Reagan National Airport",
            distance_miles=1.5,
            category=LandmarkCategory.airport,
            coordinate=Coordinate(latitude=38.8512, longitude=-77.0402),
        ),
    ]
    markers = detail_markers(pentagon, nearby)
    assert [(m.label, m.color) for m in markers] == [
        ("R", "#0066CC"),
        ("P", "#4CAF50"),
        ("R", "#9C27B0"),
    ]
    assert markers[0].coordinate == pentagon
