import math

import pytest

from zone_engine.geo import EARTH_RADIUS_M
from zone_engine.regions import REGIONS, ZONE_C, region_key, regions_geojson
from zone_engine.types import Circle, Polygon, Region


@pytest.mark.parametrize("lat, lon, expected", [
    (17.0, 107.78, "C"),           # between the two long edges of the C polygon
    (16.307907, 111.887631, "C"),  # first C circle center
    (15.776189, 114.335378, "C"),  # second C circle center
    (13.0, 109.0, "B"),
    (9.0, 106.3, "A"),             # first A polygon
    (11.0, 108.8, "A"),            # first A polygon, north end
    (9.0, 113.0, "A"),             # second A polygon
    (10.001, 109.001, "X"),
    (0.0, 0.0, "X"),
    (21.0, 107.0, "X"),
])
def test_region_key_fixed_geometry(lat, lon, expected):
    assert region_key(lat, lon) == expected


def test_precedence_is_c_b_a():
    assert [r.key for r in REGIONS] == ["C", "B", "A"]


def test_region_key_nan_is_x():
    assert region_key(float("nan"), 109.0) == "X"
    assert region_key(17.0, float("nan")) == "X"
    assert region_key(float("nan"), float("nan")) == "X"


def _north_of(center, meters):
    return center[0] + math.degrees(meters / EARTH_RADIUS_M), center[1]


def test_circle_boundary_inside_and_outside():
    circle = ZONE_C.shapes[2]
    assert isinstance(circle, Circle)

    inside = _north_of(circle.center, circle.radius_m * (1 - 1e-9))
    outside = _north_of(circle.center, circle.radius_m + 1.0)

    assert region_key(*inside) == "C"
    assert region_key(*outside) == "X"


def test_first_matching_region_wins():
    box = Polygon(vertices=((0.0, 0.0), (0.0, 2.0), (2.0, 2.0), (2.0, 0.0)))
    ring = Circle(center=(1.0, 1.0), radius_m=20_000)
    outer = Region(key="B", shapes=(box,))
    inner = Region(key="C", shapes=(ring,))

    assert region_key(1.0, 1.0, regions=(inner, outer)) == "C"
    assert region_key(1.0, 1.0, regions=(outer, inner)) == "B"
    assert region_key(1.9, 1.9, regions=(inner, outer)) == "B"
    assert region_key(5.0, 5.0, regions=(inner, outer)) == "X"


def test_unknown_shape_type_is_rejected():
    with pytest.raises(TypeError):
        region_key(0.0, 0.0, regions=(Region(key="Z", shapes=("not a shape",)),))


def test_regions_geojson_shape():
    fc = regions_geojson()
    assert fc["type"] == "FeatureCollection"

    features = fc["features"]
    # C: polygon + 2 circles, B: polygon, A: 2 polygons
    assert len(features) == 6
    assert [f["properties"]["region"] for f in features] == ["C", "C", "C", "B", "A", "A"]
    assert [f["properties"]["precedence"] for f in features] == [0, 0, 0, 1, 2, 2]

    poly = features[0]["geometry"]
    assert poly["type"] == "Polygon"
    ring = poly["coordinates"][0]
    assert tuple(ring[0]) == pytest.approx((105.8217, 19.2697))   # lon, lat
    assert tuple(ring[0]) == tuple(ring[-1])                       # closed ring

    circle = features[1]["geometry"]
    assert circle == {"type": "Circle", "center": [111.887631, 16.307907], "radius_m": 50000.0}
