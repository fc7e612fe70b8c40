"""
Fixed maritime reporting regions.

Regions are data: a tuple of Region records evaluated in order, first match wins.
The order C, B, A is a regulator precedence and must not be replaced by
area-based or smallest-region resolution.
"""

from shapely.geometry import Polygon as ShapelyPolygon, mapping

from .geo import point_in_circle, point_in_polygon
from .types import Circle, Polygon, Region

NO_REGION = "X"

ZONE_C = Region(
    key="C",
    shapes=(
        Polygon(vertices=(
            (19.2697, 105.8217),
            (19.1802, 106.1732),
            (15.398582, 108.741024),
            (15.797157, 109.023201),
        )),
        Circle(center=(16.307907, 111.887631), radius_m=50_000),
        Circle(center=(15.776189, 114.335378), radius_m=25_000),
    ),
)

ZONE_B = Region(
    key="B",
    shapes=(
        Polygon(vertices=(
            (15.398582, 108.741024),
            (15.797157, 109.023201),
            (11.290790, 108.805857),
            (10.751607, 109.426080),
        )),
    ),
)

ZONE_A = Region(
    key="A",
    shapes=(
        Polygon(vertices=(
            (11.290790, 108.805857),
            (10.751607, 109.426080),
            (9.243116, 105.827099),
            (8.341218, 106.056200),
        )),
        Polygon(vertices=(
            (11.699559, 114.105746),
            (10.816024, 116.323181),
            (8.563622, 111.273575),
            (5.795252, 113.315372),
        )),
    ),
)

# Precedence order
REGIONS = (ZONE_C, ZONE_B, ZONE_A)


def shape_contains(shape, lat, lon):
    if isinstance(shape, Circle):
        return point_in_circle(lat, lon, shape.center, shape.radius_m)
    if isinstance(shape, Polygon):
        return point_in_polygon(lat, lon, shape.vertices)
    raise TypeError(f"Unsupported region shape: {type(shape).__name__}")


def region_contains(region, lat, lon):
    return any(shape_contains(s, lat, lon) for s in region.shapes)


def region_key(lat, lon, regions=REGIONS):
    """
    Key of the first region containing (lat, lon), else "X".
    NaN coordinates fail every containment test and resolve to "X".
    """
    for region in regions:
        if region_contains(region, lat, lon):
            return region.key
    return NO_REGION


def _shape_geometry(shape):
    if isinstance(shape, Circle):
        lat, lon = shape.center
        return {"type": "Circle", "center": [lon, lat], "radius_m": float(shape.radius_m)}
    # GeoJSON wants (lon, lat); shapely closes the ring
    return mapping(ShapelyPolygon([(lon, lat) for lat, lon in shape.vertices]))


def regions_geojson(regions=REGIONS):
    """
    FeatureCollection-style dict of the region table, for map overlays.
    Circles are encoded as {'type':'Circle','center':[lon,lat],'radius_m':N}.
    """
    features = []
    for precedence, region in enumerate(regions):
        for shape in region.shapes:
            features.append({
                "type": "Feature",
                "geometry": _shape_geometry(shape),
                "properties": {"region": region.key, "precedence": precedence},
            })
    return {"type": "FeatureCollection", "features": features}
