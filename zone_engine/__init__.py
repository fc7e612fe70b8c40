"""
Maritime zone classification engine (pure, flat layout)

Public API:
- types.ZoneInfo, types.Seaport, types.SeaportSourceError
- geo.haversine_m
- context.nearest_seaport
- context.compute_zone
- context.format_zone_display
- regions.region_key
- regions.regions_geojson
"""

from .types import (
    Circle,
    NearestSeaport,
    NULL_ZONE,
    Polygon,
    Region,
    Seaport,
    SeaportSourceError,
    ZoneInfo,
)
from .geo import EARTH_RADIUS_M, haversine_m, haversine_m_array
from .regions import REGIONS, region_key, regions_geojson
from .context import (
    compute_zone,
    ec_number,
    format_zone_display,
    format_zone_name,
    nearest_seaport,
    second_key,
    zone_code_from_classification,
)

__all__ = [
    "Circle",
    "NearestSeaport",
    "NULL_ZONE",
    "Polygon",
    "Region",
    "Seaport",
    "SeaportSourceError",
    "ZoneInfo",
    "EARTH_RADIUS_M",
    "haversine_m",
    "haversine_m_array",
    "REGIONS",
    "region_key",
    "regions_geojson",
    "compute_zone",
    "ec_number",
    "format_zone_display",
    "format_zone_name",
    "nearest_seaport",
    "second_key",
    "zone_code_from_classification",
]
