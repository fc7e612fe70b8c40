import logging
import math
from collections.abc import Mapping
from decimal import ROUND_HALF_UP, Decimal

from .geo import haversine_m
from .regions import region_key
from .types import NULL_ZONE, NearestSeaport, ZoneInfo

LOG = logging.getLogger(__name__)


def _coerce_coordinate(value) -> float | None:
    """
    Numeric or numeric-string coordinate -> float. Anything else -> None.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.strip()
        # blank is absent here, although JS Number("") would give 0
        if not value or "_" in value:
            return None
    try:
        out = float(value)
    except (TypeError, ValueError):
        return None
    return None if math.isnan(out) else out


def _field(seaport, name):
    if isinstance(seaport, Mapping):
        return seaport.get(name)
    return getattr(seaport, name, None)


def nearest_seaport(lat: float, lon: float, seaports) -> NearestSeaport | None:
    """
    Linear scan for the closest seaport by haversine distance.

    - Seaports without parseable latitude/longitude are skipped.
    - Ties keep the first one encountered.
    - NaN distances never win (NaN < x is False).
    - No distance cut-off: the closest known port is always returned.
    Returns None when nothing usable was found.
    """
    best = None
    best_dist = math.inf
    for port in seaports or ():
        plat = _coerce_coordinate(_field(port, "latitude"))
        plon = _coerce_coordinate(_field(port, "longitude"))
        if plat is None or plon is None:
            continue
        d = haversine_m(lat, lon, plat, plon)
        if d < best_dist:
            best_dist = d
            best = port

    if best is None:
        return None

    return NearestSeaport(
        seaport=best,
        seaport_id=_field(best, "id"),
        classification=_field(best, "classification"),
        distance_meters=best_dist,
    )


def zone_code_from_classification(classification) -> str | None:
    """
    Stringify a seaport classification tier; integral floats drop the '.0'.
    """
    if classification is None:
        return None
    if isinstance(classification, float) and classification.is_integer():
        return str(int(classification))
    return str(classification)


def second_key(zone_key: str) -> str:
    # Region D has no geometry yet; it reports under X.
    if zone_key == "D":
        return "X"
    return zone_key


def _floor_abs(value: float) -> int:
    if not math.isfinite(value):
        return 0
    return abs(math.floor(value))


def ec_number(lat: float, lon: float) -> int:
    """
    Stable sub-zone tag in [1, 99] derived from the coordinate only.
    """
    a = _floor_abs((lat + 90) * 1000)
    b = _floor_abs((lon + 180) * 1000)
    return ((a ^ b) % 99) + 1


def _fmt_coord(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        value = 0.0
    # half-way values round away from zero on the exact binary value
    return f"{Decimal(value).quantize(Decimal('1e-6'), rounding=ROUND_HALF_UP):f}"


def format_zone_name(lat: float, lon: float, zone_key: str) -> str:
    """
    Zone{K}-EC{S}{N}({lat}-{lon}), e.g. 'ZoneC-ECC42(10.040095-115.529907)'.
    """
    return (
        f"Zone{zone_key}-EC{second_key(zone_key)}{ec_number(lat, lon)}"
        f"({_fmt_coord(lat)}-{_fmt_coord(lon)})"
    )


def format_zone_display(zone_code: str | None) -> str:
    if not zone_code:
        return "Unknown Zone"
    return f"Zone {zone_code}"


def compute_zone(lat: float, lon: float, seaport_source) -> ZoneInfo:
    """
    Zone descriptor for a coordinate.

    seaport_source is a zero-argument callable returning the current seaport
    list; it is called exactly once. Any failure while reading it, an empty
    list, or a list without usable coordinates gives the null descriptor
    (zone_code/zone_name None) instead of an exception.
    """
    try:
        rows = seaport_source()
        seaports = list(rows) if rows is not None else []
    except Exception as e:
        LOG.error(f"❌ Seaport list unavailable for zone @({lat}, {lon}): {e}")
        return NULL_ZONE

    if not seaports:
        LOG.warning(f"⚠️ Empty seaport list; zone unknown @({lat}, {lon})")
        return NULL_ZONE

    nearest = nearest_seaport(lat, lon, seaports)
    if nearest is None:
        LOG.warning(f"⚠️ No seaport with usable coordinates ({len(seaports)} checked); zone unknown @({lat}, {lon})")
        return NULL_ZONE

    key = region_key(lat, lon)
    info = ZoneInfo(
        zone_code=zone_code_from_classification(nearest.classification),
        zone_name=format_zone_name(lat, lon, key),
        seaport_id=nearest.seaport_id,
        distance_meters=nearest.distance_meters,
    )
    LOG.debug(f"✅ Zone @({lat}, {lon}): {info.zone_name} via seaport {info.seaport_id} ({info.distance_meters:.0f} m)")
    return info
