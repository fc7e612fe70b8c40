from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple


class SeaportSourceError(Exception):
    """The seaport list could not be read from its store."""


@dataclass(frozen=True)
class Seaport:
    """
    Read-only snapshot of a registered seaport.
    Coordinates and classification are kept exactly as the store returned them.
    """
    id: Any
    name: Optional[str] = None
    latitude: Any = None
    longitude: Any = None
    classification: Any = None


@dataclass(frozen=True)
class NearestSeaport:
    seaport: Any                 # the original record (mapping or Seaport)
    seaport_id: Any
    classification: Any
    distance_meters: float


@dataclass(frozen=True)
class Polygon:
    vertices: Tuple[Tuple[float, float], ...]   # (lat, lon) in ring order


@dataclass(frozen=True)
class Circle:
    center: Tuple[float, float]                 # (lat, lon)
    radius_m: float


@dataclass(frozen=True)
class Region:
    """
    A named maritime reporting area. A point is inside when any shape contains it.
    """
    key: str
    shapes: Tuple[Any, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class ZoneInfo:
    """
    Zone descriptor for one coordinate.

    seaport_id / distance_meters stay None when no seaport could be used;
    to_dict() leaves those keys out in that case. A nearest seaport whose own
    id is None is therefore serialized the same way as "no seaport found".
    """
    zone_code: Optional[str] = None
    zone_name: Optional[str] = None
    seaport_id: Any = None
    distance_meters: Optional[float] = None

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {
            "zoneCode": self.zone_code,
            "zoneName": self.zone_name,
        }
        if self.seaport_id is not None:
            out["seaportId"] = self.seaport_id
        if self.distance_meters is not None:
            out["distanceMeters"] = self.distance_meters
        return out


NULL_ZONE = ZoneInfo()
