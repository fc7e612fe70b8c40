# geo.py - Great-circle and planar containment helpers for zone classification

from math import radians, cos, sin, sqrt, atan2, isfinite

import numpy as np

# Mean Earth radius; spherical model, not ellipsoidal
EARTH_RADIUS_M = 6371000.0


def haversine_m(lat1, lon1, lat2, lon2):
    """
    Calculates great-circle distance between two points in meters.
    Non-finite inputs give NaN, never an exception.
    """
    if not all(isfinite(v) for v in (lat1, lon1, lat2, lon2)):
        return float("nan")

    dlat = radians(lat2 - lat1)
    dlon = radians(lon2 - lon1)

    a = sin(dlat / 2)**2 + cos(radians(lat1)) * cos(radians(lat2)) * sin(dlon / 2)**2
    c = 2 * atan2(sqrt(a), sqrt(max(0.0, 1 - a)))

    return EARTH_RADIUS_M * c


def haversine_m_array(lat, lon, lats, lons):
    """
    Distance in meters from one point to many. Uses numpy for vectorized math.
    """
    lats = np.radians(np.asarray(lats, dtype=float))
    lons = np.radians(np.asarray(lons, dtype=float))
    p_lat, p_lon = np.radians(lat), np.radians(lon)

    dphi, dlmb = lats - p_lat, lons - p_lon
    a = np.sin(dphi / 2) ** 2 + np.cos(p_lat) * np.cos(lats) * np.sin(dlmb / 2) ** 2
    return 2 * EARTH_RADIUS_M * np.arctan2(np.sqrt(a), np.sqrt(np.clip(1 - a, 0.0, None)))


def point_in_polygon(lat, lon, vertices):
    """
    Even-odd ray casting on planar (lat, lon); x is longitude, y is latitude.
    Vertices are used in the given order, so a self-crossing ring keeps its crossings.
    """
    inside = False
    n = len(vertices)
    j = n - 1
    for i in range(n):
        yi, xi = vertices[i]
        yj, xj = vertices[j]
        if (yi > lat) != (yj > lat) and lon < (xj - xi) * (lat - yi) / (yj - yi) + xi:
            inside = not inside
        j = i
    return inside


def point_in_circle(lat, lon, center, radius_m):
    """
    Returns True if the point is within radius_m meters of center (inclusive).
    """
    return haversine_m(lat, lon, center[0], center[1]) <= radius_m
