# nearby_seaports.py - Distance-ranked seaport listing for a position
# Companion to zone_engine.nearest_seaport for dashboards that show more than one port.

from flask_app.setup_imports import *
from flask_app.app.utils import none_if_missing
from zone_engine.geo import haversine_m_array

LOG = logging.getLogger(__name__)

_NEARBY_COLS = ["id", "name", "latitude", "longitude", "classification", "distance_m"]


def rank_nearby_seaports(lat: float, lon: float, seaports, limit: int = 5) -> pd.DataFrame:
    """
    Return up to `limit` seaports sorted by distance (meters) from (lat, lon).
    Rows without numeric coordinates are dropped. Stable sort keeps input order on ties.
    """
    df = pd.DataFrame(list(seaports or []))
    if df.empty:
        return pd.DataFrame(columns=_NEARBY_COLS)

    for c in _NEARBY_COLS[:-1]:
        if c not in df.columns:
            df[c] = np.nan

    df = df[_NEARBY_COLS[:-1]].copy()
    df["latitude"] = pd.to_numeric(df["latitude"], errors="coerce")
    df["longitude"] = pd.to_numeric(df["longitude"], errors="coerce")
    df = df.dropna(subset=["latitude", "longitude"])
    if df.empty:
        return pd.DataFrame(columns=_NEARBY_COLS)

    df["distance_m"] = haversine_m_array(lat, lon, df["latitude"].to_numpy(), df["longitude"].to_numpy())
    df = df.dropna(subset=["distance_m"])
    df = df.sort_values("distance_m", kind="stable").head(max(int(limit), 0)).reset_index(drop=True)

    LOG.debug(f"Nearby seaports @({lat:.4f},{lon:.4f}): {len(df)} rows")
    return df


def nearby_records(df: pd.DataFrame) -> list[dict]:
    return [{k: none_if_missing(v) for k, v in row.items()} for row in df.to_dict(orient="records")]
