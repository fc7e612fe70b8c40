# ============================== ZONE STANDARD HEADER ==============================
# Script Name: seaport_sources.py
# Update Summary:
#   - Seaport list readers for zone computation: SQL table, CSV snapshot, hosted REST table.
# Description:
#   - Each factory returns a zero-argument callable that reads the full seaport list once
#     per call. Nothing is cached between calls.
# External Data Sources:
#   - DATABASE_URL (SQLAlchemy), ZONE_SEAPORT_CSV (pandas), ZONE_SEAPORT_REST_URL (requests).
# Data Handling Notes:
#   - Records are plain dicts: id, name, latitude, longitude, classification.
#   - Missing/NaN values become None; coordinate parsing is left to zone_engine.
#   - Any read failure raises SeaportSourceError.

from flask_app.setup_imports import *
from flask_app.app.database import fetch_seaports
from flask_app.app.sql_models import SessionLocal
from flask_app.app.utils import get_env_float, none_if_missing
from zone_engine.types import SeaportSourceError

LOG = logging.getLogger(__name__)

SEAPORT_FIELDS = ["id", "name", "latitude", "longitude", "classification"]


def sql_seaport_source(session_factory=SessionLocal):
    def _read():
        return fetch_seaports(session_factory)
    return _read


def load_seaports_csv(path) -> list[dict]:
    """
    Reads a seaport CSV snapshot (columns: id,name,latitude,longitude,classification).
    Non-numeric coordinates/classification become None.
    """
    try:
        df = pd.read_csv(path, dtype={"id": str, "name": str})
    except (OSError, ValueError) as e:
        raise SeaportSourceError(f"cannot read seaport CSV {path}: {e}") from e

    missing = [c for c in ("id", "latitude", "longitude") if c not in df.columns]
    if missing:
        raise SeaportSourceError(f"seaport CSV {path} missing columns: {missing}")

    for col in SEAPORT_FIELDS:
        if col not in df.columns:
            df[col] = np.nan

    for col in ("latitude", "longitude", "classification"):
        df[col] = pd.to_numeric(df[col], errors="coerce")

    records = []
    for row in df[SEAPORT_FIELDS].to_dict(orient="records"):
        records.append({k: none_if_missing(v) for k, v in row.items()})
    LOG.debug(f"✅ Loaded {len(records)} seaports from {path}")
    return records


def csv_seaport_source(path):
    def _read():
        return load_seaports_csv(path)
    return _read


def fetch_seaports_rest(base_url: str, api_key: str | None = None, timeout_s: float = 10.0) -> list[dict]:
    """
    Reads the seaports table from the hosted backend's REST interface.
    """
    url = f"{base_url.rstrip('/')}/rest/v1/seaports"
    headers = {}
    if api_key:
        headers = {"apikey": api_key, "Authorization": f"Bearer {api_key}"}
    try:
        response = requests.get(url, params={"select": ",".join(SEAPORT_FIELDS)},
                                headers=headers, timeout=timeout_s)
        response.raise_for_status()
        data = response.json()
    except (requests.RequestException, ValueError) as e:
        raise SeaportSourceError(f"seaport REST fetch failed: {e}") from e

    if not isinstance(data, list):
        raise SeaportSourceError(f"unexpected seaport payload type: {type(data).__name__}")
    return [{k: row.get(k) for k in SEAPORT_FIELDS} for row in data if isinstance(row, dict)]


def rest_seaport_source(base_url: str, api_key: str | None = None, timeout_s: float = 10.0):
    def _read():
        return fetch_seaports_rest(base_url, api_key=api_key, timeout_s=timeout_s)
    return _read


def seaport_source_from_env():
    """
    ZONE_SEAPORT_SOURCE = sql (default) | csv | rest
    """
    kind = os.getenv("ZONE_SEAPORT_SOURCE", "sql").strip().lower()

    if kind == "csv":
        path = os.getenv("ZONE_SEAPORT_CSV")
        if not path:
            raise ValueError("ZONE_SEAPORT_SOURCE=csv requires ZONE_SEAPORT_CSV")
        LOG.info(f"Seaport source: CSV {path}")
        return csv_seaport_source(path)

    if kind == "rest":
        base_url = os.getenv("ZONE_SEAPORT_REST_URL")
        if not base_url:
            raise ValueError("ZONE_SEAPORT_SOURCE=rest requires ZONE_SEAPORT_REST_URL")
        LOG.info(f"Seaport source: REST {base_url}")
        return rest_seaport_source(
            base_url,
            api_key=os.getenv("ZONE_SEAPORT_REST_KEY"),
            timeout_s=get_env_float("ZONE_HTTP_TIMEOUT_S", 10.0),
        )

    if kind == "sql":
        LOG.info("Seaport source: SQL (DATABASE_URL)")
        return sql_seaport_source()

    raise ValueError(f"Unknown ZONE_SEAPORT_SOURCE: {kind}")
