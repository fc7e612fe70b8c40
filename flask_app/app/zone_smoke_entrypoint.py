# zone_smoke_entrypoint.py — Compute one zone from CLI/CI with the env-configured seaport source
#
# Description:
# • Convenience runner so pipeline/CI can call a single module and inspect exit code.
#
# External Data Sources: whatever ZONE_SEAPORT_SOURCE selects (sql | csv | rest)
# Env: ZONE_SMOKE_LAT / ZONE_SMOKE_LON (default: off Vung Tau)

from flask_app.setup_imports import *
from flask_app.app.seaport_sources import seaport_source_from_env
from flask_app.app.utils import get_current_utc_timestamp, get_env_float
from zone_engine import compute_zone, format_zone_display

LOG = logging.getLogger("zone_smoke")


def main() -> int:
    lat = get_env_float("ZONE_SMOKE_LAT", 10.3)
    lon = get_env_float("ZONE_SMOKE_LON", 107.1)

    LOG.info(f"{get_current_utc_timestamp()} 🌍 Zone smoke run @ ({lat:.6f}, {lon:.6f})")
    info = compute_zone(lat, lon, seaport_source_from_env())
    LOG.info("Zone result: %s", json.dumps(info.to_dict(), ensure_ascii=False))
    LOG.info("Display: %s", format_zone_display(info.zone_code))

    # Non-zero exit when no zone name could be produced (makes CLI usable in CI)
    return 0 if info.zone_name else 2


if __name__ == "__main__":
    raise SystemExit(main())
