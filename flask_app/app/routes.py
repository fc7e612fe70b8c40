#routes.py

from flask import Blueprint, current_app, jsonify, request

from flask_app.setup_imports import *
from flask_app.app.nearby_seaports import nearby_records, rank_nearby_seaports
from flask_app.app.utils import log_error_and_continue, parse_float_arg
from zone_engine import SeaportSourceError, compute_zone, format_zone_display, regions_geojson

# Define a Blueprint for routes
main_bp = Blueprint('main', __name__)


def _seaport_source():
    return current_app.config["SEAPORT_SOURCE"]


def _zone_payload(lat, lon):
    info = compute_zone(lat, lon, _seaport_source())
    return {"zone": info.to_dict(), "display": format_zone_display(info.zone_code)}


# ✅ API Route for a single position
@main_bp.route('/api/zone', methods=['GET'])
def zone_for_position():
    """Computes the zone descriptor for ?lat=..&lon=.."""
    lat = parse_float_arg(request.args.get("lat"))
    lon = parse_float_arg(request.args.get("lon"))
    if lat is None or lon is None:
        return jsonify({"error": "lat and lon query parameters are required and must be numeric"}), 400

    return jsonify({"success": True, **_zone_payload(lat, lon)})


# ✅ API Route for several positions (e.g. a batch of catch records)
@main_bp.route('/api/zone/batch', methods=['POST'])
def zone_for_batch():
    if not request.is_json:
        return jsonify({"error": "Invalid request format. Must be JSON."}), 400

    points = (request.get_json(silent=True) or {}).get("points")
    if not isinstance(points, list):
        return jsonify({"error": "No points provided"}), 400

    coords = []
    for i, p in enumerate(points):
        lat = parse_float_arg(p.get("lat")) if isinstance(p, dict) else None
        lon = parse_float_arg(p.get("lon")) if isinstance(p, dict) else None
        if lat is None or lon is None:
            return jsonify({"error": f"Point {i} needs numeric lat and lon"}), 400
        coords.append((lat, lon))

    # each point reads the seaport list on its own
    zones = [_zone_payload(lat, lon) for lat, lon in coords]
    return jsonify({"success": True, "zones": zones})


@main_bp.route('/api/zone/nearby', methods=['GET'])
def nearby_seaports():
    lat = parse_float_arg(request.args.get("lat"))
    lon = parse_float_arg(request.args.get("lon"))
    limit = parse_float_arg(request.args.get("limit", 5))
    if lat is None or lon is None or limit is None or not np.isfinite(limit):
        return jsonify({"error": "lat, lon (and optional limit) must be numeric"}), 400

    try:
        seaports = _seaport_source()()
    except SeaportSourceError as e:
        log_error_and_continue("Nearby seaports unavailable", e)
        return jsonify({"error": "Seaport list unavailable"}), 503

    df = rank_nearby_seaports(lat, lon, seaports, limit=int(limit))
    return jsonify({"success": True, "seaports": nearby_records(df)})


@main_bp.route('/api/zone/regions', methods=['GET'])
def zone_regions():
    return jsonify(regions_geojson())
