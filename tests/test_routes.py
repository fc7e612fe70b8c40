import pytest

from flask_app.app import create_app
from zone_engine import SeaportSourceError

PORTS = [
    {"id": "p1", "name": "Cat Lo", "latitude": 10.0, "longitude": 109.0, "classification": 3},
    {"id": "p2", "name": "Tho Quang", "latitude": "16.0995", "longitude": "108.2480", "classification": 1},
    {"id": "p3", "name": "No coords", "latitude": None, "longitude": None, "classification": 1},
]


def _broken_source():
    raise SeaportSourceError("store offline")


@pytest.fixture
def client():
    app = create_app(seaport_source=lambda: PORTS)
    app.testing = True
    return app.test_client()


@pytest.fixture
def broken_client():
    app = create_app(seaport_source=_broken_source)
    app.testing = True
    return app.test_client()


def test_zone_endpoint_returns_zone_info(client):
    resp = client.get("/api/zone?lat=10.001&lon=109.001")
    assert resp.status_code == 200
    body = resp.get_json()
    assert body["success"] is True
    zone = body["zone"]
    assert zone["zoneCode"] == "3"
    assert zone["seaportId"] == "p1"
    assert 100 < zone["distanceMeters"] < 300
    assert zone["zoneName"].startswith("ZoneX-ECX")
    assert body["display"] == "Zone 3"


@pytest.mark.parametrize("query", ["", "?lat=10", "?lon=109", "?lat=abc&lon=109", "?lat=10&lon="])
def test_zone_endpoint_rejects_bad_params(client, query):
    resp = client.get(f"/api/zone{query}")
    assert resp.status_code == 400
    assert "error" in resp.get_json()


def test_zone_endpoint_degrades_when_source_down(broken_client):
    resp = broken_client.get("/api/zone?lat=10&lon=109")
    assert resp.status_code == 200
    body = resp.get_json()
    assert body["zone"] == {"zoneCode": None, "zoneName": None}
    assert body["display"] == "Unknown Zone"


def test_batch_endpoint(client):
    resp = client.post("/api/zone/batch", json={"points": [{"lat": 13.0, "lon": 109.0}, {"lat": "17.0", "lon": "107.78"}]})
    assert resp.status_code == 200
    zones = resp.get_json()["zones"]
    assert len(zones) == 2
    assert zones[0]["zone"]["zoneName"].startswith("ZoneB-ECB")
    assert zones[1]["zone"]["zoneName"].startswith("ZoneC-ECC")


@pytest.mark.parametrize("payload", [{}, {"points": "nope"}, {"points": [{"lat": 1}]}, {"points": [5]}])
def test_batch_endpoint_rejects_bad_body(client, payload):
    resp = client.post("/api/zone/batch", json=payload)
    assert resp.status_code == 400


def test_batch_endpoint_requires_json(client):
    resp = client.post("/api/zone/batch", data="lat=1", content_type="text/plain")
    assert resp.status_code == 400


def test_nearby_endpoint_sorted_and_limited(client):
    resp = client.get("/api/zone/nearby?lat=10.1&lon=109.0&limit=5")
    assert resp.status_code == 200
    rows = resp.get_json()["seaports"]
    assert [r["id"] for r in rows] == ["p1", "p2"]
    assert rows[0]["distance_m"] < rows[1]["distance_m"]

    resp = client.get("/api/zone/nearby?lat=10.1&lon=109.0&limit=1")
    assert [r["id"] for r in resp.get_json()["seaports"]] == ["p1"]


def test_nearby_endpoint_errors(client, broken_client):
    assert client.get("/api/zone/nearby?lat=x&lon=109").status_code == 400
    assert client.get("/api/zone/nearby?lat=10&lon=109&limit=inf").status_code == 400
    assert broken_client.get("/api/zone/nearby?lat=10&lon=109").status_code == 503


def test_regions_endpoint(client):
    body = client.get("/api/zone/regions").get_json()
    assert body["type"] == "FeatureCollection"
    assert {f["properties"]["region"] for f in body["features"]} == {"A", "B", "C"}


def test_create_app_uses_env_source(monkeypatch):
    from pathlib import Path
    sample = Path(__file__).resolve().parents[1] / "data" / "seaports_sample.csv"
    monkeypatch.setenv("ZONE_SEAPORT_SOURCE", "csv")
    monkeypatch.setenv("ZONE_SEAPORT_CSV", str(sample))

    client = create_app().test_client()
    zone = client.get("/api/zone?lat=16.1&lon=108.25").get_json()["zone"]
    assert zone["seaportId"] == "18"
    assert zone["zoneCode"] == "1"
