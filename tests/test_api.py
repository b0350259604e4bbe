"""HTTP boundary: status codes, payload shape, error envelope."""
from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

import api
from airports import load_airports
from scenic_side import recommended_seats


@pytest.fixture(scope="module")
def client():
    airports = load_airports()
    api.app.dependency_overrides[api.get_airports] = lambda: airports
    yield TestClient(api.app)
    api.app.dependency_overrides.clear()


def _get(client, **params):
    return client.get("/api/flight", params=params)


class TestFlightRoute:
    def test_jfk_to_lax(self, client):
        resp = _get(client, **{"from": "JFK", "to": "LAX", "dt": "2024-01-01T10:00:00Z"})
        assert resp.status_code == 200
        body = resp.json()
        assert body["success"] is True
        data = body["data"]
        assert data["departure"] == {
            "code": "JFK",
            "name": "John F. Kennedy International Airport",
            "city": "New York",
            "lat": 40.6413,
            "lng": -73.7781,
        }
        assert data["arrival"]["code"] == "LAX"
        assert data["distance"] == pytest.approx(3974, rel=0.01)
        assert data["bearing"] == pytest.approx(270, abs=10)
        assert data["duration"] == pytest.approx(5.0, abs=0.1)
        assert data["departureTime"] == "2024-01-01T10:00:00.000Z"
        assert data["arrivalTime"].startswith("2024-01-01T14:")
        assert data["arrivalTime"].endswith("Z")

    def test_path_is_lng_lat(self, client):
        data = _get(client, **{"from": "JFK", "to": "LAX", "dt": "2024-01-01T10:00:00Z"}).json()["data"]
        assert len(data["path"]) == 21
        assert data["path"][0] == [-73.7781, 40.6413]
        assert data["path"][-1] == [-118.4081, 33.9425]

    def test_sun_data(self, client):
        sun = _get(client, **{"from": "JFK", "to": "LAX", "dt": "2024-01-01T10:00:00Z"}).json()["data"]["sunData"]
        assert sun["scenicSide"] in {"left", "right", "both", "none"}
        assert sun["recommendedSeats"] == recommended_seats(sun["scenicSide"])
        assert sun["sunriseTime"].endswith("Z")
        assert sun["sunsetTime"].endswith("Z")
        assert isinstance(sun["departureSunAltitude"], float)

    def test_lowercase_codes_and_offset_time(self, client):
        resp = _get(client, **{"from": "jfk", "to": "lax", "dt": "2024-01-01T05:00:00-05:00"})
        assert resp.status_code == 200
        assert resp.json()["data"]["departureTime"] == "2024-01-01T10:00:00.000Z"

    def test_time_without_offset_is_utc(self, client):
        resp = _get(client, **{"from": "JFK", "to": "LAX", "dt": "2024-01-01T10:00"})
        assert resp.json()["data"]["departureTime"] == "2024-01-01T10:00:00.000Z"


class TestErrors:
    @pytest.mark.parametrize(
        "params",
        [
            {"to": "LAX", "dt": "2024-01-01T10:00:00Z"},
            {"from": "JFK", "dt": "2024-01-01T10:00:00Z"},
            {"from": "JFK", "to": "LAX"},
            {"from": "", "to": "LAX", "dt": "2024-01-01T10:00:00Z"},
        ],
    )
    def test_missing_parameters(self, client, params):
        resp = _get(client, **params)
        assert resp.status_code == 400
        assert resp.json() == {"success": False, "error": "Missing required parameters: from, to, dt"}

    def test_unknown_departure(self, client):
        resp = _get(client, **{"from": "XXX", "to": "LAX", "dt": "2024-01-01T10:00:00Z"})
        assert resp.status_code == 404
        assert resp.json()["error"] == "Departure airport 'XXX' not found"

    def test_unknown_arrival(self, client):
        resp = _get(client, **{"from": "JFK", "to": "QQQ", "dt": "2024-01-01T10:00:00Z"})
        assert resp.status_code == 404
        assert resp.json()["error"] == "Arrival airport 'QQQ' not found"

    def test_same_airport(self, client):
        resp = _get(client, **{"from": "JFK", "to": "jfk", "dt": "2024-01-01T10:00:00Z"})
        assert resp.status_code == 400
        assert resp.json()["success"] is False

    def test_bad_timestamp(self, client):
        resp = _get(client, **{"from": "JFK", "to": "LAX", "dt": "next tuesday"})
        assert resp.status_code == 400
        assert resp.json()["error"] == "Invalid departure time format"

    def test_unexpected_failure_is_500(self, client, monkeypatch):
        def boom(*args, **kwargs):
            raise RuntimeError("boom")

        monkeypatch.setattr(api, "build_flight_report", boom)
        resp = _get(client, **{"from": "JFK", "to": "LAX", "dt": "2024-01-01T10:00:00Z"})
        assert resp.status_code == 500
        assert resp.json() == {"success": False, "error": "Internal server error"}
