"""FastAPI boundary: GET /api/flight?from=JFK&to=LAX&dt=2024-01-01T10:00:00Z."""
from __future__ import annotations

import logging
from functools import lru_cache
from typing import Optional

import pandas as pd
from fastapi import Depends, FastAPI, Query
from fastapi.responses import JSONResponse

from airports import find_airport, load_airports
from flight_sun import build_flight_report
from inputs import iso_utc, parse_departure_time
from models import Airport, FlightReport, InvalidInputError

logger = logging.getLogger(__name__)

app = FastAPI(
    title="Flight Sun API",
    description="Great-circle route, sun positions and the scenic window side for a flight",
    version="0.1.0",
)


@lru_cache(maxsize=1)
def get_airports() -> pd.DataFrame:
    return load_airports()


def _error(message: str, status_code: int) -> JSONResponse:
    return JSONResponse({"success": False, "error": message}, status_code=status_code)


def _airport_payload(airport: Airport) -> dict:
    return {
        "code": airport.code,
        "name": airport.name,
        "city": airport.city,
        "lat": airport.coordinate.latitude,
        "lng": airport.coordinate.longitude,
    }


def report_payload(report: FlightReport) -> dict:
    sun = report.sun
    return {
        "departure": _airport_payload(report.departure),
        "arrival": _airport_payload(report.arrival),
        "distance": round(report.distance_km),
        "bearing": round(report.bearing_deg),
        "duration": round(report.duration_hours, 1),
        # [lng, lat] pairs, GeoJSON order
        "path": [[p.longitude, p.latitude] for p in report.path],
        "sunData": {
            "scenicSide": str(sun.scenic_side),
            "recommendedSeats": list(report.recommended_seats),
            "sunriseTime": iso_utc(sun.sunrise_time),
            "sunsetTime": iso_utc(sun.sunset_time),
            "departureSunAltitude": round(sun.departure_sun.altitude_deg, 1),
            "arrivalSunAltitude": round(sun.arrival_sun.altitude_deg, 1),
        },
        "departureTime": iso_utc(report.departure_time),
        "arrivalTime": iso_utc(report.arrival_time),
    }


@app.get("/api/flight")
def flight_route(
    from_: Optional[str] = Query(None, alias="from"),
    to: Optional[str] = Query(None),
    dt: Optional[str] = Query(None),
    airports: pd.DataFrame = Depends(get_airports),
):
    try:
        if not from_ or not to or not dt:
            return _error("Missing required parameters: from, to, dt", 400)

        departure = find_airport(airports, from_)
        if departure is None:
            return _error(f"Departure airport '{from_}' not found", 404)
        arrival = find_airport(airports, to)
        if arrival is None:
            return _error(f"Arrival airport '{to}' not found", 404)
        if departure.code == arrival.code:
            return _error("Departure and arrival airports cannot be the same", 400)

        try:
            departure_time = parse_departure_time(dt)
        except ValueError:
            return _error("Invalid departure time format", 400)

        try:
            report = build_flight_report(departure, arrival, departure_time)
        except InvalidInputError as e:
            return _error(str(e), 400)

        return {"success": True, "data": report_payload(report)}
    except Exception:
        logger.exception("Flight route calculation error")
        return _error("Internal server error", 500)
