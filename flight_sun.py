# flight_sun.py
"""Flight sun engine: path, sun positions, sunrise/sunset and scenic side in one call."""

import logging
from datetime import date, datetime, timedelta
from typing import Callable, Optional

from config import CRUISE_SPEED_KMH, PATH_POINTS
from flight_utils import bearing_between, flight_duration_hours, great_circle_points, haversine_km
from models import (
    Airport,
    FlightReport,
    FlightSunData,
    GeoCoordinate,
    InvalidInputError,
    SunTimes,
)
from scenic_side import classify_samples, recommended_seats, sample_flight
from sun_position import solar_position, to_utc
from sunrise_sunset import sunrise_sunset

logger = logging.getLogger(__name__)

SunTimesProvider = Callable[[GeoCoordinate, date], SunTimes]


def _within(event: Optional[datetime], start: datetime, end: datetime) -> bool:
    return event is not None and start < event < end


def _pick_event(
    departure_event: Optional[datetime],
    arrival_event: Optional[datetime],
    departure_time: datetime,
    arrival_time: datetime,
) -> datetime:
    # the arrival's event wins only if it happens during the flight
    if _within(arrival_event, departure_time, arrival_time):
        return arrival_event
    if departure_event is not None:
        return departure_event
    return departure_time


def _resolve_arrival_time(
    departure_time: datetime, arrival_time: Optional[datetime], estimated_hours: float
) -> datetime:
    if arrival_time is None:
        return departure_time + timedelta(hours=estimated_hours)
    arrival_time = to_utc(arrival_time)
    if arrival_time <= departure_time:
        raise InvalidInputError("arrival time must be after departure time")
    return arrival_time


def compute_flight_sun_data(
    departure: GeoCoordinate,
    arrival: GeoCoordinate,
    departure_time: datetime,
    arrival_time: Optional[datetime] = None,
    cruise_kmh: float = CRUISE_SPEED_KMH,
    n_points: int = PATH_POINTS,
    sun_times_provider: SunTimesProvider = sunrise_sunset,
) -> FlightSunData:
    """Sun behaviour for a flight from departure to arrival.

    Args:
        departure: Departure coordinate.
        arrival: Arrival coordinate.
        departure_time: Timezone-aware departure instant.
        arrival_time: Optional scheduled arrival. Without it the duration is
            estimated from the great-circle distance at cruise_kmh.
        cruise_kmh: Cruise speed used for the duration estimate.
        n_points: Number of path samples for the scenic-side classification.
        sun_times_provider: Sunrise/sunset source, local computation by default.

    Returns:
        FlightSunData for the flight.

    Raises:
        InvalidInputError: On a naive datetime, an arrival not after departure,
            a bad cruise speed or n_points, or antipodal endpoints.
    """
    *_, sun = _compute(
        departure, arrival, departure_time, arrival_time, cruise_kmh, n_points, sun_times_provider
    )
    return sun


def _compute(
    departure: GeoCoordinate,
    arrival: GeoCoordinate,
    departure_time: datetime,
    arrival_time: Optional[datetime],
    cruise_kmh: float,
    n_points: int,
    sun_times_provider: SunTimesProvider,
):
    start = to_utc(departure_time)
    distance_km = haversine_km(departure, arrival)
    estimated = flight_duration_hours(distance_km, cruise_kmh)
    end = _resolve_arrival_time(start, arrival_time, estimated)
    duration_hours = (end - start).total_seconds() / 3600.0

    path = great_circle_points(departure, arrival, n_points)

    departure_sun = solar_position(start, departure)
    arrival_sun = solar_position(end, arrival)

    departure_times = sun_times_provider(departure, start.date())
    arrival_times = sun_times_provider(arrival, end.date())
    sunrise_time = _pick_event(departure_times.sunrise, arrival_times.sunrise, start, end)
    sunset_time = _pick_event(departure_times.sunset, arrival_times.sunset, start, end)
    logger.debug(
        "sunrise %s, sunset %s for flight %s -> %s", sunrise_time, sunset_time, start, end
    )

    samples = sample_flight(path, start, duration_hours)
    scenic_side = classify_samples(samples)

    sun = FlightSunData(
        departure_sun=departure_sun,
        arrival_sun=arrival_sun,
        scenic_side=scenic_side,
        sunrise_time=sunrise_time,
        sunset_time=sunset_time,
        flight_duration_hours=duration_hours,
    )
    return distance_km, start, end, path, samples, sun


def build_flight_report(
    departure: Airport,
    arrival: Airport,
    departure_time: datetime,
    arrival_time: Optional[datetime] = None,
    cruise_kmh: float = CRUISE_SPEED_KMH,
    n_points: int = PATH_POINTS,
    sun_times_provider: SunTimesProvider = sunrise_sunset,
) -> FlightReport:
    """Full report for a flight between two resolved airports."""
    distance_km, start, end, path, samples, sun = _compute(
        departure.coordinate,
        arrival.coordinate,
        departure_time,
        arrival_time,
        cruise_kmh,
        n_points,
        sun_times_provider,
    )
    return FlightReport(
        departure=departure,
        arrival=arrival,
        distance_km=distance_km,
        bearing_deg=bearing_between(departure.coordinate, arrival.coordinate),
        duration_hours=sun.flight_duration_hours,
        departure_time=start,
        arrival_time=end,
        path=path,
        samples=samples,
        sun=sun,
        recommended_seats=tuple(recommended_seats(sun.scenic_side)),
    )
