# sun_position.py
"""Low-precision solar position (mean anomaly, equation of center, sidereal time).

All angles in radians internally; the public functions speak degrees.
"""

import math
from datetime import datetime, timedelta, timezone

from flight_utils import deg2rad, normalize_360, rad2deg
from models import GeoCoordinate, InvalidInputError, SolarPosition

J1970 = 2440588.0
J2000 = 2451545.0
SECONDS_PER_DAY = 86400.0
OBLIQUITY = deg2rad(23.4397)  # obliquity of the ecliptic
PERIHELION = deg2rad(102.9372)


def to_utc(dt: datetime) -> datetime:
    """Convert a timezone-aware datetime to UTC."""
    if not isinstance(dt, datetime):
        raise InvalidInputError(f"expected a datetime, got {dt!r}")
    if dt.tzinfo is None or dt.utcoffset() is None:
        raise InvalidInputError("dt must be timezone-aware")
    return dt.astimezone(timezone.utc)


def days_since_j2000(dt: datetime) -> float:
    # epoch-millisecond precision
    ms = math.floor(to_utc(dt).timestamp() * 1000.0 + 0.5)
    return ms / (SECONDS_PER_DAY * 1000.0) - 0.5 + J1970 - J2000


def solar_mean_anomaly(d: float) -> float:
    return deg2rad(357.5291 + 0.98560028 * d)


def ecliptic_longitude(m: float) -> float:
    center = deg2rad(1.9148 * math.sin(m) + 0.02 * math.sin(2 * m) + 0.0003 * math.sin(3 * m))
    return m + center + PERIHELION + math.pi


def declination(l: float) -> float:
    return math.asin(math.sin(OBLIQUITY) * math.sin(l))


def right_ascension(l: float) -> float:
    return math.atan2(math.sin(l) * math.cos(OBLIQUITY), math.cos(l))


def sidereal_time(d: float, lw: float) -> float:
    """Local sidereal time; lw is the west longitude in radians."""
    return deg2rad(280.16 + 360.9856235 * d) - lw


def solar_position(instant: datetime, loc: GeoCoordinate) -> SolarPosition:
    """Solar azimuth (clockwise from north) and altitude at loc and instant."""
    d = days_since_j2000(instant)
    lw = deg2rad(-loc.longitude)
    φ = deg2rad(loc.latitude)

    l = ecliptic_longitude(solar_mean_anomaly(d))
    dec = declination(l)
    H = sidereal_time(d, lw) - right_ascension(l)

    # azimuth here is measured from south, positive westward
    az_south = math.atan2(math.sin(H), math.cos(H) * math.sin(φ) - math.tan(dec) * math.cos(φ))
    sin_alt = math.sin(φ) * math.sin(dec) + math.cos(φ) * math.cos(dec) * math.cos(H)
    alt = math.asin(max(-1.0, min(1.0, sin_alt)))

    return SolarPosition(
        azimuth_deg=normalize_360(rad2deg(az_south) + 180.0),
        altitude_deg=rad2deg(alt),
    )


def sun_position_at_flight_fraction(
    departure_time: datetime, duration_hours: float, fraction: float, loc: GeoCoordinate
) -> SolarPosition:
    """Sun position at loc, fraction of the way through a flight."""
    if not math.isfinite(duration_hours) or duration_hours < 0:
        raise InvalidInputError(f"duration must be non-negative, got {duration_hours!r}")
    if not math.isfinite(fraction) or not 0.0 <= fraction <= 1.0:
        raise InvalidInputError(f"fraction must be within [0, 1], got {fraction!r}")
    instant = to_utc(departure_time) + timedelta(hours=duration_hours * fraction)
    return solar_position(instant, loc)
