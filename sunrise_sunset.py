# sunrise_sunset.py
"""Sunrise and sunset from the simplified solar ephemeris.

Mean anomaly -> true longitude -> right ascension -> declination -> local
hour angle -> UTC. Accurate to a minute or two away from the poles.
"""

import math
from datetime import date, datetime, timezone
from typing import Optional

from flight_utils import deg2rad, rad2deg
from models import GeoCoordinate, InvalidInputError, SunTimes
from sun_position import to_utc

# 90° plus refraction (34') and the solar radius (16')
ZENITH_DEG = 90.833


def day_of_year(day: date) -> int:
    """Days since Dec 31 of the previous year (Jan 1 = 1)."""
    return (day - date(day.year, 1, 1)).days + 1


def _event_utc_hours(loc: GeoCoordinate, n: int, rising: bool) -> Optional[float]:
    lng_hour = loc.longitude / 15.0
    t = n + ((6.0 if rising else 18.0) - lng_hour) / 24.0

    M = 0.9856 * t - 3.289

    L = M + 1.916 * math.sin(deg2rad(M)) + 0.020 * math.sin(deg2rad(2 * M)) + 282.634
    L = L % 360.0

    RA = rad2deg(math.atan(0.91764 * math.tan(deg2rad(L)))) % 360.0
    # RA has to sit in the same quadrant as L
    RA += math.floor(L / 90.0) * 90.0 - math.floor(RA / 90.0) * 90.0
    RA /= 15.0

    sin_dec = 0.39782 * math.sin(deg2rad(L))
    cos_dec = math.cos(math.asin(sin_dec))

    lat = deg2rad(loc.latitude)
    cos_h = (math.cos(deg2rad(ZENITH_DEG)) - sin_dec * math.sin(lat)) / (cos_dec * math.cos(lat))
    if cos_h > 1.0 or cos_h < -1.0:
        # polar night (> 1) or midnight sun (< -1)
        return None

    H = rad2deg(math.acos(cos_h))
    if rising:
        H = 360.0 - H
    H /= 15.0

    T = H + RA - 0.06571 * t - 6.622
    ut = (T - lng_hour) % 24.0
    return ut if ut < 24.0 else 0.0


def _at_utc_hours(day: date, ut: float) -> datetime:
    # the calendar date comes from the input, not from the fractional day number
    hour = math.floor(ut)
    minute = math.floor((ut - hour) * 60.0)
    second = math.floor(((ut - hour) * 60.0 - minute) * 60.0)
    return datetime(day.year, day.month, day.day, hour, minute, second, tzinfo=timezone.utc)


def sunrise_sunset(loc: GeoCoordinate, day: date) -> SunTimes:
    """Sunrise and sunset (UTC) at loc on day. None where the sun does not cross the horizon."""
    if isinstance(day, datetime):
        day = to_utc(day).date()
    elif not isinstance(day, date):
        raise InvalidInputError(f"expected a date, got {day!r}")

    n = day_of_year(day)
    rise = _event_utc_hours(loc, n, rising=True)
    set_ = _event_utc_hours(loc, n, rising=False)
    return SunTimes(
        sunrise=_at_utc_hours(day, rise) if rise is not None else None,
        sunset=_at_utc_hours(day, set_) if set_ is not None else None,
    )
