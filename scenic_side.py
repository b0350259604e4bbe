# scenic_side.py
"""Which side of the cabin gets the sun, from a trajectory of sun samples."""

import logging
import math
from datetime import datetime, timedelta
from typing import Iterable, List, Tuple

from config import SIDE_THRESHOLD_DEG, VISIBLE_SUN_ALTITUDE_DEG
from flight_utils import bearing_between, normalize_180
from models import FlightPath, InvalidInputError, ScenicSide, SunSample
from sun_position import solar_position, to_utc

logger = logging.getLogger(__name__)

# A = left window, F = right window in a 3-3 single-aisle cabin
LEFT_WINDOW_SEAT = "A"
RIGHT_WINDOW_SEAT = "F"

SEATS_BY_SIDE = {
    ScenicSide.LEFT: (LEFT_WINDOW_SEAT,),
    ScenicSide.RIGHT: (RIGHT_WINDOW_SEAT,),
    ScenicSide.BOTH: (LEFT_WINDOW_SEAT, RIGHT_WINDOW_SEAT),
    ScenicSide.NONE: (),
}


def relative_sun_angle(flight_bearing: float, sun_azimuth: float) -> float:
    """Sun direction relative to the nose in (-180, 180]. Positive = right, negative = left."""
    return normalize_180(sun_azimuth - flight_bearing)


def recommended_seats(scenic_side) -> List[str]:
    """Window seat letters for a scenic side ("left" and ScenicSide.LEFT both work)."""
    try:
        side = ScenicSide(scenic_side)
    except ValueError:
        raise InvalidInputError(f"unknown scenic side: {scenic_side!r}") from None
    return list(SEATS_BY_SIDE[side])


def sample_flight(
    path: FlightPath, departure_time: datetime, duration_hours: float
) -> Tuple[SunSample, ...]:
    """Sun position and heading at every path point, point i at fraction i/(n-1)."""
    if len(path) < 2:
        raise InvalidInputError("a flight path needs at least two points")
    if not math.isfinite(duration_hours) or duration_hours < 0:
        raise InvalidInputError(f"duration must be non-negative, got {duration_hours!r}")
    start = to_utc(departure_time)
    n = len(path)

    samples = []
    bearing = 0.0
    for i, point in enumerate(path):
        fraction = i / (n - 1)
        if i < n - 1:
            bearing = bearing_between(point, path[i + 1])
        # the last point keeps the heading of the final segment
        time = start + timedelta(hours=duration_hours * fraction)
        sun = solar_position(time, point)
        samples.append(
            SunSample(
                fraction=fraction,
                coordinate=point,
                time=time,
                sun=sun,
                bearing_deg=bearing,
                relative_angle_deg=relative_sun_angle(bearing, sun.azimuth_deg),
            )
        )
    return tuple(samples)


def visible_samples(
    samples: Iterable[SunSample], min_altitude_deg: float = VISIBLE_SUN_ALTITUDE_DEG
) -> List[SunSample]:
    return [s for s in samples if s.sun.altitude_deg > min_altitude_deg]


def classify_samples(
    samples: Iterable[SunSample],
    threshold_deg: float = SIDE_THRESHOLD_DEG,
    min_altitude_deg: float = VISIBLE_SUN_ALTITUDE_DEG,
) -> ScenicSide:
    """Reduce a sample trajectory to one scenic side.

    Samples with the sun at or below min_altitude_deg are dropped. If none are
    left the answer is NONE. Otherwise a sample more than threshold_deg to one
    side marks that side; both sides marked, or neither, gives BOTH.
    """
    visible = visible_samples(samples, min_altitude_deg)
    if not visible:
        return ScenicSide.NONE

    angles = [s.relative_angle_deg for s in visible]
    has_left = any(a < -threshold_deg for a in angles)
    has_right = any(a > threshold_deg for a in angles)

    if has_left and has_right:
        return ScenicSide.BOTH
    if has_right:
        return ScenicSide.RIGHT
    if has_left:
        return ScenicSide.LEFT
    # sun straight ahead or behind the whole time
    return ScenicSide.BOTH


def scenic_side_for_path(
    path: FlightPath, departure_time: datetime, duration_hours: float
) -> ScenicSide:
    samples = sample_flight(path, departure_time, duration_hours)
    side = classify_samples(samples)
    logger.debug("classified %d samples as %s", len(samples), side)
    return side
