# flight_utils.py
import math
from typing import Sequence

from config import CRUISE_SPEED_KMH
from models import FlightPath, GeoCoordinate, InvalidInputError

R_EARTH_KM = 6371.0
# central angles below this (about 6 micrometres) are the same place
SAME_POINT_RAD = 1e-12

def deg2rad(d: float) -> float:
    return d * math.pi / 180.0

def rad2deg(r: float) -> float:
    return r * 180.0 / math.pi

def normalize_360(angle: float) -> float:
    """Wrap an angle to [0, 360)."""
    a = angle % 360.0
    # tiny negatives round up to exactly 360.0
    return a if a < 360.0 else 0.0

def normalize_180(angle: float) -> float:
    """Wrap an angle to (-180, 180]."""
    a = normalize_360(angle)
    return a - 360.0 if a > 180.0 else a

def _central_angle(a: GeoCoordinate, b: GeoCoordinate) -> float:
    φ1, φ2 = deg2rad(a.latitude), deg2rad(b.latitude)
    dφ = deg2rad(b.latitude - a.latitude)
    dλ = deg2rad(b.longitude - a.longitude)
    h = math.sin(dφ/2)**2 + math.cos(φ1)*math.cos(φ2)*math.sin(dλ/2)**2
    return 2 * math.atan2(math.sqrt(h), math.sqrt(max(0.0, 1 - h)))

def same_point(a: GeoCoordinate, b: GeoCoordinate) -> bool:
    """True when a and b are the same place (longitude ±180 or any longitude at a pole)."""
    return _central_angle(a, b) < SAME_POINT_RAD

def haversine_km(a: GeoCoordinate, b: GeoCoordinate) -> float:
    δ = _central_angle(a, b)
    return 0.0 if δ < SAME_POINT_RAD else R_EARTH_KM * δ

def bearing_between(a: GeoCoordinate, b: GeoCoordinate) -> float:
    """Initial bearing from a toward b in [0, 360). Coincident points give 0."""
    if same_point(a, b):
        return 0.0
    φ1, φ2 = deg2rad(a.latitude), deg2rad(b.latitude)
    dλ = deg2rad(b.longitude - a.longitude)
    y = math.sin(dλ) * math.cos(φ2)
    x = math.cos(φ1)*math.sin(φ2) - math.sin(φ1)*math.cos(φ2)*math.cos(dλ)
    θ = math.atan2(y, x)
    return normalize_360(rad2deg(θ))

def interpolate_great_circle(a: GeoCoordinate, b: GeoCoordinate, f: float) -> GeoCoordinate:
    """Point at fraction f of the shortest great-circle arc from a to b (slerp)."""
    if not isinstance(f, (int, float)) or not math.isfinite(f) or not 0.0 <= f <= 1.0:
        raise InvalidInputError(f"fraction must be within [0, 1], got {f!r}")
    if f == 0:
        return a
    if f == 1:
        return b
    δ = _central_angle(a, b)
    if δ < SAME_POINT_RAD:
        return a
    sin_δ = math.sin(δ)
    if sin_δ < 1e-12:
        raise InvalidInputError("antipodal endpoints have no unique great circle")
    φ1, λ1 = deg2rad(a.latitude), deg2rad(a.longitude)
    φ2, λ2 = deg2rad(b.latitude), deg2rad(b.longitude)
    A = math.sin((1 - f) * δ) / sin_δ
    B = math.sin(f * δ) / sin_δ
    x = A*math.cos(φ1)*math.cos(λ1) + B*math.cos(φ2)*math.cos(λ2)
    y = A*math.cos(φ1)*math.sin(λ1) + B*math.cos(φ2)*math.sin(λ2)
    z = A*math.sin(φ1) + B*math.sin(φ2)
    φi = math.atan2(z, math.sqrt(x*x + y*y))
    λi = math.atan2(y, x)
    # atan2 can land a hair outside the valid range after conversion
    lat = max(-90.0, min(90.0, rad2deg(φi)))
    lon = max(-180.0, min(180.0, rad2deg(λi)))
    return GeoCoordinate(lat, lon)

def great_circle_points(a: GeoCoordinate, b: GeoCoordinate, n_points: int) -> FlightPath:
    """n_points coordinates along the great circle, first = a, last = b."""
    if isinstance(n_points, bool) or not isinstance(n_points, int) or n_points < 2:
        raise InvalidInputError(f"n_points must be an integer >= 2, got {n_points!r}")
    if same_point(a, b):
        return tuple(a for _ in range(n_points))
    return tuple(interpolate_great_circle(a, b, i / (n_points - 1)) for i in range(n_points))

def path_distance_km(path: Sequence[GeoCoordinate]) -> float:
    return sum(haversine_km(path[i], path[i+1]) for i in range(len(path)-1))

def flight_duration_hours(distance_km: float, cruise_kmh: float = CRUISE_SPEED_KMH) -> float:
    if not math.isfinite(cruise_kmh) or cruise_kmh <= 0:
        raise InvalidInputError(f"cruise speed must be positive, got {cruise_kmh!r}")
    if not math.isfinite(distance_km) or distance_km < 0:
        raise InvalidInputError(f"distance must be non-negative, got {distance_km!r}")
    return distance_km / cruise_kmh
