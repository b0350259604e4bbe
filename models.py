# models.py
"""Value types shared by the geometry, sun and classification layers."""

import math
from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum
from typing import Optional, Tuple


class InvalidInputError(ValueError):
    """Input the engine refuses to compute with."""


@dataclass(frozen=True)
class GeoCoordinate:
    latitude: float  # degrees, [-90, 90]
    longitude: float  # degrees, [-180, 180]

    def __post_init__(self):
        for name in ("latitude", "longitude"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise InvalidInputError(f"{name} must be a number, got {value!r}")
            if not math.isfinite(value):
                raise InvalidInputError(f"{name} must be finite, got {value!r}")
        if not -90.0 <= self.latitude <= 90.0:
            raise InvalidInputError(f"latitude out of range: {self.latitude}")
        if not -180.0 <= self.longitude <= 180.0:
            raise InvalidInputError(f"longitude out of range: {self.longitude}")


FlightPath = Tuple[GeoCoordinate, ...]


@dataclass(frozen=True)
class SolarPosition:
    azimuth_deg: float  # 0 = true north, clockwise, [0, 360)
    altitude_deg: float  # above horizon when > 0


@dataclass(frozen=True)
class SunTimes:
    """Sunrise/sunset for one location and date. None means no crossing that day."""

    sunrise: Optional[datetime]
    sunset: Optional[datetime]


class ScenicSide(StrEnum):
    LEFT = "left"
    RIGHT = "right"
    BOTH = "both"
    NONE = "none"


@dataclass(frozen=True)
class SunSample:
    """The sun as seen from one point of the flight."""

    fraction: float  # flight progress in [0, 1]
    coordinate: GeoCoordinate
    time: datetime  # UTC
    sun: SolarPosition
    bearing_deg: float  # instantaneous heading
    relative_angle_deg: float  # sun relative to the nose, (-180, 180], positive = right


@dataclass(frozen=True)
class FlightSunData:
    departure_sun: SolarPosition
    arrival_sun: SolarPosition
    scenic_side: ScenicSide
    sunrise_time: datetime
    sunset_time: datetime
    flight_duration_hours: float


@dataclass(frozen=True)
class Airport:
    code: str
    name: str
    city: str
    country: str
    coordinate: GeoCoordinate
    timezone: Optional[str] = None


@dataclass(frozen=True)
class FlightReport:
    """Everything the outer surfaces (HTTP, CLI, UI) show for one query."""

    departure: Airport
    arrival: Airport
    distance_km: float
    bearing_deg: float  # initial bearing departure -> arrival
    duration_hours: float
    departure_time: datetime
    arrival_time: datetime
    path: FlightPath
    samples: Tuple[SunSample, ...]
    sun: FlightSunData
    recommended_seats: Tuple[str, ...]
