"""Great-circle geometry: distance, bearing, interpolation and path sampling."""

import math

import pytest

from flight_utils import (
    bearing_between,
    flight_duration_hours,
    great_circle_points,
    haversine_km,
    interpolate_great_circle,
    normalize_180,
    normalize_360,
    path_distance_km,
    same_point,
)
from models import GeoCoordinate, InvalidInputError

JFK = GeoCoordinate(40.6413, -73.7781)
LAX = GeoCoordinate(33.9425, -118.4081)
LHR = GeoCoordinate(51.4775, -0.4614)
SYD = GeoCoordinate(-33.9399, 151.1753)
NRT = GeoCoordinate(35.7720, 140.3929)


class TestGeoCoordinate:
    @pytest.mark.parametrize(
        "lat, lon",
        [(91.0, 0.0), (-90.5, 0.0), (0.0, 180.5), (0.0, -181.0), (math.nan, 0.0), (0.0, math.inf)],
    )
    def test_out_of_range_rejected(self, lat, lon):
        with pytest.raises(InvalidInputError):
            GeoCoordinate(lat, lon)

    def test_non_numeric_rejected(self):
        with pytest.raises(InvalidInputError):
            GeoCoordinate("40.6", -73.7)

    def test_invalid_input_is_value_error(self):
        with pytest.raises(ValueError):
            GeoCoordinate(100.0, 0.0)

    def test_boundaries_accepted(self):
        GeoCoordinate(90.0, 180.0)
        GeoCoordinate(-90.0, -180.0)


class TestNormalize:
    @pytest.mark.parametrize(
        "angle, expected",
        [(0.0, 0.0), (360.0, 0.0), (-1.0, 359.0), (725.0, 5.0), (-450.0, 270.0)],
    )
    def test_normalize_360(self, angle, expected):
        assert normalize_360(angle) == pytest.approx(expected)

    def test_normalize_360_tiny_negative(self):
        assert 0.0 <= normalize_360(-1e-17) < 360.0

    @pytest.mark.parametrize(
        "angle, expected",
        [(0.0, 0.0), (190.0, -170.0), (-190.0, 170.0), (180.0, 180.0), (-180.0, 180.0), (540.0, 180.0)],
    )
    def test_normalize_180(self, angle, expected):
        assert normalize_180(angle) == pytest.approx(expected)


class TestHaversine:
    def test_jfk_lax(self):
        assert haversine_km(JFK, LAX) == pytest.approx(3974, rel=0.01)

    @pytest.mark.parametrize("a, b", [(JFK, LAX), (LHR, SYD), (NRT, JFK), (SYD, NRT)])
    def test_symmetric(self, a, b):
        assert haversine_km(a, b) == pytest.approx(haversine_km(b, a))

    def test_zero_for_same_point(self):
        assert haversine_km(JFK, JFK) == 0.0

    def test_zero_across_antimeridian_wrap(self):
        a = GeoCoordinate(10.0, 180.0)
        b = GeoCoordinate(10.0, -180.0)
        assert haversine_km(a, b) == 0.0

    def test_quarter_meridian(self):
        d = haversine_km(GeoCoordinate(0.0, 0.0), GeoCoordinate(90.0, 0.0))
        assert d == pytest.approx(math.pi / 2 * 6371.0)


class TestBearing:
    @pytest.mark.parametrize(
        "target, expected",
        [
            (GeoCoordinate(10.0, 0.0), 0.0),
            (GeoCoordinate(0.0, 10.0), 90.0),
            (GeoCoordinate(-10.0, 0.0), 180.0),
            (GeoCoordinate(0.0, -10.0), 270.0),
        ],
    )
    def test_cardinal_directions(self, target, expected):
        assert bearing_between(GeoCoordinate(0.0, 0.0), target) == pytest.approx(expected)

    def test_jfk_lax_heads_west(self):
        assert bearing_between(JFK, LAX) == pytest.approx(270.0, abs=10.0)

    def test_range(self):
        for a, b in [(JFK, LAX), (LAX, JFK), (LHR, SYD), (SYD, LHR), (NRT, LAX)]:
            assert 0.0 <= bearing_between(a, b) < 360.0

    def test_same_point_is_zero(self):
        assert bearing_between(LHR, LHR) == 0.0

    @pytest.mark.parametrize("a, b", [
        (GeoCoordinate(10.0, 180.0), GeoCoordinate(10.0, -180.0)),
        (GeoCoordinate(90.0, 0.0), GeoCoordinate(90.0, 45.0)),
    ])
    def test_coincident_after_wrap_is_zero(self, a, b):
        assert bearing_between(a, b) == 0.0

    def test_short_hop_across_antimeridian(self):
        b = bearing_between(GeoCoordinate(0.0, 179.0), GeoCoordinate(0.0, -179.0))
        assert b == pytest.approx(90.0)


class TestInterpolate:
    def test_endpoints(self):
        assert interpolate_great_circle(JFK, LAX, 0.0) == JFK
        assert interpolate_great_circle(JFK, LAX, 1.0) == LAX

    def test_equator_midpoint(self):
        p = interpolate_great_circle(GeoCoordinate(0.0, 0.0), GeoCoordinate(0.0, 90.0), 0.5)
        assert p.latitude == pytest.approx(0.0, abs=1e-9)
        assert p.longitude == pytest.approx(45.0)

    def test_antimeridian_takes_short_way(self):
        p = interpolate_great_circle(GeoCoordinate(0.0, 179.0), GeoCoordinate(0.0, -179.0), 0.5)
        assert p.latitude == pytest.approx(0.0, abs=1e-9)
        assert abs(p.longitude) == pytest.approx(180.0, abs=1e-6)

    def test_midpoint_is_equidistant(self):
        mid = interpolate_great_circle(LHR, SYD, 0.5)
        assert haversine_km(LHR, mid) == pytest.approx(haversine_km(mid, SYD), rel=1e-9)

    @pytest.mark.parametrize("f", [-0.1, 1.5, math.nan])
    def test_fraction_out_of_range(self, f):
        with pytest.raises(InvalidInputError):
            interpolate_great_circle(JFK, LAX, f)

    @pytest.mark.parametrize("a, b", [
        (GeoCoordinate(10.0, 180.0), GeoCoordinate(10.0, -180.0)),
        (GeoCoordinate(90.0, 0.0), GeoCoordinate(90.0, 45.0)),
        (GeoCoordinate(-90.0, -120.0), GeoCoordinate(-90.0, 60.0)),
    ])
    def test_coincident_after_wrap_returns_start(self, a, b):
        assert interpolate_great_circle(a, b, 0.5) == a

    def test_antipodal_rejected(self):
        with pytest.raises(InvalidInputError, match="antipodal"):
            interpolate_great_circle(GeoCoordinate(0.0, 0.0), GeoCoordinate(0.0, 180.0), 0.5)


class TestGreatCirclePoints:
    @pytest.mark.parametrize("n", [2, 3, 21, 100])
    def test_endpoints_and_length(self, n):
        path = great_circle_points(JFK, LAX, n)
        assert len(path) == n
        assert path[0] == JFK
        assert path[-1] == LAX

    def test_progresses_without_backtracking(self):
        path = great_circle_points(LHR, SYD, 30)
        from_start = [haversine_km(LHR, p) for p in path]
        assert all(b > a for a, b in zip(from_start, from_start[1:]))

    def test_path_length_matches_distance(self):
        path = great_circle_points(NRT, LAX, 50)
        assert path_distance_km(path) == pytest.approx(haversine_km(NRT, LAX), rel=1e-6)

    def test_pacific_route_stays_near_antimeridian(self):
        # Tokyo -> Los Angeles crosses ±180, never swings through longitude 0
        path = great_circle_points(NRT, LAX, 21)
        assert all(abs(p.longitude) > 100.0 for p in path)

    def test_degenerate_repeats_point(self):
        path = great_circle_points(JFK, JFK, 5)
        assert path == (JFK,) * 5

    @pytest.mark.parametrize("a, b", [
        (GeoCoordinate(10.0, 180.0), GeoCoordinate(10.0, -180.0)),
        (GeoCoordinate(90.0, 0.0), GeoCoordinate(90.0, 45.0)),
    ])
    def test_degenerate_across_wrap(self, a, b):
        assert great_circle_points(a, b, 5) == (a,) * 5

    @pytest.mark.parametrize("n", [1, 0, -3, 2.5, True])
    def test_bad_point_count(self, n):
        with pytest.raises(InvalidInputError):
            great_circle_points(JFK, LAX, n)


class TestFlightDuration:
    def test_default_cruise(self):
        assert flight_duration_hours(4000.0) == pytest.approx(5.0)

    def test_custom_cruise(self):
        assert flight_duration_hours(900.0, cruise_kmh=900.0) == pytest.approx(1.0)

    def test_zero_distance(self):
        assert flight_duration_hours(0.0) == 0.0

    @pytest.mark.parametrize("cruise", [0.0, -100.0, math.nan])
    def test_bad_cruise(self, cruise):
        with pytest.raises(InvalidInputError):
            flight_duration_hours(1000.0, cruise_kmh=cruise)

    def test_negative_distance(self):
        with pytest.raises(InvalidInputError):
            flight_duration_hours(-1.0)


class TestSamePoint:
    @pytest.mark.parametrize(
        "a, b",
        [
            (GeoCoordinate(0.0, 180.0), GeoCoordinate(0.0, -180.0)),
            (GeoCoordinate(10.0, 180.0), GeoCoordinate(10.0, -180.0)),
            (GeoCoordinate(90.0, 0.0), GeoCoordinate(90.0, 45.0)),
            (GeoCoordinate(-90.0, 10.0), GeoCoordinate(-90.0, -170.0)),
        ],
    )
    def test_wrapped_and_polar_duplicates(self, a, b):
        assert same_point(a, b)
        assert haversine_km(a, b) == 0.0

    def test_nearby_points_differ(self):
        assert not same_point(GeoCoordinate(0.0, 0.0), GeoCoordinate(0.0, 1e-6))
