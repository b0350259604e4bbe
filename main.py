# main.py
import argparse
import logging
import sys
from datetime import datetime, timezone
from functools import partial

from airports import find_airport, load_airports
from config import AIRPORTS_CSV, CRUISE_SPEED_KMH, LOG_LEVEL, PATH_POINTS
from flight_sun import build_flight_report
from inputs import parse_departure_time
from models import FlightReport, InvalidInputError
from route_map import save_map
from sun_fetcher import sun_times_with_fallback
from sunrise_sunset import sunrise_sunset

def print_summary(report: FlightReport):
    dep, arr, sun = report.departure, report.arrival, report.sun
    print(f"Route: {dep.code} ({dep.city}) -> {arr.code} ({arr.city})")
    print(f"Distance: {report.distance_km:.1f} km, initial bearing {report.bearing_deg:.0f}°")
    print(f"Duration: {report.duration_hours*60:.0f} min ({report.duration_hours:.2f} h)")
    print(f"Departure: {report.departure_time:%Y-%m-%d %H:%M} UTC, sun altitude {sun.departure_sun.altitude_deg:.1f}°")
    print(f"Arrival:   {report.arrival_time:%Y-%m-%d %H:%M} UTC, sun altitude {sun.arrival_sun.altitude_deg:.1f}°")
    print(f"Sunrise: {sun.sunrise_time:%Y-%m-%d %H:%M} UTC  Sunset: {sun.sunset_time:%Y-%m-%d %H:%M} UTC")
    print(f"Scenic side: {sun.scenic_side}")
    seats = ", ".join(report.recommended_seats) or "none (no sun during the flight)"
    print(f"Recommended window seats: {seats}")

def main(argv=None):
    parser = argparse.ArgumentParser(description="Flight sun-side planner - which window gets the sunrise/sunset")
    parser.add_argument("--from", dest="origin", required=True)
    parser.add_argument("--to", dest="dest", required=True)
    parser.add_argument("--dt", default=None, help="Departure time, ISO 8601 (default: now, UTC)")
    parser.add_argument("--points", type=int, default=PATH_POINTS, help=f"Path samples (default {PATH_POINTS})")
    parser.add_argument("--cruise", type=float, default=CRUISE_SPEED_KMH, help=f"Cruise speed (km/h) default {CRUISE_SPEED_KMH:.0f}")
    parser.add_argument("--use-sun-api", action="store_true", help="Look sunrise/sunset up on sunrise-sunset.org (falls back to local computation)")
    parser.add_argument("--no-ssl-verify", action="store_true", help="If SSL certs fail, disable verification (not for prod)")
    parser.add_argument("--airports", default=str(AIRPORTS_CSV))
    parser.add_argument("--out", default="route_map.html")
    parser.add_argument("--no-map", action="store_true", help="Skip writing the HTML map")
    args = parser.parse_args(argv)

    logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    try:
        departure_time = parse_departure_time(args.dt) if args.dt else datetime.now(timezone.utc)
    except ValueError:
        parser.error(f"invalid departure time: {args.dt!r}")

    df = load_airports(args.airports)
    origin = find_airport(df, args.origin)
    dest = find_airport(df, args.dest)
    if origin is None:
        parser.error(f"Airport '{args.origin}' not found in {args.airports}")
    if dest is None:
        parser.error(f"Airport '{args.dest}' not found in {args.airports}")

    provider = sunrise_sunset
    if args.use_sun_api:
        print("Fetching sunrise/sunset from sunrise-sunset.org...")
        provider = partial(sun_times_with_fallback, verify_ssl=not args.no_ssl_verify)

    try:
        report = build_flight_report(origin, dest, departure_time, cruise_kmh=args.cruise, n_points=args.points, sun_times_provider=provider)
    except InvalidInputError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    print_summary(report)

    if not args.no_map:
        out_path = save_map(report, out=args.out)
        print(f"Saved map to {out_path.absolute()}")
    print("Done.")
    return 0

if __name__ == "__main__":
    sys.exit(main())
