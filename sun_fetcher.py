# sun_fetcher.py
import logging
from datetime import date, datetime, timezone
from typing import Optional

import requests

from config import SUN_API_TIMEOUT_S, SUN_API_URL
from models import GeoCoordinate, SunTimes
from sunrise_sunset import sunrise_sunset

logger = logging.getLogger(__name__)

# sunrise-sunset.org reports "no event" as the first second of the epoch
_NO_EVENT_YEAR = 1970

def _parse_event(value: str) -> Optional[datetime]:
    dt = datetime.fromisoformat(value)
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    dt = dt.astimezone(timezone.utc)
    if dt.year == _NO_EVENT_YEAR:
        return None
    return dt

def fetch_sun_times(loc: GeoCoordinate, day: date, verify_ssl: bool = True, timeout: float = SUN_API_TIMEOUT_S) -> SunTimes:
    """
    Returns SunTimes (UTC) from the sunrise-sunset.org API.
    If the call fails or the payload is unusable, this function raises an exception.
    """
    params = {
        "lat": f"{loc.latitude:.6f}",
        "lng": f"{loc.longitude:.6f}",
        "date": day.isoformat(),
        "formatted": 0,
    }
    resp = requests.get(SUN_API_URL, params=params, timeout=timeout, verify=verify_ssl)
    resp.raise_for_status()
    data = resp.json()
    if data.get("status") != "OK" or not data.get("results"):
        raise ValueError(f"sunrise-sunset API returned status {data.get('status')!r}")
    results = data["results"]
    return SunTimes(sunrise=_parse_event(results["sunrise"]), sunset=_parse_event(results["sunset"]))

def sun_times_with_fallback(loc: GeoCoordinate, day: date, verify_ssl: bool = True, timeout: float = SUN_API_TIMEOUT_S) -> SunTimes:
    """
    Best-effort web lookup. Falls back to the local sunrise_sunset computation
    when the API is slow, down or returns something unexpected.
    """
    try:
        return fetch_sun_times(loc, day, verify_ssl=verify_ssl, timeout=timeout)
    except (requests.RequestException, ValueError, KeyError) as e:
        logger.warning("sunrise-sunset lookup failed for %s on %s (%s); using local computation", loc, day, e)
        return sunrise_sunset(loc, day)
