# inputs.py
"""Parsing of user-supplied query values for the CLI, API and UI."""

from datetime import datetime, timezone

def parse_departure_time(value: str) -> datetime:
    """ISO 8601 timestamp ('Z' accepted). One without an offset is read as UTC.

    Raises ValueError when the string is not a timestamp.
    """
    dt = datetime.fromisoformat(value.strip())
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)

def iso_utc(dt: datetime) -> str:
    """UTC timestamp with millisecond precision and a 'Z' suffix."""
    return dt.astimezone(timezone.utc).strftime("%Y-%m-%dT%H:%M:%S.") + f"{dt.microsecond // 1000:03d}Z"
