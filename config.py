# config.py
"""Shared configuration for the flight sun-side planner."""

import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent

# --------- Airports ----------
AIRPORTS_CSV = Path(os.getenv("AIRPORTS_CSV", str(BASE_DIR / "data" / "airports.csv")))
DEFAULT_ORIGIN = "JFK"
DEFAULT_DEST = "LAX"

# --------- Flight model ----------
CRUISE_SPEED_KMH = 800.0
PATH_POINTS = 21  # 20 equal segments

# --------- Scenic side ----------
VISIBLE_SUN_ALTITUDE_DEG = -6.0  # civil twilight
SIDE_THRESHOLD_DEG = 5.0

# --------- Sunrise/sunset web lookup ----------
SUN_API_URL = "https://api.sunrise-sunset.org/json"
SUN_API_TIMEOUT_S = 8

# --------- Logging ----------
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
