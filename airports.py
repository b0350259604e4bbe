# airports.py
from pathlib import Path
from typing import List, Optional

import pandas as pd

from config import AIRPORTS_CSV
from models import Airport, GeoCoordinate

# OurAirports has 'ident' for ICAO and 'iata_code' for IATA; the bundled table uses IATA for both
CODE_COLUMNS = ["ident", "iata_code", "icao_code", "gps_code"]
SEARCH_COLUMNS = ["ident", "iata_code", "name", "municipality", "iso_country"]

def load_airports(csv_path: Path = AIRPORTS_CSV) -> pd.DataFrame:
    # only blank cells are missing; "NA" is Namibia in OurAirports
    df = pd.read_csv(csv_path, low_memory=False, keep_default_na=False, na_values=[""])
    missing = {"latitude_deg", "longitude_deg"} - set(df.columns)
    if missing:
        raise ValueError(f"{csv_path} is missing columns: {sorted(missing)}")
    return df

def _text(row, col: str) -> str:
    value = row.get(col, "")
    return "" if pd.isna(value) else str(value)

def airport_from_row(row) -> Airport:
    code = _text(row, "iata_code") or _text(row, "ident")
    return Airport(
        code=code.upper(),
        name=_text(row, "name"),
        city=_text(row, "municipality"),
        country=_text(row, "iso_country"),
        coordinate=GeoCoordinate(float(row["latitude_deg"]), float(row["longitude_deg"])),
        timezone=_text(row, "timezone") or None,
    )

def find_airport(df: pd.DataFrame, code: str) -> Optional[Airport]:
    """Look an airport up by code (case-insensitive). None when not found."""
    code_up = str(code).upper().strip()
    if not code_up:
        return None
    for col in CODE_COLUMNS:
        if col in df.columns:
            r = df[df[col].fillna("").astype(str).str.upper() == code_up]
            if not r.empty:
                return airport_from_row(r.iloc[0])
    return None

def search_airports(df: pd.DataFrame, query: str, limit: int = 20) -> List[Airport]:
    """Airports whose code, name, city or country contains query."""
    q = str(query).upper().strip()
    if not q:
        return []
    mask = pd.Series(False, index=df.index)
    for col in SEARCH_COLUMNS:
        if col in df.columns:
            mask |= df[col].fillna("").astype(str).str.upper().str.contains(q, regex=False)
    return [airport_from_row(row) for _, row in df[mask].head(limit).iterrows()]
