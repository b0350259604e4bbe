# data/get_airports.py
"""Replace the bundled airport table with the full OurAirports dataset.

Only airports with an IATA code and scheduled service are kept, trimmed to the
columns the planner reads. The download has no 'timezone' column.

    python data/get_airports.py [out.csv]
"""
import io
import sys
from pathlib import Path

import pandas as pd
import requests

URL = "https://ourairports.com/data/airports.csv"
OUT = Path(__file__).parent / "airports.csv"
COLUMNS = ["ident", "iata_code", "name", "municipality", "iso_country", "latitude_deg", "longitude_deg"]

def download(out: Path = OUT, timeout: int = 60) -> Path:
    print(f"Downloading {URL} ...")
    r = requests.get(URL, timeout=timeout)
    r.raise_for_status()
    df = pd.read_csv(io.StringIO(r.text), low_memory=False, keep_default_na=False, na_values=[""])
    df = df[df["iata_code"].notna() & (df["scheduled_service"] == "yes")]
    df[COLUMNS].to_csv(out, index=False)
    print(f"Saved {len(df)} airports to {out}")
    return Path(out)

if __name__ == "__main__":
    download(Path(sys.argv[1]) if len(sys.argv) > 1 else OUT)
