# streamlit_app.py
"""
Streamlit UI for the flight sun-side planner.
- Enter origin/destination airport codes (IATA, or ICAO with the full OurAirports table)
- Pick the departure date and time (UTC)
- Shows the scenic side, recommended window seats and a Folium route map with sun markers
"""

import datetime
from functools import partial

import streamlit as st
from streamlit_folium import st_folium

from airports import find_airport, load_airports, search_airports
from config import AIRPORTS_CSV, CRUISE_SPEED_KMH, DEFAULT_DEST, DEFAULT_ORIGIN, PATH_POINTS
from flight_sun import build_flight_report
from models import InvalidInputError
from route_map import build_folium_map
from sun_fetcher import sun_times_with_fallback
from sunrise_sunset import sunrise_sunset

SIDE_LABELS = {
    "left": "Left side (seat A)",
    "right": "Right side (seat F)",
    "both": "Either side (seats A and F)",
    "none": "No sun during the flight",
}

# --------- Helpers ----------
@st.cache_data
def cached_airports(csv_path=str(AIRPORTS_CSV)):
    return load_airports(csv_path)

def airport_search_box(label, key):
    search = st.text_input(f"Search {label} by name/city", key=f"q_{key}")
    if not search:
        return None
    matches = search_airports(df_airports, search)
    if not matches:
        st.info("No results found.")
        return None
    selection = st.selectbox(f"Pick {label} from results", options=[f"{a.code}: {a.name} ({a.city})" for a in matches], key=f"s_{key}")
    return selection.split(":")[0] if selection else None

# --------- Streamlit UI ----------
st.set_page_config(page_title="Flight Sun Side", layout="wide")

st.title("✈️ Which window gets the sun?")
st.markdown("Enter airport codes and a departure time (UTC), then click **Compute**.")

df_airports = cached_airports()

col1, col2, col3 = st.columns([1,1,1])

with col1:
    origin_input = st.text_input("Origin airport code", value=DEFAULT_ORIGIN)
    picked = airport_search_box("origin", "orig")
    if picked:
        origin_input = picked

with col2:
    dest_input = st.text_input("Destination airport code", value=DEFAULT_DEST)
    picked = airport_search_box("destination", "dest")
    if picked:
        dest_input = picked

with col3:
    dep_date = st.date_input("Departure date (UTC)", value=datetime.date.today())
    dep_time = st.time_input("Departure time (UTC)", value=datetime.time(10, 0), step=300)
    cruise_kmh = st.slider("Cruise speed (km/h)", min_value=600, max_value=1000, value=int(CRUISE_SPEED_KMH))
    points = st.slider("Path samples", min_value=5, max_value=200, value=PATH_POINTS)
    use_api = st.checkbox("Look up sunrise/sunset on sunrise-sunset.org", value=False)
    ssl_verify = st.checkbox("Verify SSL for the sunrise/sunset API", value=True)

st.divider()
compute = st.button("Compute")

if compute:
    origin = find_airport(df_airports, origin_input)
    dest = find_airport(df_airports, dest_input)
    if origin is None:
        st.error(f"Origin '{origin_input}' not found in airports CSV.")
    elif dest is None:
        st.error(f"Destination '{dest_input}' not found in airports CSV.")
    elif origin.code == dest.code:
        st.error("Departure and arrival airports cannot be the same.")
    else:
        st.success(f"Route: {origin.name} ({origin.code}) → {dest.name} ({dest.code})")

        departure_time = datetime.datetime.combine(dep_date, dep_time, tzinfo=datetime.timezone.utc)
        provider = partial(sun_times_with_fallback, verify_ssl=ssl_verify) if use_api else sunrise_sunset

        try:
            with st.spinner("Computing the sun along the route..."):
                report = build_flight_report(origin, dest, departure_time, cruise_kmh=float(cruise_kmh), n_points=points, sun_times_provider=provider)
        except InvalidInputError as e:
            st.error(f"Cannot compute this flight: {e}")
        else:
            sun = report.sun
            m1, m2, m3 = st.columns(3)
            m1.metric("Distance (km)", f"{report.distance_km:.0f}")
            m2.metric("Duration (hh:mm)", f"{int(report.duration_hours):02d}h {int((report.duration_hours-int(report.duration_hours))*60):02d}m")
            m3.metric("Initial bearing", f"{report.bearing_deg:.0f}°")

            st.subheader(SIDE_LABELS[str(sun.scenic_side)])
            st.write(f"Recommended window seats: {', '.join(report.recommended_seats) or 'none'}")
            st.write(f"Sunrise: {sun.sunrise_time:%Y-%m-%d %H:%M} UTC · Sunset: {sun.sunset_time:%Y-%m-%d %H:%M} UTC")
            st.write(f"Sun altitude at departure {sun.departure_sun.altitude_deg:.1f}°, at arrival {sun.arrival_sun.altitude_deg:.1f}°")

            folium_map = build_folium_map(report)
            st_folium(folium_map, width=1000, height=700)
            html = folium_map.get_root().render()
            st.download_button("Download map HTML", data=html, file_name="route_map.html", mime="text/html")
