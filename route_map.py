# route_map.py
from pathlib import Path

import folium

from config import VISIBLE_SUN_ALTITUDE_DEG
from models import FlightReport

def _side_of(angle: float) -> str:
    if angle > 0:
        return "right"
    if angle < 0:
        return "left"
    return "ahead"

def build_folium_map(report: FlightReport) -> folium.Map:
    points = [(p.latitude, p.longitude) for p in report.path]
    mid_lat = sum(p[0] for p in points) / len(points)
    mid_lon = sum(p[1] for p in points) / len(points)
    m = folium.Map(location=(mid_lat, mid_lon), zoom_start=3, tiles="OpenStreetMap")

    origin, dest = report.departure, report.arrival
    folium.Marker(
        [origin.coordinate.latitude, origin.coordinate.longitude],
        popup=f"{origin.code}: {origin.name}",
        tooltip="Origin"
    ).add_to(m)
    folium.Marker(
        [dest.coordinate.latitude, dest.coordinate.longitude],
        popup=f"{dest.code}: {dest.name}",
        tooltip="Destination"
    ).add_to(m)

    folium.PolyLine(points, color="blue", weight=3, opacity=0.8, popup="Great-circle route").add_to(m)

    # sun markers along the route
    for s in report.samples:
        visible = s.sun.altitude_deg > VISIBLE_SUN_ALTITUDE_DEG
        tooltip = (
            f"{s.time:%H:%M} UTC<br>Sun altitude: {s.sun.altitude_deg:.1f}°<br>"
            f"Sun azimuth: {s.sun.azimuth_deg:.0f}°<br>Sun side: {_side_of(s.relative_angle_deg)}"
        )
        folium.CircleMarker(
            [s.coordinate.latitude, s.coordinate.longitude],
            radius=6 if visible else 4,
            color="orange" if visible else "gray",
            fill=True,
            fill_opacity=0.9,
            tooltip=tooltip,
        ).add_to(m)

    seats = ", ".join(report.recommended_seats) or "-"
    html = f"<div style='background:white;padding:8px;border-radius:6px;'><b>Distance:</b> {report.distance_km:.1f} km<br>"
    html += f"<b>Duration:</b> {report.duration_hours*60:.0f} min ({report.duration_hours:.2f} h)<br>"
    html += f"<b>Scenic side:</b> {report.sun.scenic_side}<br>"
    html += f"<b>Window seats:</b> {seats}</div>"
    folium.map.Marker((mid_lat, mid_lon), icon=folium.DivIcon(html=html)).add_to(m)
    return m

def save_map(report: FlightReport, out="route_map.html") -> Path:
    out_path = Path(out)
    build_folium_map(report).save(out_path)
    return out_path
