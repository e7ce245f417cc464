import math

import folium

from bikeflow.traffic.minutes import format_minute

MIN_RADIUS = 3
MAX_RADIUS = 18

# share of a station's traffic that counts as "mostly departures/arrivals"
DOMINANT_SHARE = 0.60

DEPARTURE_COLOR = "#d73027"
ARRIVAL_COLOR = "#4575b4"
BALANCED_COLOR = "#666666"
IDLE_COLOR = "#333333"


def traffic_radius(total, max_total, *, min_radius=MIN_RADIUS, max_radius=MAX_RADIUS):
    """
    Marker radius with area proportional to traffic.
    """
    if max_total <= 0 or total <= 0:
        return float(min_radius)
    frac = math.sqrt(min(total, max_total) / max_total)
    return min_radius + (max_radius - min_radius) * frac


def traffic_color(arrivals, departures):
    total = arrivals + departures
    if total <= 0:
        return IDLE_COLOR
    if departures / total > DOMINANT_SHARE:
        return DEPARTURE_COLOR
    if arrivals / total > DOMINANT_SHARE:
        return ARRIVAL_COLOR
    return BALANCED_COLOR


def add_station_markers(m, view, *, half_width_minutes=60):
    """
    One CircleMarker per traffic record, sized by total traffic and
    colored by the arrivals/departures balance.
    """
    max_total = view.max_total_traffic
    label = format_minute(view.filter_value)

    for r in view.records:
        s = r.station
        popup = [
            f"<b>{s.name}</b>",
            f"Station ID: {s.station_id}",
            f"Window: {label}" if view.window is None else f"Window: {label} ± {half_width_minutes} min",
            f"Departures: {r.departures}",
            f"Arrivals: {r.arrivals}",
            f"Total: {r.total_traffic}",
        ]

        folium.CircleMarker(
            location=[s.lat, s.lon],
            radius=traffic_radius(r.total_traffic, max_total),
            fill=True,
            fill_color=traffic_color(r.arrivals, r.departures),
            fill_opacity=0.8 if r.total_traffic else 0.4,
            weight=0,
            popup="<br>".join(popup),
        ).add_to(m)
