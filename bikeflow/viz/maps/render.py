# bikeflow/viz/maps/render.py
import folium

from bikeflow.traffic.minutes import format_minute
from bikeflow.viz.overlays.stations import add_station_markers
from bikeflow.viz.widgets.legend import build_legend_widget
from bikeflow.viz.widgets.time_slider import build_time_slider

CENTER_LAT = 43.6532
CENTER_LON = -79.3832


def render_map_document(
    *,
    view,
    profile=None,
    title: str | None = None,
    half_width_minutes: int = 60,
    center=(CENTER_LAT, CENTER_LON),
):
    """
    Single place that assembles the full Folium map HTML document.
    """
    m = folium.Map(
        location=list(center),
        zoom_start=12,
        tiles="cartodbpositron",
        prefer_canvas=True,
    )

    add_station_markers(m, view, half_width_minutes=half_width_minutes)

    heading = f"{title} · {format_minute(view.filter_value)}" if title else None
    # wraps the leaflet container; the widgets below attach to #map-wrap
    m.get_root().html.add_child(
        folium.Element(
            f"""
<style>
#map-wrap {{
  position: relative;
  width: 100%;
}}

#map-wrap .leaflet-container {{
  width: 100% !important;
  height: 75vh !important;
  min-height: 520px;
}}

#map-title {{
  position: absolute;
  top: 12px;
  left: 50%;
  transform: translateX(-50%);
  background: rgba(255,255,255,0.95);
  padding: 6px 16px;
  border-radius: 999px;
  font-size: 14px;
  font-weight: 600;
  z-index: 1300;
  box-shadow: 0 1px 4px rgba(0,0,0,0.2);
}}
</style>

<script>
document.addEventListener("DOMContentLoaded", () => {{
  const mapEl = document.querySelector(".leaflet-container");
  if (!mapEl) return;

  const wrap = document.createElement("div");
  wrap.id = "map-wrap";
  mapEl.parentNode.insertBefore(wrap, mapEl);
  wrap.appendChild(mapEl);

  {"const t=document.createElement('div');t.id='map-title';t.textContent=%r;wrap.appendChild(t);" % heading if heading else ""}
}});
</script>
"""
        )
    )

    m.get_root().html.add_child(build_legend_widget(max_total=view.max_total_traffic))

    if profile:
        m.get_root().html.add_child(build_time_slider(view.filter_value, profile))

    return m.get_root().render()
