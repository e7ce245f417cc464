# bikeflow/viz/widgets/legend.py
import folium

from bikeflow.viz.overlays.stations import (
    ARRIVAL_COLOR,
    BALANCED_COLOR,
    DEPARTURE_COLOR,
    IDLE_COLOR,
)


def build_legend_widget(*, max_total: int = 0):
    """
    Returns a Folium Element that injects a floating legend.
    """
    scale_block = ""
    if max_total > 0:
        scale_block = f"""
          <hr style="margin:6px 0">
          <div>size ∝ trips (max {max_total:,})</div>
        """

    return folium.Element(
        f"""
<style>
#map-legend {{
  position: absolute;
  bottom: 140px;
  left: 16px;
  background: rgba(255,255,255,0.95);
  padding: 8px 12px;
  border-radius: 10px;
  font-size: 12px;
  z-index: 1200;
}}
</style>

<script>
document.addEventListener("DOMContentLoaded", () => {{
  const wrap = document.getElementById("map-wrap");
  if (!wrap) return;

  const legend = document.createElement("div");
  legend.id = "map-legend";
  legend.innerHTML = `
    <div><span style="color:{DEPARTURE_COLOR}">●</span> mostly departures</div>
    <div><span style="color:{ARRIVAL_COLOR}">●</span> mostly arrivals</div>
    <div><span style="color:{BALANCED_COLOR}">●</span> balanced</div>
    <div><span style="color:{IDLE_COLOR}">●</span> no trips</div>
    {scale_block}
  `;
  wrap.appendChild(legend);
}});
</script>
"""
    )
