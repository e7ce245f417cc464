# bikeflow/viz/widgets/time_slider.py
import folium

from bikeflow.traffic.minutes import MINUTES_PER_DAY, UNFILTERED, format_minute


def build_time_slider(filter_value, profile, *, key="t"):
    """
    Time slider:
      - range input over -1..1439 (-1 = all day)
      - bars = departures per profile bin, click jumps to the bin's center
      - "All day" button clears the filter

    Moving the slider reloads the page with ?{key}=<minute>.
    """
    n_bins = len(profile)
    bin_minutes = MINUTES_PER_DAY // n_bins if n_bins else MINUTES_PER_DAY
    max_count = max(profile, default=0)

    active_bin = None
    if filter_value != UNFILTERED:
        active_bin = filter_value // bin_minutes

    bars = []
    for i, c in enumerate(profile):
        height = int((c / max_count) * 60) if max_count > 0 else 0
        center = i * bin_minutes + bin_minutes // 2
        label = f"{format_minute(i * bin_minutes)} · {c:,} departures"
        bars.append(
            f"""
            <div class="slider-bin"
                 onclick="setTime({center})"
                 title="{label}">
              <div class="slider-bar"
                   style="height:{height}px; opacity:{'1.0' if i == active_bin else '0.55'};">
              </div>
            </div>
            """
        )

    return folium.Element(
        f"""
<style>
#time-slider {{
  position: absolute;
  left: 0;
  right: 0;
  bottom: 14px;
  height: 120px;
  z-index: 1200;
  padding: 0 16px;
  background: linear-gradient(
    to top,
    rgba(255,255,255,0.92),
    rgba(255,255,255,0.55),
    rgba(255,255,255,0)
  );
}}

#slider-bins {{
  display: flex;
  align-items: flex-end;
  height: 64px;
}}

.slider-bin {{
  flex: 1;
  display: flex;
  align-items: flex-end;
  height: 100%;
  margin-right: 2px;
  cursor: pointer;
}}

.slider-bar {{
  width: 100%;
  background: #d73027;
  border-radius: 2px;
}}

#slider-row {{
  display: flex;
  align-items: center;
  gap: 10px;
  margin-top: 6px;
}}

#slider-input {{
  flex: 1;
}}

#slider-label {{
  min-width: 64px;
  background: rgba(120,200,200,0.85);
  padding: 4px 10px;
  border-radius: 999px;
  font-size: 12px;
  font-weight: 600;
  text-align: center;
}}
</style>

<div id="time-slider">
  <div id="slider-bins">
    {''.join(bars)}
  </div>
  <div id="slider-row">
    <button onclick="setTime({UNFILTERED})">All day</button>
    <input id="slider-input" type="range"
           min="{UNFILTERED}" max="{MINUTES_PER_DAY - 1}" step="1"
           value="{filter_value}"
           oninput="sliderLabel(this.value)"
           onchange="setTime(this.value)">
    <span id="slider-label">{format_minute(filter_value)}</span>
  </div>
</div>

<script>
function fmtMinute(v) {{
  v = parseInt(v, 10);
  if (v < 0) return "All day";
  const h = String(Math.floor(v / 60)).padStart(2, "0");
  const m = String(v % 60).padStart(2, "0");
  return h + ":" + m;
}}

function sliderLabel(v) {{
  document.getElementById("slider-label").textContent = fmtMinute(v);
}}

function setTime(t) {{
  const url = new URL(window.location.href);
  url.searchParams.set("{key}", String(t));
  window.location.href = url.toString();
}}

document.addEventListener("DOMContentLoaded", () => {{
  const wrap = document.getElementById("map-wrap");
  const slider = document.getElementById("time-slider");
  if (wrap && slider) wrap.appendChild(slider);
}});
</script>
"""
    )
