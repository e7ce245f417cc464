# bikeflow/viz/app/single.py
from __future__ import annotations

from flask import Flask, abort, jsonify, request

from bikeflow.traffic.minutes import UNFILTERED, format_minute
from bikeflow.viz.maps.render import render_map_document


def _filter_arg(engine):
    """
    Read ?t=<minute> (default: unfiltered) and resolve it against the engine.
    Bad values are a client error, never clamped.
    """
    t_raw = request.args.get("t", None)
    if t_raw is None or t_raw == "":
        t = UNFILTERED
    else:
        try:
            t = int(t_raw)
        except ValueError:
            abort(400, description=f"t must be an integer, got {t_raw!r}")

    try:
        return engine.view(t)
    except ValueError as e:
        abort(400, description=str(e))


def create_app(engine, *, title: str | None = None) -> Flask:
    """
    Flask app over a built TrafficEngine.

      GET /              HTML map, ?t=<minute> or -1 for all day
      GET /api/traffic   same view as JSON
    """
    app = Flask(__name__)
    profile = engine.departure_profile(60)

    @app.route("/")
    def _index():
        view = _filter_arg(engine)
        return render_map_document(
            view=view,
            profile=profile,
            title=title,
            half_width_minutes=engine.half_width_minutes,
        )

    @app.route("/api/traffic")
    def _traffic():
        view = _filter_arg(engine)
        return jsonify(
            {
                "filter": view.filter_value,
                "label": format_minute(view.filter_value),
                "window": view.window,
                "max_total_traffic": view.max_total_traffic,
                "stations": [r.to_dict() for r in view.records],
            }
        )

    return app


def serve_traffic_map(
    *,
    engine,
    host: str = "127.0.0.1",
    port: int = 8080,
    debug: bool = False,
    title: str | None = None,
):
    if engine is None:
        raise ValueError("serve_traffic_map requires a TrafficEngine")

    app = create_app(engine, title=title)
    app.run(host=host, port=int(port), debug=bool(debug))
